"""Health check endpoints."""
from __future__ import annotations

from flask import Blueprint

from ...errors import ok


bp = Blueprint("health", __name__)


@bp.get("")
def alive():
    return ok({"status": "ok"})
