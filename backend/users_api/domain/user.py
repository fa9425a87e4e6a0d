"""Domain dataclass for User entities (DB-agnostic)."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class User:
    code: str
    name: str = ""
    email: str = ""
    phone_number: str = ""
    id: Optional[int] = None
    created_at: Optional[datetime] = None
