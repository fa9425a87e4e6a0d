"""Users blueprint (create, list, get)."""
from __future__ import annotations

from dataclasses import asdict

from flask import Blueprint, current_app, request
from pydantic import ValidationError
from sqlalchemy.orm import Session

from ...db.session import get_db
from ...errors import ClientInputError, NotFoundError, ok
from ...services.user_service import UserService
from .schemas import UserCreateIn, UserCreatedOut, UserOut


bp = Blueprint("users", __name__)


def _service() -> UserService:
    session: Session = get_db().Session()
    return UserService(session, rounds=current_app.config.get("BCRYPT_ROUNDS", 10))


def _binding_message(err: ValidationError) -> str:
    parts = []
    for e in err.errors():
        loc = ".".join(str(x) for x in e.get("loc", ()))
        parts.append(f"{loc}: {e['msg']}" if loc else e["msg"])
    return "; ".join(parts)


@bp.get("")
def list_users():
    svc = _service()
    items = [UserOut.model_validate(asdict(u)).model_dump() for u in svc.list_users()]
    return ok(items)


@bp.post("")
def create_user():
    try:
        payload = UserCreateIn.model_validate_json(request.get_data() or b"")
    except ValidationError as e:
        raise ClientInputError(_binding_message(e)) from e
    svc = _service()
    user = svc.create_user(
        name=payload.name,
        email=payload.email,
        phone_number=payload.phone_number,
        password=payload.password,
    )
    return ok(UserCreatedOut.model_validate(asdict(user)).model_dump(), 201)


@bp.get("/<int:user_id>")
def get_user(user_id: int):
    svc = _service()
    user = svc.get_user(user_id)
    if not user:
        raise NotFoundError("User not found")
    return ok(UserOut.model_validate(asdict(user)).model_dump())
