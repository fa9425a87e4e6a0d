"""SQLAlchemy-backed User repository returning dataclasses."""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models.user import UserModel
from ...domain.user import User
from ...errors import StoreError

# Everything except the password digest.
_PUBLIC_COLUMNS = (
    UserModel.id,
    UserModel.code,
    UserModel.name,
    UserModel.email,
    UserModel.phone_number,
    UserModel.created_at,
)


def _store_error(e: SQLAlchemyError) -> StoreError:
    # Prefer the driver message over SQLAlchemy's wrapped form.
    return StoreError(str(getattr(e, "orig", None) or e))


def _to_dc(row) -> User:
    return User(
        id=row.id,
        code=row.code,
        name=row.name,
        email=row.email,
        phone_number=row.phone_number,
        created_at=row.created_at,
    )


class UserRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, data: User, password_digest: str) -> int:
        m = UserModel(
            code=data.code,
            name=data.name,
            email=data.email,
            phone_number=data.phone_number,
            password=password_digest,
        )
        try:
            self.session.add(m)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise _store_error(e) from e
        return m.id

    def list(self) -> List[User]:
        stmt = select(*_PUBLIC_COLUMNS).order_by(UserModel.id)
        try:
            rows = self.session.execute(stmt).all()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise _store_error(e) from e
        return [_to_dc(r) for r in rows]

    def get(self, user_id: int) -> Optional[User]:
        stmt = select(*_PUBLIC_COLUMNS).where(UserModel.id == user_id).limit(1)
        try:
            row = self.session.execute(stmt).first()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise _store_error(e) from e
        return _to_dc(row) if row else None
