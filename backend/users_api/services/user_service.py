"""User service encapsulating business rules."""
from __future__ import annotations

from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from ..db.repositories.user_repo import UserRepository
from ..domain.user import User
from ..security.passwords import DEFAULT_ROUNDS, hash_password
from ..utils.codes import generate_code


class UserService:
    def __init__(
        self,
        session: Session,
        *,
        rounds: int = DEFAULT_ROUNDS,
        code_factory: Callable[[], str] = generate_code,
    ) -> None:
        self.repo = UserRepository(session)
        self.rounds = rounds
        self.code_factory = code_factory

    def list_users(self) -> List[User]:
        return self.repo.list()

    def create_user(self, *, name: str, email: str, phone_number: str, password: str) -> User:
        # Hash before anything touches the database so a HashError never leaves a row behind.
        digest = hash_password(password, rounds=self.rounds)
        user = User(code=self.code_factory(), name=name, email=email, phone_number=phone_number)
        user.id = self.repo.create(user, digest)
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        return self.repo.get(user_id)
