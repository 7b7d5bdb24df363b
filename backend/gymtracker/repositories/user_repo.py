# gymtracker/repositories/user_repo.py
from __future__ import annotations
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from gymtracker.models import User
from gymtracker.repositories.base import BaseRepository

class UserRepository(BaseRepository[User]):
    model = User

    # READS
    def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(User).where(User.username == username)
        return self.db.execute(stmt).scalar_one_or_none()

    # WRITES
    def create(self, *, username: str, password_hash: str) -> User:
        user = User(username=username, password_hash=password_hash)
        try:
            with self.unit_of_work():
                self.db.add(user)
        except IntegrityError:
            # Re-raise a clean marker the router maps to 409
            raise ValueError("username_taken")
        self.db.refresh(user)
        return user
