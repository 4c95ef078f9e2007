"""
User Repository

Data access layer for user records.
"""

from typing import Any, Dict, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from taskboard.models.user import User
from taskboard.repositories.base import BaseRepository
from taskboard.core.exceptions import DuplicateException


class UserRepository(BaseRepository[User]):
    """Repository for user records."""

    def __init__(self, db: Session):
        super().__init__(User, db)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def create_user(self, user_data: Dict[str, Any]) -> User:
        email = user_data.get("email")
        if self.get_by_email(email):
            raise DuplicateException("User", "email", email)

        try:
            return self.create_from_dict(user_data)
        except IntegrityError as e:
            raise DuplicateException("User", "email", email) from e

    def update_user(self, user_id: str, updates: Dict[str, Any]) -> Optional[User]:
        email = updates.get("email")
        if email is not None:
            existing = self.get_by_email(email)
            if existing is not None and existing.id != user_id:
                raise DuplicateException("User", "email", email)

        try:
            return self.update_by_id(user_id, updates)
        except IntegrityError as e:
            raise DuplicateException("User", "email", email) from e
