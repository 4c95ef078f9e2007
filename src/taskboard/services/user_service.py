"""
User Service

Business rules for team members: unique emails, partial updates and the
delete guard against users that still have tasks assigned.
"""

import logging
from typing import List

from taskboard.core.exceptions import ConflictException, NotFoundException
from taskboard.models.user import User
from taskboard.repositories.unit_of_work import UnitOfWork
from taskboard.schemas.user import CreateUserRequest, UpdateUserRequest

logger = logging.getLogger("USER_SERVICE")


class UserService:
    """User operations on top of a UnitOfWork."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def create_user(self, request: CreateUserRequest) -> User:
        with self.uow:
            user = self.uow.users.create_user(request.model_dump())
            self.uow.commit()
        logger.info(f"Created user {user.id} <{user.email}>")
        return user

    def list_users(self) -> List[User]:
        return self.uow.users.get_all()

    def get_user(self, user_id: str) -> User:
        user = self.uow.users.get(user_id)
        if user is None:
            raise NotFoundException("User", user_id)
        return user

    def update_user(self, user_id: str, request: UpdateUserRequest) -> User:
        """
        Apply the fields present in ``request``.

        An empty update returns the stored user unchanged.
        """
        updates = request.model_dump(exclude_unset=True)
        if not updates:
            return self.get_user(user_id)

        with self.uow:
            user = self.uow.users.update_user(user_id, updates)
            if user is None:
                raise NotFoundException("User", user_id)
            self.uow.commit()

        logger.info(f"Updated user {user_id}: {sorted(updates)}")
        return user

    def delete_user(self, user_id: str) -> None:
        with self.uow:
            assigned = self.uow.tasks.count_for_member(user_id)
            if assigned > 0:
                logger.warning(f"Refusing to delete user {user_id}: {assigned} assigned task(s)")
                raise ConflictException(
                    "Cannot delete user with assigned tasks",
                    {"user_id": user_id, "assigned_tasks": assigned},
                )

            if not self.uow.users.delete_by_id(user_id):
                raise NotFoundException("User", user_id)
            self.uow.commit()

        logger.info(f"Deleted user {user_id}")
