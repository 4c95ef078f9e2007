"""
Repositories package.

This package contains all data access layer repositories following the Repository Pattern.
Each repository extends BaseRepository and provides domain-specific data operations.

Usage:
    from taskboard.repositories import UnitOfWork
    from taskboard.core.database import get_db

    def list_users(db: Session = Depends(get_db)):
        with UnitOfWork(db) as uow:
            return uow.users.get_all()
"""

from taskboard.repositories.base import BaseRepository
from taskboard.repositories.user_repository import UserRepository
from taskboard.repositories.task_repository import TaskRepository, build_task_filters
from taskboard.repositories.unit_of_work import UnitOfWork

__all__ = [
    "BaseRepository",
    "UserRepository",
    "TaskRepository",
    "build_task_filters",
    "UnitOfWork",
]
