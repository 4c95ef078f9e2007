"""
ORM Models package.

This package contains all SQLAlchemy ORM models. All models are imported
here to ensure proper model registration with SQLAlchemy.

Usage:
    from taskboard.models import User, Task, TaskStatus
    from taskboard.models.base import Base
"""

from taskboard.models.base import Base, UUIDPrimaryKeyMixin, CreatedAtMixin
from taskboard.models.enums import TaskStatus
from taskboard.models.user import User
from taskboard.models.task import Task

__all__ = [
    # Base classes
    "Base",
    "UUIDPrimaryKeyMixin",
    "CreatedAtMixin",

    # Enums
    "TaskStatus",

    # Models
    "User",
    "Task",
]
