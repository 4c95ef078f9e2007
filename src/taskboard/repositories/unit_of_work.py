"""
Unit of Work Pattern

Coordinates the user and task repositories over one database session.
Repositories only flush; a service opens the unit of work, performs its
checks and writes, and commits once at the end.

Usage:
    with uow:
        user = uow.users.get_or_fail(user_id)
        task = uow.tasks.create_from_dict(task_data)
        uow.commit()
    # Rolled back if an exception escapes before commit
"""

from sqlalchemy.orm import Session
import logging

from taskboard.repositories.user_repository import UserRepository
from taskboard.repositories.task_repository import TaskRepository

logger = logging.getLogger("UNIT_OF_WORK")


class UnitOfWork:
    """
    Unit of Work pattern implementation for coordinating transactions.

    Attributes:
        db: SQLAlchemy database session
        users: UserRepository instance
        tasks: TaskRepository instance
        _committed: Whether the current ``with`` block has committed
    """

    def __init__(self, db: Session):
        self.db = db
        self._committed = False

        # Initialize all repositories with the same session
        self.users = UserRepository(db)
        self.tasks = TaskRepository(db)

    def commit(self) -> None:
        """
        Commit the current transaction.

        Raises:
            Exception: Re-raised after rolling back if the commit fails
        """
        try:
            self.db.commit()
            self._committed = True
            logger.debug("Unit of Work committed successfully")
        except Exception as e:
            logger.error(f"Error during commit, rolling back: {e}")
            self.rollback()
            raise

    def rollback(self) -> None:
        self.db.rollback()
        logger.debug("Unit of Work rolled back")

    def __enter__(self):
        self._committed = False
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Roll back if an exception escaped before commit.

        Returns:
            False to propagate exceptions
        """
        if exc_type is not None and not self._committed:
            logger.warning(f"Exception in Unit of Work context, rolling back: {exc_type.__name__}")
            self.rollback()

        return False
