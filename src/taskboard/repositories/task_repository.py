"""
Task Repository

Data access layer for tasks, including the composable list filter.
"""

from datetime import datetime
from typing import List, Optional
from sqlalchemy import and_
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from taskboard.models.task import Task
from taskboard.models.user import User
from taskboard.repositories.base import BaseRepository
from taskboard.schemas.task import TaskFilter
from taskboard.core.exceptions import DatabaseException


def build_task_filters(task_filter: Optional[TaskFilter], now: datetime) -> List[ColumnElement]:
    """
    Translate a TaskFilter into SQL conditions.

    Each field that is set contributes one condition; unset fields add
    nothing. ``now`` is only consulted when ``overdue_only`` is true.

    Args:
        task_filter: Criteria to apply, or None for no filtering
        now: Reference instant (naive UTC) for ``overdue_only``

    Returns:
        Conditions to be combined with AND
    """
    conditions: List[ColumnElement] = []
    if task_filter is None:
        return conditions

    if task_filter.status is not None:
        conditions.append(Task.status == task_filter.status)

    if task_filter.assigned_member_id is not None:
        conditions.append(Task.assigned_member_id == task_filter.assigned_member_id)

    if task_filter.overdue_only:
        conditions.append(Task.deadline < now)

    if task_filter.deadline_before is not None:
        conditions.append(Task.deadline < task_filter.deadline_before)

    if task_filter.deadline_after is not None:
        conditions.append(Task.deadline > task_filter.deadline_after)

    return conditions


class TaskRepository(BaseRepository[Task]):
    """Repository for tasks."""

    def __init__(self, db: Session):
        super().__init__(Task, db)

    def get_filtered(self, task_filter: Optional[TaskFilter], now: datetime) -> List[Task]:
        """
        Get tasks matching every criterion set on the filter.

        No ORDER BY is applied; rows come back in store order.
        """
        try:
            query = self.db.query(Task)
            conditions = build_task_filters(task_filter, now)
            if conditions:
                query = query.filter(and_(*conditions))
            return query.all()
        except Exception as e:
            raise DatabaseException("Failed to filter tasks") from e

    def get_with_assignees(self) -> List[Task]:
        """Tasks whose assignee still exists (inner join on users)."""
        try:
            return (
                self.db.query(Task)
                .join(User, Task.assigned_member_id == User.id)
                .all()
            )
        except Exception as e:
            raise DatabaseException("Failed to load tasks with assignees") from e

    def count_for_member(self, user_id: str) -> int:
        return self.count({"assigned_member_id": user_id})
