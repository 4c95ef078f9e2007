"""
Task Service

Task CRUD with assignee checks and the filtered list query.
"""

import logging
from datetime import datetime
from typing import List, Optional

from taskboard.core.clock import utc_now
from taskboard.core.exceptions import NotFoundException
from taskboard.models.task import Task
from taskboard.repositories.unit_of_work import UnitOfWork
from taskboard.schemas.task import CreateTaskRequest, UpdateTaskRequest, TaskFilter

logger = logging.getLogger("TASK_SERVICE")


class TaskService:
    """Task operations on top of a UnitOfWork."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def _require_assignee(self, user_id: str) -> None:
        if not self.uow.users.exists(user_id):
            logger.warning(f"Rejected task for unknown assignee {user_id}")
            raise NotFoundException.does_not_exist("User", user_id)

    def create_task(self, request: CreateTaskRequest) -> Task:
        """
        Insert a task after checking that its assignee exists.

        Defaults (effort_spent=0, status=todo, dependencies=[]) come from
        the request schema.
        """
        with self.uow:
            self._require_assignee(request.assigned_member_id)
            task = self.uow.tasks.create_from_dict(request.model_dump())
            self.uow.commit()

        logger.info(f"Created task {task.id} for user {task.assigned_member_id}")
        return task

    def list_tasks(self, task_filter: Optional[TaskFilter] = None, now: Optional[datetime] = None) -> List[Task]:
        return self.uow.tasks.get_filtered(task_filter, now or utc_now())

    def get_task(self, task_id: str) -> Task:
        return self.uow.tasks.get_or_fail(task_id)

    def update_task(self, task_id: str, request: UpdateTaskRequest) -> Task:
        """
        Apply the fields present in ``request``.

        ``description`` set to None clears it. A new assignee must exist.
        """
        updates = request.model_dump(exclude_unset=True)

        with self.uow:
            task = self.get_task(task_id)
            if not updates:
                return task

            if "assigned_member_id" in updates:
                self._require_assignee(updates["assigned_member_id"])

            task = self.uow.tasks.update_by_id(task_id, updates)
            self.uow.commit()

        logger.info(f"Updated task {task_id}: {sorted(updates)}")
        return task

    def delete_task(self, task_id: str) -> None:
        """Delete a task; a missing id is not an error."""
        with self.uow:
            deleted = self.uow.tasks.delete_by_id(task_id)
            self.uow.commit()

        if deleted:
            logger.info(f"Deleted task {task_id}")
        else:
            logger.debug(f"Delete of missing task {task_id} ignored")
