"""
Tasks API

CRUD endpoints for tasks. The list endpoint accepts the task filter
fields as query parameters.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query, status

from taskboard.core.dependencies import get_task_service
from taskboard.core.exceptions import ApplicationException
from taskboard.models.enums import TaskStatus
from taskboard.services.task_service import TaskService
from taskboard.schemas.task import (
    CreateTaskRequest,
    UpdateTaskRequest,
    TaskFilter,
    TaskResponse,
    TaskListResponse,
)
from taskboard.api.errors import to_http_exception


router = APIRouter(
    prefix="/tasks",
    tags=["Tasks"]
)


@router.get("", response_model=TaskListResponse)
def list_tasks(
    task_status: Optional[TaskStatus] = Query(None, alias="status"),
    assigned_member_id: Optional[UUID] = None,
    overdue_only: Optional[bool] = None,
    deadline_before: Optional[datetime] = None,
    deadline_after: Optional[datetime] = None,
    service: TaskService = Depends(get_task_service)
):
    """
    List tasks.

    Query Parameters:
    - status: Exact status match
    - assigned_member_id: Exact assignee match
    - overdue_only: Only tasks whose deadline has passed
    - deadline_before / deadline_after: Strict deadline bounds
    """
    task_filter = TaskFilter(
        status=task_status,
        assigned_member_id=str(assigned_member_id) if assigned_member_id else None,
        overdue_only=overdue_only,
        deadline_before=deadline_before,
        deadline_after=deadline_after,
    )

    tasks = service.list_tasks(task_filter)
    return TaskListResponse(
        tasks=[TaskResponse.model_validate(task) for task in tasks],
        total_count=len(tasks)
    )


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(task_id: UUID, service: TaskService = Depends(get_task_service)):
    try:
        task = service.get_task(str(task_id))
    except ApplicationException as e:
        raise to_http_exception(e)
    return TaskResponse.model_validate(task)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(request: CreateTaskRequest, service: TaskService = Depends(get_task_service)):
    try:
        task = service.create_task(request)
    except ApplicationException as e:
        raise to_http_exception(e)
    return TaskResponse.model_validate(task)


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: UUID,
    request: UpdateTaskRequest,
    service: TaskService = Depends(get_task_service)
):
    try:
        task = service.update_task(str(task_id), request)
    except ApplicationException as e:
        raise to_http_exception(e)
    return TaskResponse.model_validate(task)


@router.delete("/{task_id}")
def delete_task(task_id: UUID, service: TaskService = Depends(get_task_service)):
    service.delete_task(str(task_id))
    return {"message": "Task deleted", "task_id": str(task_id)}
