"""
Task Pydantic Schemas
"""

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict, field_validator

from taskboard.core.clock import to_naive_utc
from taskboard.models.enums import TaskStatus
from taskboard.schemas.common import UUIDStr


class CreateTaskRequest(BaseModel):
    """Request schema for creating a task."""

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    deadline: datetime
    assigned_member_id: UUIDStr
    effort_spent: float = Field(0, ge=0, allow_inf_nan=False)
    status: TaskStatus = TaskStatus.TODO
    dependencies: List[str] = Field(default_factory=list)

    @field_validator("deadline")
    @classmethod
    def normalize_deadline(cls, v):
        return to_naive_utc(v)


class UpdateTaskRequest(BaseModel):
    """
    Request schema for updating a task.

    Only fields present in the payload are applied. ``description`` may be
    set to null to clear it; every other field rejects an explicit null.
    """

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    deadline: Optional[datetime] = None
    assigned_member_id: Optional[UUIDStr] = None
    effort_spent: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    status: Optional[TaskStatus] = None
    dependencies: Optional[List[str]] = None

    @field_validator("title", "deadline", "assigned_member_id", "effort_spent", "status", "dependencies")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("field may be omitted but not set to null")
        return v

    @field_validator("deadline")
    @classmethod
    def normalize_deadline(cls, v):
        return to_naive_utc(v)


class UpdateTaskProcedureInput(UpdateTaskRequest):
    """updateTask procedure input: the target id plus the partial update."""

    id: UUIDStr


class TaskFilter(BaseModel):
    """
    Optional criteria for listing tasks.

    Every field that is set narrows the result (logical AND).
    """

    status: Optional[TaskStatus] = None
    assigned_member_id: Optional[UUIDStr] = None
    overdue_only: Optional[bool] = None
    deadline_before: Optional[datetime] = None
    deadline_after: Optional[datetime] = None

    @field_validator("deadline_before", "deadline_after")
    @classmethod
    def normalize_bounds(cls, v):
        return to_naive_utc(v)


class TaskResponse(BaseModel):
    """Response schema for a task."""

    id: str
    title: str
    description: Optional[str] = None
    deadline: datetime
    assigned_member_id: str
    effort_spent: float
    status: TaskStatus
    dependencies: List[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    @field_validator("dependencies", mode="before")
    @classmethod
    def coerce_dependencies(cls, v):
        return list(v) if v is not None else []


class TaskListResponse(BaseModel):
    """Response schema for listing tasks."""

    tasks: List[TaskResponse]
    total_count: int


class DashboardResponse(BaseModel):
    """Dashboard buckets; keys are camelCase on the wire."""

    overdue: List[TaskResponse]
    nearing_deadline: List[TaskResponse] = Field(..., alias="nearingDeadline")
    in_progress: List[TaskResponse] = Field(..., alias="inProgress")
    total: int

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_buckets(cls, buckets) -> "DashboardResponse":
        return cls(
            overdue=[TaskResponse.model_validate(t) for t in buckets.overdue],
            nearing_deadline=[TaskResponse.model_validate(t) for t in buckets.nearing_deadline],
            in_progress=[TaskResponse.model_validate(t) for t in buckets.in_progress],
            total=buckets.total,
        )
