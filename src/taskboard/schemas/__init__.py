"""
Pydantic schemas package.

This package contains all Pydantic models for request/response validation,
organized by domain:
- user: User creation, updates, and responses
- task: Task creation, updates, filtering, and dashboard responses
- rpc: Procedure call envelopes
- common: Shared/common schemas (errors, health, id inputs)

Usage:
    from taskboard.schemas import CreateTaskRequest, TaskFilter, DashboardResponse
    from taskboard.schemas.common import ErrorResponse
"""

# Common schemas
from taskboard.schemas.common import (
    ErrorResponse,
    HealthCheckResponse,
    IdRequest,
    UUIDStr,
)

# User schemas
from taskboard.schemas.user import (
    CreateUserRequest,
    UpdateUserRequest,
    UpdateUserProcedureInput,
    UserResponse,
    UserListResponse,
)

# Task schemas
from taskboard.schemas.task import (
    CreateTaskRequest,
    UpdateTaskRequest,
    UpdateTaskProcedureInput,
    TaskFilter,
    TaskResponse,
    TaskListResponse,
    DashboardResponse,
)

# RPC schemas
from taskboard.schemas.rpc import RPCResponse, HealthcheckResult

__all__ = [
    # Common
    "ErrorResponse",
    "HealthCheckResponse",
    "IdRequest",
    "UUIDStr",

    # User
    "CreateUserRequest",
    "UpdateUserRequest",
    "UpdateUserProcedureInput",
    "UserResponse",
    "UserListResponse",

    # Task
    "CreateTaskRequest",
    "UpdateTaskRequest",
    "UpdateTaskProcedureInput",
    "TaskFilter",
    "TaskResponse",
    "TaskListResponse",
    "DashboardResponse",

    # RPC
    "RPCResponse",
    "HealthcheckResult",
]
