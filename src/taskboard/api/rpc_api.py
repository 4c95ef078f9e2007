"""
RPC API

Exposes the service operations as named procedures behind a single
endpoint: ``POST /api/rpc/{procedure}`` with the procedure input as the
JSON body, or ``GET /api/rpc/{procedure}?input=<json>`` for queries.
Successful calls answer ``{"result": ...}``; failures answer an
ErrorResponse with the mapped status code.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type

from fastapi import APIRouter, Body, Depends, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from taskboard.core.clock import utc_now
from taskboard.core.dependencies import get_uow
from taskboard.core.exceptions import ApplicationException
from taskboard.repositories.unit_of_work import UnitOfWork
from taskboard.services.dashboard_service import DashboardService
from taskboard.services.task_service import TaskService
from taskboard.services.user_service import UserService
from taskboard.schemas.common import ErrorResponse, IdRequest
from taskboard.schemas.rpc import RPCResponse, HealthcheckResult
from taskboard.schemas.user import (
    CreateUserRequest,
    UpdateUserRequest,
    UpdateUserProcedureInput,
    UserResponse,
)
from taskboard.schemas.task import (
    CreateTaskRequest,
    UpdateTaskRequest,
    UpdateTaskProcedureInput,
    TaskFilter,
    TaskResponse,
    DashboardResponse,
)
from taskboard.api.errors import classify, validation_error_details

logger = logging.getLogger("RPC_API_LOGGER")

rpc_api_router = APIRouter(prefix="/rpc", tags=["rpc"])


@dataclass
class Procedure:
    """
    A callable procedure.

    Attributes:
        handler: Called with the UnitOfWork and the validated input
        input_model: Schema for the input, or None when it takes no input
        optional_input: Whether an absent input is passed through as None
        kind: "query" (GET or POST) or "mutation" (POST only)
    """
    handler: Callable[[UnitOfWork, Any], Any]
    input_model: Optional[Type[BaseModel]] = None
    optional_input: bool = False
    kind: str = "query"


# ============================================================================
# Procedure handlers
# ============================================================================

def _create_user(uow: UnitOfWork, params: CreateUserRequest):
    return UserResponse.model_validate(UserService(uow).create_user(params))


def _get_users(uow: UnitOfWork, _params):
    return [UserResponse.model_validate(u) for u in UserService(uow).list_users()]


def _get_user_by_id(uow: UnitOfWork, params: IdRequest):
    return UserResponse.model_validate(UserService(uow).get_user(params.id))


def _update_user(uow: UnitOfWork, params: UpdateUserProcedureInput):
    request = UpdateUserRequest.model_validate(params.model_dump(exclude_unset=True, exclude={"id"}))
    return UserResponse.model_validate(UserService(uow).update_user(params.id, request))


def _delete_user(uow: UnitOfWork, params: IdRequest):
    UserService(uow).delete_user(params.id)
    return None


def _create_task(uow: UnitOfWork, params: CreateTaskRequest):
    return TaskResponse.model_validate(TaskService(uow).create_task(params))


def _get_tasks(uow: UnitOfWork, params: Optional[TaskFilter]):
    return [TaskResponse.model_validate(t) for t in TaskService(uow).list_tasks(params)]


def _get_task_by_id(uow: UnitOfWork, params: IdRequest):
    return TaskResponse.model_validate(TaskService(uow).get_task(params.id))


def _update_task(uow: UnitOfWork, params: UpdateTaskProcedureInput):
    request = UpdateTaskRequest.model_validate(params.model_dump(exclude_unset=True, exclude={"id"}))
    return TaskResponse.model_validate(TaskService(uow).update_task(params.id, request))


def _delete_task(uow: UnitOfWork, params: IdRequest):
    TaskService(uow).delete_task(params.id)
    return None


def _get_dashboard_tasks(uow: UnitOfWork, _params):
    return DashboardResponse.from_buckets(DashboardService(uow).get_dashboard())


def _healthcheck(_uow: UnitOfWork, _params):
    return HealthcheckResult(status="ok", timestamp=utc_now().isoformat() + "Z")


PROCEDURES: Dict[str, Procedure] = {
    # User operations
    "createUser": Procedure(_create_user, CreateUserRequest, kind="mutation"),
    "getUsers": Procedure(_get_users),
    "getUserById": Procedure(_get_user_by_id, IdRequest),
    "updateUser": Procedure(_update_user, UpdateUserProcedureInput, kind="mutation"),
    "deleteUser": Procedure(_delete_user, IdRequest, kind="mutation"),

    # Task operations
    "createTask": Procedure(_create_task, CreateTaskRequest, kind="mutation"),
    "getTasks": Procedure(_get_tasks, TaskFilter, optional_input=True),
    "getTaskById": Procedure(_get_task_by_id, IdRequest),
    "updateTask": Procedure(_update_task, UpdateTaskProcedureInput, kind="mutation"),
    "deleteTask": Procedure(_delete_task, IdRequest, kind="mutation"),

    # Dashboard
    "getDashboardTasks": Procedure(_get_dashboard_tasks),
    "healthcheck": Procedure(_healthcheck),
}


# ============================================================================
# Dispatch
# ============================================================================

def _error(status_code: int, error: str, detail: Any = None, error_code: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, detail=detail, error_code=error_code)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def dispatch(name: str, raw_input: Any, uow: UnitOfWork, method: str = "POST") -> JSONResponse:
    """
    Validate ``raw_input`` against the procedure's schema and run it.

    Args:
        name: Procedure name
        raw_input: Decoded JSON input (None when absent)
        uow: Unit of work for this request
        method: HTTP method the call arrived with

    Returns:
        JSONResponse with either the result envelope or an ErrorResponse
    """
    procedure = PROCEDURES.get(name)
    if procedure is None:
        return _error(status.HTTP_404_NOT_FOUND, f"Unknown procedure: {name}", error_code="NOT_FOUND")

    if procedure.kind == "mutation" and method != "POST":
        return _error(
            status.HTTP_405_METHOD_NOT_ALLOWED,
            f"Procedure {name} is a mutation and must be called with POST",
            error_code="METHOD_NOT_ALLOWED",
        )

    try:
        params = None
        if procedure.input_model is not None and not (raw_input is None and procedure.optional_input):
            params = procedure.input_model.model_validate(raw_input)
    except ValidationError as e:
        return _error(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            f"Invalid input for {name}",
            detail=validation_error_details(e.errors()),
            error_code="VALIDATION_ERROR",
        )

    try:
        result = procedure.handler(uow, params)
    except ApplicationException as e:
        status_code, error_code = classify(e)
        if status_code >= 500:
            logger.error(f"Procedure {name} failed: {e.message}", exc_info=e)
        else:
            logger.info(f"Procedure {name} rejected: {e.message}")
        return _error(status_code, e.message, detail=e.details or None, error_code=error_code)

    return JSONResponse(content={"result": jsonable_encoder(result, by_alias=True)})


@rpc_api_router.post("/{procedure}", response_model=RPCResponse)
def call_procedure(
    procedure: str,
    payload: Optional[Any] = Body(None),
    uow: UnitOfWork = Depends(get_uow)
):
    return dispatch(procedure, payload, uow, method="POST")


@rpc_api_router.get("/{procedure}", response_model=RPCResponse)
def query_procedure(
    procedure: str,
    input: Optional[str] = None,
    uow: UnitOfWork = Depends(get_uow)
):
    try:
        raw_input = json.loads(input) if input else None
    except json.JSONDecodeError as e:
        return _error(
            status.HTTP_400_BAD_REQUEST,
            "input query parameter is not valid JSON",
            detail=str(e),
            error_code="BAD_REQUEST",
        )
    return dispatch(procedure, raw_input, uow, method="GET")
