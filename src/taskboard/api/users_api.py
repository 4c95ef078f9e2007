"""
User Management API
"""

from uuid import UUID
from fastapi import APIRouter, Depends, status

from taskboard.core.dependencies import get_user_service
from taskboard.core.exceptions import ApplicationException
from taskboard.services.user_service import UserService
from taskboard.schemas.user import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
    UserListResponse,
)
from taskboard.api.errors import to_http_exception


router = APIRouter(
    prefix="/users",
    tags=["Users"]
)


@router.get("", response_model=UserListResponse)
def list_users(service: UserService = Depends(get_user_service)):
    users = service.list_users()
    return UserListResponse(
        users=[UserResponse.model_validate(user) for user in users],
        total_count=len(users)
    )


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    try:
        user = service.get_user(str(user_id))
    except ApplicationException as e:
        raise to_http_exception(e)
    return UserResponse.model_validate(user)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(request: CreateUserRequest, service: UserService = Depends(get_user_service)):
    try:
        user = service.create_user(request)
    except ApplicationException as e:
        raise to_http_exception(e)
    return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    service: UserService = Depends(get_user_service)
):
    try:
        user = service.update_user(str(user_id), request)
    except ApplicationException as e:
        raise to_http_exception(e)
    return UserResponse.model_validate(user)


@router.delete("/{user_id}")
def delete_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    try:
        service.delete_user(str(user_id))
    except ApplicationException as e:
        raise to_http_exception(e)
    return {"message": "User deleted", "user_id": str(user_id)}
