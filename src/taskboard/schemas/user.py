"""
User Pydantic Schemas
"""

from pydantic import BaseModel, EmailStr, Field, ConfigDict, field_validator
from typing import Optional, List
from datetime import datetime

from taskboard.schemas.common import UUIDStr


class UserBase(BaseModel):
    """Base user fields."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr


class CreateUserRequest(UserBase):
    """Request schema for creating a user."""


class UpdateUserRequest(BaseModel):
    """
    Request schema for updating a user.

    Only fields present in the payload are applied; neither field may be
    explicitly set to null.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None

    @field_validator("name", "email")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("field may be omitted but not set to null")
        return v


class UpdateUserProcedureInput(UpdateUserRequest):
    """updateUser procedure input: the target id plus the partial update."""

    id: UUIDStr


class UserResponse(UserBase):
    """Response schema for a user."""

    id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class UserListResponse(BaseModel):
    """Response schema for listing users."""

    users: List[UserResponse]
    total_count: int
