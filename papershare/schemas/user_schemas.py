"""User request and response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from papershare.application.dtos import InitializeUserResult
from papershare.domain.entities import User


class UserResponse(BaseModel):
    """Current user response."""

    id: UUID = Field(..., description="User unique identifier")
    email: str = Field(..., description="Email address", examples=["ada@example.org"])
    created_at: datetime = Field(..., description="Account creation timestamp")

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(id=user.id, email=user.email, created_at=user.created_at)


class UserInitResponse(UserResponse):
    """Response for first-login initialization.

    Attributes:
        is_new_user: True if the account was created by this call.
    """

    is_new_user: bool = Field(..., description="True if the account was just created")

    @classmethod
    def from_dto(cls, dto: InitializeUserResult) -> "UserInitResponse":
        return cls(
            id=dto.user.id,
            email=dto.user.email,
            created_at=dto.user.created_at,
            is_new_user=dto.is_new_user,
        )
