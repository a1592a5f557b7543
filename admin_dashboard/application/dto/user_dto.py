"""User DTOs (Data Transfer Objects)."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from admin_dashboard.domain.entities.user import User
from admin_dashboard.domain.value_objects.user_status import UserStatus


class CreateUserInput(BaseModel):
    """
    Input DTO for creating a user.

    When ``role_ids`` is empty the user receives the USER system role, if it
    has been seeded.
    """

    email: str = Field(..., max_length=255, description="Email address")
    name: Optional[str] = Field(None, max_length=255, description="Display name")
    image: Optional[str] = Field(None, max_length=2048, description="Avatar URL")
    role_ids: list[UUID] = Field(default_factory=list, description="Initial role ids")

    model_config = {"frozen": True}


class UpdateUserInput(BaseModel):
    """
    Input DTO for updating a user.

    Omitted fields keep their current value; an explicit ``None`` clears
    ``name`` or ``image``.
    """

    name: Optional[str] = Field(None, max_length=255, description="Display name")
    image: Optional[str] = Field(None, max_length=2048, description="Avatar URL")
    status: Optional[UserStatus] = Field(None, description="New account status")

    model_config = {"frozen": True}


class UserOutput(BaseModel):
    """Output DTO for a user."""

    id: UUID = Field(..., description="User's unique identifier")
    email: str = Field(..., description="Email address")
    name: Optional[str] = Field(None, description="Display name")
    image: Optional[str] = Field(None, description="Avatar URL")
    status: str = Field(..., description="Account status")
    roles: list[str] = Field(default_factory=list, description="Role names")
    permissions: list[str] = Field(
        default_factory=list, description="Effective permission strings"
    )
    email_verified_at: Optional[datetime] = Field(None, description="Verification timestamp")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    model_config = {"frozen": True, "from_attributes": True}

    @classmethod
    def from_entity(cls, user: User) -> "UserOutput":
        """
        Create DTO from User entity.

        Args:
            user: User domain entity

        Returns:
            UserOutput DTO
        """
        return cls(
            id=user.id,
            email=user.email.value,
            name=user.name,
            image=user.image,
            status=user.status.value,
            roles=user.get_role_names(),
            permissions=sorted(user.get_all_permissions()),
            email_verified_at=user.email_verified_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserListOutput(BaseModel):
    """Output DTO for paginated user list."""

    users: list[UserOutput] = Field(..., description="List of users")
    total: int = Field(..., description="Total number of users")
    skip: int = Field(..., description="Offset of this page")
    limit: int = Field(..., description="Page size")

    model_config = {"frozen": True}
