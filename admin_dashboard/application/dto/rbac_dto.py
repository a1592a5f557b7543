"""RBAC DTOs (Data Transfer Objects)."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from admin_dashboard.domain.entities.permission import Permission
from admin_dashboard.domain.entities.role import Role
from admin_dashboard.domain.entities.user import User


# ============================================================================
# Permission DTOs
# ============================================================================


class CreatePermissionInput(BaseModel):
    """Input DTO for creating a permission."""

    name: str = Field(..., max_length=100, description="Display label")
    resource: str = Field(..., max_length=50, description="Resource token")
    action: str = Field(..., max_length=50, description="Action token")
    description: Optional[str] = Field(None, max_length=500, description="Description")

    model_config = {"frozen": True}


class PermissionOutput(BaseModel):
    """Output DTO for a permission."""

    id: UUID = Field(..., description="Permission's unique identifier")
    name: str = Field(..., description="Display label")
    description: Optional[str] = Field(None, description="Description")
    resource: str = Field(..., description="Resource token")
    action: str = Field(..., description="Action token")
    permission_string: str = Field(..., description="resource:action")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    model_config = {"frozen": True, "from_attributes": True}

    @classmethod
    def from_entity(cls, permission: Permission) -> "PermissionOutput":
        """
        Create DTO from Permission entity.

        Args:
            permission: Permission domain entity

        Returns:
            PermissionOutput DTO
        """
        return cls(
            id=permission.id,
            name=permission.name,
            description=permission.description,
            resource=permission.resource,
            action=permission.action,
            permission_string=permission.get_permission_string(),
            created_at=permission.created_at,
            updated_at=permission.updated_at,
        )


# ============================================================================
# Role DTOs
# ============================================================================


class CreateRoleInput(BaseModel):
    """Input DTO for creating a role."""

    name: str = Field(..., description="Role name")
    description: Optional[str] = Field(None, max_length=500, description="Description")
    permission_ids: list[UUID] = Field(
        default_factory=list, description="Initial permission ids"
    )

    model_config = {"frozen": True}


class UpdateRoleInput(BaseModel):
    """
    Input DTO for updating a role.

    Omitted fields keep their current value; an explicit ``description=None``
    clears the description.
    """

    name: Optional[str] = Field(None, description="New role name")
    description: Optional[str] = Field(None, max_length=500, description="Description")

    model_config = {"frozen": True}


class SetRolePermissionsInput(BaseModel):
    """Input DTO for replacing the permissions of a role."""

    permission_ids: list[UUID] = Field(..., description="Permission ids to keep")

    model_config = {"frozen": True}


class RoleOutput(BaseModel):
    """Output DTO for a role."""

    id: UUID = Field(..., description="Role's unique identifier")
    name: str = Field(..., description="Role name")
    description: Optional[str] = Field(None, description="Description")
    is_system: bool = Field(..., description="Whether the role is protected")
    permissions: list[str] = Field(
        default_factory=list, description="Granted permission strings"
    )
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    model_config = {"frozen": True, "from_attributes": True}

    @classmethod
    def from_entity(cls, role: Role) -> "RoleOutput":
        """Create DTO from Role entity."""
        return cls(
            id=role.id,
            name=role.name,
            description=role.description,
            is_system=role.is_system,
            permissions=role.get_permission_strings(),
            created_at=role.created_at,
            updated_at=role.updated_at,
        )


class RoleListOutput(BaseModel):
    """Output DTO for paginated role list."""

    roles: list[RoleOutput] = Field(..., description="List of roles")
    total: int = Field(..., description="Total number of roles")
    skip: int = Field(..., description="Offset of this page")
    limit: int = Field(..., description="Page size")

    model_config = {"frozen": True}


# ============================================================================
# User role assignment DTOs
# ============================================================================


class SetUserRolesInput(BaseModel):
    """Input DTO for replacing the roles of a user."""

    role_ids: list[UUID] = Field(..., description="Role ids to keep")

    model_config = {"frozen": True}


class UserPermissionsOutput(BaseModel):
    """Output DTO describing what a user is allowed to do."""

    user_id: UUID = Field(..., description="User's unique identifier")
    email: str = Field(..., description="User's email address")
    status: str = Field(..., description="Account status")
    roles: list[str] = Field(default_factory=list, description="Role names")
    permissions: list[str] = Field(
        default_factory=list, description="Effective permission strings"
    )
    is_admin: bool = Field(..., description="Holds ADMIN or SUPER_ADMIN")
    is_super_admin: bool = Field(..., description="Holds SUPER_ADMIN")

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, user: User) -> "UserPermissionsOutput":
        """Create DTO from User entity."""
        return cls(
            user_id=user.id,
            email=user.email.value,
            status=user.status.value,
            roles=user.get_role_names(),
            permissions=sorted(user.get_all_permissions()),
            is_admin=user.is_admin(),
            is_super_admin=user.is_super_admin(),
        )


class SeedRbacOutput(BaseModel):
    """Output DTO for catalog seeding."""

    permissions_created: int = Field(..., description="Permissions inserted")
    roles_created: int = Field(..., description="System roles inserted")
    roles_updated: int = Field(..., description="System roles whose grants were completed")

    model_config = {"frozen": True}
