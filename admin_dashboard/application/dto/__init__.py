"""Data Transfer Objects (DTOs) for application layer."""

from admin_dashboard.application.dto.rbac_dto import (
    CreatePermissionInput,
    CreateRoleInput,
    PermissionOutput,
    RoleListOutput,
    RoleOutput,
    SeedRbacOutput,
    SetRolePermissionsInput,
    SetUserRolesInput,
    UpdateRoleInput,
    UserPermissionsOutput,
)
from admin_dashboard.application.dto.user_dto import (
    CreateUserInput,
    UpdateUserInput,
    UserListOutput,
    UserOutput,
)

__all__ = [
    "CreatePermissionInput",
    "CreateRoleInput",
    "CreateUserInput",
    "PermissionOutput",
    "RoleListOutput",
    "RoleOutput",
    "SeedRbacOutput",
    "SetRolePermissionsInput",
    "SetUserRolesInput",
    "UpdateRoleInput",
    "UpdateUserInput",
    "UserListOutput",
    "UserOutput",
    "UserPermissionsOutput",
]
