"""RBAC administration use cases."""

from admin_dashboard.application.use_cases.rbac.create_permission import (
    CreatePermissionUseCase,
)
from admin_dashboard.application.use_cases.rbac.create_role import CreateRoleUseCase
from admin_dashboard.application.use_cases.rbac.delete_role import DeleteRoleUseCase
from admin_dashboard.application.use_cases.rbac.get_user_permissions import (
    GetUserPermissionsUseCase,
)
from admin_dashboard.application.use_cases.rbac.list_roles import ListRolesUseCase
from admin_dashboard.application.use_cases.rbac.remove_user_role import (
    RemoveUserRoleUseCase,
)
from admin_dashboard.application.use_cases.rbac.seed_rbac import SeedRbacUseCase
from admin_dashboard.application.use_cases.rbac.set_role_permissions import (
    SetRolePermissionsUseCase,
)
from admin_dashboard.application.use_cases.rbac.set_user_roles import (
    SetUserRolesUseCase,
)
from admin_dashboard.application.use_cases.rbac.update_role import UpdateRoleUseCase

__all__ = [
    "CreatePermissionUseCase",
    "CreateRoleUseCase",
    "DeleteRoleUseCase",
    "GetUserPermissionsUseCase",
    "ListRolesUseCase",
    "RemoveUserRoleUseCase",
    "SeedRbacUseCase",
    "SetRolePermissionsUseCase",
    "SetUserRolesUseCase",
    "UpdateRoleUseCase",
]
