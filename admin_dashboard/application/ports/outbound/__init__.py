"""Outbound ports (driven adapters interfaces)."""

from admin_dashboard.application.ports.outbound.permission_repository_port import (
    PermissionRepositoryPort,
)
from admin_dashboard.application.ports.outbound.role_repository_port import (
    RoleRepositoryPort,
)
from admin_dashboard.application.ports.outbound.unit_of_work_port import (
    UnitOfWorkPort,
)
from admin_dashboard.application.ports.outbound.user_repository_port import (
    UserRepositoryPort,
)

__all__ = [
    "PermissionRepositoryPort",
    "RoleRepositoryPort",
    "UnitOfWorkPort",
    "UserRepositoryPort",
]
