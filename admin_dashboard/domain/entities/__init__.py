"""Domain entities package."""

from admin_dashboard.domain.entities.permission import Permission
from admin_dashboard.domain.entities.role import Role
from admin_dashboard.domain.entities.user import User

__all__ = [
    "Permission",
    "Role",
    "User",
]
