"""Domain value objects package."""

from admin_dashboard.domain.value_objects.email import Email
from admin_dashboard.domain.value_objects.rbac_catalog import (
    DEFAULT_ROLE_PERMISSIONS,
    PERMISSION_DESCRIPTIONS,
    Action,
    Resource,
    SystemPermission,
    SystemRole,
)
from admin_dashboard.domain.value_objects.user_status import UserStatus

__all__ = [
    "Email",
    "UserStatus",
    "SystemRole",
    "SystemPermission",
    "Resource",
    "Action",
    "DEFAULT_ROLE_PERMISSIONS",
    "PERMISSION_DESCRIPTIONS",
]
