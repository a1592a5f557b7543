"""Domain services package."""

from admin_dashboard.domain.services.authorization import (
    has_all_permissions,
    has_all_roles,
    has_any_permission,
    has_any_role,
    has_permission,
    has_role,
    require_admin,
    require_all_permissions,
    require_all_roles,
    require_any_permission,
    require_any_role,
    require_authenticated,
    require_ownership_or_admin,
    require_ownership_or_permission,
    require_permission,
    require_role,
    require_super_admin,
)

__all__ = [
    "require_authenticated",
    "require_permission",
    "require_any_permission",
    "require_all_permissions",
    "require_role",
    "require_any_role",
    "require_all_roles",
    "require_admin",
    "require_super_admin",
    "require_ownership_or_permission",
    "require_ownership_or_admin",
    "has_permission",
    "has_any_permission",
    "has_all_permissions",
    "has_role",
    "has_any_role",
    "has_all_roles",
]
