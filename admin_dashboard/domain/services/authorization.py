"""
Authorization guards.

Guards decide whether a user may proceed. The ``require_*`` functions raise
``UnauthorizedError`` on denial; the ``has_*`` functions return a bool and
never raise. Every check first rejects a missing user, then an inactive one.
"""

from typing import Iterable
from uuid import UUID

from admin_dashboard.domain.entities.user import User
from admin_dashboard.domain.exceptions import UnauthorizedError


def _ensure_active(user: User | None) -> User:
    if user is None:
        raise UnauthorizedError("Authentication required")

    if not user.is_active():
        raise UnauthorizedError("Account is not active")

    return user


def _is_owner(user: User, owner_id: UUID | str) -> bool:
    return user.id is not None and str(user.id) == str(owner_id)


# ============================================================================
# Raising guards
# ============================================================================


def require_authenticated(user: User | None) -> None:
    """
    Check that a user is present and active.

    Raises:
        UnauthorizedError: If user is missing or not active
    """
    _ensure_active(user)


def require_permission(user: User | None, permission: str) -> None:
    """
    Check that a user holds a permission.

    Args:
        user: Acting user (None when unauthenticated)
        permission: Permission string (``resource:action``)

    Raises:
        UnauthorizedError: If user is missing, inactive or lacks the permission
    """
    user = _ensure_active(user)

    if not user.has_permission(permission):
        raise UnauthorizedError(f"Permission denied: {permission}")


def require_any_permission(user: User | None, permissions: list[str]) -> None:
    """
    Check that a user holds at least one of the permissions.

    An empty list always denies.

    Raises:
        UnauthorizedError: If user is missing, inactive or holds none of them
    """
    user = _ensure_active(user)

    if not user.has_any_permission(permissions):
        raise UnauthorizedError(
            f"Permission denied: one of {', '.join(permissions)}"
        )


def require_all_permissions(user: User | None, permissions: list[str]) -> None:
    """
    Check that a user holds every permission.

    An empty list is always satisfied.

    Raises:
        UnauthorizedError: If user is missing, inactive or lacks any of them
    """
    user = _ensure_active(user)

    if not user.has_all_permissions(permissions):
        raise UnauthorizedError(
            f"Permission denied: all of {', '.join(permissions)}"
        )


def require_role(user: User | None, role: str) -> None:
    """
    Check that a user holds a role.

    Raises:
        UnauthorizedError: If user is missing, inactive or lacks the role
    """
    user = _ensure_active(user)

    if not user.has_role(role):
        raise UnauthorizedError(f"Role required: {role}")


def require_any_role(user: User | None, roles: list[str]) -> None:
    """
    Check that a user holds at least one of the roles.

    Raises:
        UnauthorizedError: If user is missing, inactive or holds none of them
    """
    user = _ensure_active(user)

    if not user.has_any_role(roles):
        raise UnauthorizedError(f"Role required: one of {', '.join(roles)}")


def require_all_roles(user: User | None, roles: list[str]) -> None:
    """
    Check that a user holds every role.

    Raises:
        UnauthorizedError: If user is missing, inactive or lacks any of them
    """
    user = _ensure_active(user)

    if not user.has_all_roles(roles):
        raise UnauthorizedError(f"Roles required: all of {', '.join(roles)}")


def require_admin(user: User | None) -> None:
    """
    Check that a user is an administrator (ADMIN or SUPER_ADMIN).

    Raises:
        UnauthorizedError: If user is missing, inactive or not an admin
    """
    user = _ensure_active(user)

    if not user.is_admin():
        raise UnauthorizedError("Admin access required")


def require_super_admin(user: User | None) -> None:
    """
    Check that a user is a super administrator.

    Raises:
        UnauthorizedError: If user is missing, inactive or not a super admin
    """
    user = _ensure_active(user)

    if not user.is_super_admin():
        raise UnauthorizedError("Super admin access required")


def require_ownership_or_permission(
    user: User | None,
    owner_id: UUID | str,
    permission: str,
) -> None:
    """
    Check that a user owns a resource or holds a permission.

    Args:
        user: Acting user
        owner_id: Id of the resource owner
        permission: Permission that grants access to non-owners

    Raises:
        UnauthorizedError: If user is missing, inactive, or neither owner
            nor permitted
    """
    user = _ensure_active(user)

    if _is_owner(user, owner_id):
        return

    if user.has_permission(permission):
        return

    raise UnauthorizedError("Access denied to this resource")


def require_ownership_or_admin(user: User | None, owner_id: UUID | str) -> None:
    """
    Check that a user owns a resource or is an administrator.

    Raises:
        UnauthorizedError: If user is missing, inactive, or neither owner
            nor admin
    """
    user = _ensure_active(user)

    if _is_owner(user, owner_id):
        return

    if user.is_admin():
        return

    raise UnauthorizedError("Access denied to this resource")


# ============================================================================
# Boolean checks
# ============================================================================


def has_permission(user: User | None, permission: str) -> bool:
    if user is None or not user.is_active():
        return False
    return user.has_permission(permission)


def has_any_permission(user: User | None, permissions: Iterable[str]) -> bool:
    if user is None or not user.is_active():
        return False
    return user.has_any_permission(permissions)


def has_all_permissions(user: User | None, permissions: Iterable[str]) -> bool:
    if user is None or not user.is_active():
        return False
    return user.has_all_permissions(permissions)


def has_role(user: User | None, role: str) -> bool:
    if user is None or not user.is_active():
        return False
    return user.has_role(role)


def has_any_role(user: User | None, roles: Iterable[str]) -> bool:
    if user is None or not user.is_active():
        return False
    return user.has_any_role(roles)


def has_all_roles(user: User | None, roles: Iterable[str]) -> bool:
    if user is None or not user.is_active():
        return False
    return user.has_all_roles(roles)
