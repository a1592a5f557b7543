"""Role domain entity."""

import re
from datetime import UTC, datetime
from typing import Any, Iterable
from uuid import UUID

from admin_dashboard.domain.entities.permission import Permission
from admin_dashboard.domain.exceptions import InvalidOperationError, ValidationError


ROLE_NAME_REGEX = re.compile(r"^[a-zA-Z0-9_]+$")
ROLE_NAME_MAX_LENGTH = 50


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _validate_name(name: str) -> None:
    if not name or not name.strip():
        raise ValidationError("Role name is required")

    if len(name) > ROLE_NAME_MAX_LENGTH:
        raise ValidationError(
            f"Role name must be at most {ROLE_NAME_MAX_LENGTH} characters"
        )

    if not ROLE_NAME_REGEX.match(name):
        raise ValidationError("Role name contains invalid characters")


class Role:
    """
    Role entity representing a named collection of permissions.

    A role is a named set of permissions that can be assigned to users.
    System roles are protected: none of their mutators succeed.

    Roles are equal when their names are equal. Permissions are kept
    deduplicated by permission string.
    """

    def __init__(
        self,
        name: str,
        description: str | None = None,
        is_system: bool = False,
        permissions: Iterable[Permission] | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        now = _utcnow()
        self._id = id
        self._name = name
        self._description = description
        self._is_system = is_system
        self._permissions: list[Permission] = list(permissions or [])
        self._created_at = created_at or now
        self._updated_at = updated_at or now

    @classmethod
    def create(
        cls,
        name: str,
        description: str | None = None,
        is_system: bool = False,
        permissions: Iterable[Permission] | None = None,
    ) -> "Role":
        """
        Create a new, not yet persisted role.

        Args:
            name: Role name (1-50 characters, letters, digits and underscores)
            description: Optional description
            is_system: Whether the role is protected from modification
            permissions: Initial permissions (duplicates collapse)

        Returns:
            Role entity with no id

        Raises:
            ValidationError: If the name is empty, too long or malformed
        """
        _validate_name(name)

        role = cls(name=name, description=description, is_system=is_system)
        for permission in permissions or []:
            if not role.has_permission(permission.get_permission_string()):
                role._permissions.append(permission)
        return role

    @classmethod
    def from_persistence(
        cls,
        data: dict[str, Any],
        permissions: Iterable[Permission] | None = None,
    ) -> "Role":
        """Reconstitute a role from stored data (trusted, not re-validated)."""
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description"),
            is_system=data.get("is_system", False),
            permissions=permissions,
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )

    def to_persistence(self) -> dict[str, Any]:
        """Convert entity to a plain dict for persistence (links excluded)."""
        return {
            "id": self._id,
            "name": self._name,
            "description": self._description,
            "is_system": self._is_system,
            "created_at": self._created_at,
            "updated_at": self._updated_at,
        }

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def id(self) -> UUID | None:
        return self._id

    @id.setter
    def id(self, value: UUID) -> None:
        self._id = value

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def is_system(self) -> bool:
        return self._is_system

    @property
    def permissions(self) -> list[Permission]:
        """Copy of the role's permissions."""
        return list(self._permissions)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def update_details(self, name: str, description: str | None) -> None:
        """
        Rename the role and replace its description.

        Raises:
            InvalidOperationError: If this is a system role
            ValidationError: If the new name is invalid
        """
        if self._is_system:
            raise InvalidOperationError("Cannot modify system roles")

        _validate_name(name)

        self._name = name
        self._description = description
        self._touch()

    def add_permission(self, permission: Permission) -> None:
        """
        Grant a permission to this role.

        Does nothing if a permission with the same string is already granted.

        Raises:
            InvalidOperationError: If this is a system role
        """
        if self._is_system:
            raise InvalidOperationError("Cannot modify permissions of system roles")

        if self.has_permission(permission.get_permission_string()):
            return

        self._permissions.append(permission)
        self._touch()

    def add_permissions(self, permissions: Iterable[Permission]) -> None:
        """Grant several permissions, one at a time."""
        for permission in permissions:
            self.add_permission(permission)

    def remove_permission(self, permission_id: UUID) -> None:
        """
        Revoke a permission by id. Unknown ids are ignored.

        Raises:
            InvalidOperationError: If this is a system role
        """
        if self._is_system:
            raise InvalidOperationError("Cannot modify permissions of system roles")

        self._permissions = [p for p in self._permissions if p.id != permission_id]
        # Touches even when nothing was removed
        self._touch()

    def set_permissions(self, permissions: Iterable[Permission]) -> None:
        """
        Replace all permissions.

        Raises:
            InvalidOperationError: If this is a system role
        """
        if self._is_system:
            raise InvalidOperationError("Cannot modify permissions of system roles")

        replacement: list[Permission] = []
        seen: set[str] = set()
        for permission in permissions:
            key = permission.get_permission_string()
            if key not in seen:
                seen.add(key)
                replacement.append(permission)

        self._permissions = replacement
        self._touch()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_permission(self, permission_string: str) -> bool:
        """Check if role grants a ``resource:action`` permission."""
        return any(p.matches_string(permission_string) for p in self._permissions)

    def has_any_permission(self, permission_strings: Iterable[str]) -> bool:
        """Check if role grants at least one of the permissions."""
        return any(self.has_permission(ps) for ps in permission_strings)

    def has_all_permissions(self, permission_strings: Iterable[str]) -> bool:
        """Check if role grants every permission (true for an empty list)."""
        return all(self.has_permission(ps) for ps in permission_strings)

    def has_resource_permission(self, resource: str, action: str) -> bool:
        """Check if role grants ``action`` on ``resource``."""
        return self.has_permission(f"{resource}:{action}")

    def get_permission_strings(self) -> list[str]:
        """Get the permission strings of this role."""
        return [p.get_permission_string() for p in self._permissions]

    def get_permissions_by_resource(self) -> dict[str, list[str]]:
        """Group the role's actions by resource."""
        grouped: dict[str, list[str]] = {}
        for permission in self._permissions:
            grouped.setdefault(permission.resource, []).append(permission.action)
        return grouped

    def _touch(self) -> None:
        self._updated_at = _utcnow()

    def __eq__(self, other: object) -> bool:
        """Roles are identified by name."""
        if not isinstance(other, Role):
            return False
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return (
            f"Role(id={self._id}, name={self._name!r}, "
            f"is_system={self._is_system}, permissions={len(self._permissions)})"
        )
