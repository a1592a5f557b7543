"""Permission domain entity."""

import re
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from admin_dashboard.domain.exceptions import ValidationError


PERMISSION_PART_REGEX = re.compile(r"^[a-z0-9_-]+$", re.IGNORECASE)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Permission:
    """
    Permission entity representing one ``resource:action`` capability.

    Two permissions are equal when their permission strings are equal,
    regardless of id. Only ``description`` (and ``updated_at``) may change
    after creation; ``id`` is set once by storage.
    """

    def __init__(
        self,
        name: str,
        resource: str,
        action: str,
        description: str | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        now = _utcnow()
        self._id = id
        self._name = name
        self._resource = resource
        self._action = action
        self._description = description
        self._created_at = created_at or now
        self._updated_at = updated_at or now

    @classmethod
    def create(
        cls,
        name: str,
        resource: str,
        action: str,
        description: str | None = None,
    ) -> "Permission":
        """
        Create a new, not yet persisted permission.

        Args:
            name: Display label
            resource: Resource token (e.g. "users")
            action: Action token (e.g. "create")
            description: Optional description

        Returns:
            Permission entity with no id

        Raises:
            ValidationError: If name, resource or action is empty, or if
                resource/action contains characters outside [a-zA-Z0-9_-]
        """
        if not name or not name.strip():
            raise ValidationError("Permission name is required")

        if not resource or not resource.strip():
            raise ValidationError("Permission resource is required")

        if not action or not action.strip():
            raise ValidationError("Permission action is required")

        if not PERMISSION_PART_REGEX.match(resource):
            raise ValidationError("Resource contains invalid characters")

        if not PERMISSION_PART_REGEX.match(action):
            raise ValidationError("Action contains invalid characters")

        now = _utcnow()
        return cls(
            name=name,
            resource=resource,
            action=action,
            description=description,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def from_persistence(cls, data: dict[str, Any]) -> "Permission":
        """Reconstitute a permission from stored data (trusted, not re-validated)."""
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description"),
            resource=data["resource"],
            action=data["action"],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )

    def to_persistence(self) -> dict[str, Any]:
        """Convert entity to a plain dict for persistence."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "resource": self.resource,
            "action": self.action,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    # ------------------------------------------------------------------
    # Properties
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
    def resource(self) -> str:
        return self._resource

    @property
    def action(self) -> str:
        return self._action

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_description(self, description: str | None) -> None:
        """Replace the description."""
        self._description = description
        self._touch()

    def get_permission_string(self) -> str:
        """Get the permission string in format ``resource:action``."""
        return f"{self.resource}:{self.action}"

    def matches(self, resource: str, action: str) -> bool:
        """Check if this permission matches a resource and action exactly."""
        return self.resource == resource and self.action == action

    def matches_string(self, permission_string: str) -> bool:
        """Check if this permission matches a ``resource:action`` string."""
        return self.get_permission_string() == permission_string

    def _touch(self) -> None:
        self._updated_at = _utcnow()

    def __eq__(self, other: object) -> bool:
        """Value equality on the permission string."""
        if not isinstance(other, Permission):
            return False
        return self.get_permission_string() == other.get_permission_string()

    def __hash__(self) -> int:
        return hash(self.get_permission_string())

    def __str__(self) -> str:
        return self.get_permission_string()

    def __repr__(self) -> str:
        return f"Permission(id={self.id}, permission={self.get_permission_string()!r})"
