"""User domain entity."""

from datetime import UTC, datetime
from typing import Any, Iterable
from uuid import UUID

from admin_dashboard.domain.entities.role import Role
from admin_dashboard.domain.exceptions import InvalidOperationError, ValidationError
from admin_dashboard.domain.value_objects.email import Email
from admin_dashboard.domain.value_objects.rbac_catalog import SystemRole
from admin_dashboard.domain.value_objects.user_status import UserStatus


ADMIN_ROLE_NAMES = (SystemRole.ADMIN.value, SystemRole.SUPER_ADMIN.value)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class User:
    """
    User entity representing a dashboard user.

    A user holds a set of roles (deduplicated by role name). Its effective
    permissions are the union of the permissions of all its roles.
    """

    def __init__(
        self,
        email: Email,
        name: str | None = None,
        image: str | None = None,
        status: UserStatus = UserStatus.ACTIVE,
        roles: Iterable[Role] | None = None,
        email_verified_at: datetime | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        now = _utcnow()
        self._id = id
        self._email = email
        self._name = name
        self._image = image
        self._status = status
        self._roles: list[Role] = list(roles or [])
        self._email_verified_at = email_verified_at
        self._created_at = created_at or now
        self._updated_at = updated_at or now

    @classmethod
    def create(
        cls,
        email: Email,
        name: str | None = None,
        image: str | None = None,
        status: UserStatus = UserStatus.ACTIVE,
        roles: Iterable[Role] | None = None,
    ) -> "User":
        """
        Create a new, not yet persisted user.

        Raises:
            ValidationError: If a name is given but blank
        """
        if name is not None and not name.strip():
            raise ValidationError("Name cannot be empty")

        user = cls(email=email, name=name, image=image, status=status)
        for role in roles or []:
            if not user.has_role(role.name):
                user._roles.append(role)
        return user

    @classmethod
    def from_persistence(
        cls,
        data: dict[str, Any],
        roles: Iterable[Role] | None = None,
    ) -> "User":
        """Reconstitute a user from stored data and its hydrated roles."""
        return cls(
            id=data["id"],
            email=Email(data["email"]),
            name=data.get("name"),
            image=data.get("image"),
            status=UserStatus(data["status"]),
            roles=roles,
            email_verified_at=data.get("email_verified_at"),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )

    def to_persistence(self) -> dict[str, Any]:
        """Convert entity to a plain dict for persistence (links excluded)."""
        return {
            "id": self._id,
            "email": self._email.value,
            "name": self._name,
            "image": self._image,
            "status": self._status.value,
            "email_verified_at": self._email_verified_at,
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
    def email(self) -> Email:
        return self._email

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def image(self) -> str | None:
        return self._image

    @property
    def status(self) -> UserStatus:
        return self._status

    @property
    def roles(self) -> list[Role]:
        """Copy of the user's roles."""
        return list(self._roles)

    @property
    def email_verified_at(self) -> datetime | None:
        return self._email_verified_at

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    # ------------------------------------------------------------------
    # Profile and lifecycle
    # ------------------------------------------------------------------

    def update_profile(self, name: str | None, image: str | None) -> None:
        """
        Update display name and avatar.

        Raises:
            ValidationError: If name is given but blank
        """
        if name is not None and not name.strip():
            raise ValidationError("Name cannot be empty")

        self._name = name
        self._image = image
        self._touch()

    def verify_email(self) -> None:
        """
        Mark the email address as verified.

        Raises:
            InvalidOperationError: If the email is already verified
        """
        if self._email_verified_at is not None:
            raise InvalidOperationError("Email is already verified")

        self._email_verified_at = _utcnow()
        self._touch()

    def activate(self) -> None:
        """Activate the account."""
        self._change_status(UserStatus.ACTIVE)

    def deactivate(self) -> None:
        """Deactivate the account."""
        self._change_status(UserStatus.INACTIVE)

    def suspend(self) -> None:
        """Suspend the account."""
        self._change_status(UserStatus.SUSPENDED)

    def _change_status(self, status: UserStatus) -> None:
        if self._status == status:
            return
        self._status = status
        self._touch()

    # ------------------------------------------------------------------
    # Role assignment
    # ------------------------------------------------------------------

    def assign_role(self, role: Role) -> None:
        """Assign a role. Does nothing if a role with that name is already held."""
        if self.has_role(role.name):
            return

        self._roles.append(role)
        self._touch()

    def assign_roles(self, roles: Iterable[Role]) -> None:
        """Assign several roles, one at a time."""
        for role in roles:
            self.assign_role(role)

    def remove_role(self, role_id: UUID) -> None:
        """Remove a role by id. Unknown ids are ignored."""
        self._roles = [r for r in self._roles if r.id != role_id]
        # Touches even when nothing was removed
        self._touch()

    def set_roles(self, roles: Iterable[Role]) -> None:
        """Replace all roles."""
        replacement: list[Role] = []
        for role in roles:
            if all(r.name != role.name for r in replacement):
                replacement.append(role)

        self._roles = replacement
        self._touch()

    # ------------------------------------------------------------------
    # Authorization queries
    # ------------------------------------------------------------------

    def has_role(self, role_name: str) -> bool:
        """Check if user holds a role by name."""
        return any(role.name == role_name for role in self._roles)

    def has_any_role(self, role_names: Iterable[str]) -> bool:
        """Check if user holds at least one of the roles."""
        return any(self.has_role(name) for name in role_names)

    def has_all_roles(self, role_names: Iterable[str]) -> bool:
        """Check if user holds every role (true for an empty list)."""
        return all(self.has_role(name) for name in role_names)

    def has_permission(self, permission_string: str) -> bool:
        """
        Check if any of the user's roles grants the permission.

        Grants are the union across roles, never the intersection.
        """
        return any(role.has_permission(permission_string) for role in self._roles)

    def has_any_permission(self, permission_strings: Iterable[str]) -> bool:
        """Check if user is granted at least one of the permissions."""
        return any(self.has_permission(ps) for ps in permission_strings)

    def has_all_permissions(self, permission_strings: Iterable[str]) -> bool:
        """Check if user is granted every permission (true for an empty list)."""
        return all(self.has_permission(ps) for ps in permission_strings)

    def get_all_permissions(self) -> list[str]:
        """Get the deduplicated permission strings granted by all roles."""
        permissions: dict[str, None] = {}
        for role in self._roles:
            for permission_string in role.get_permission_strings():
                permissions.setdefault(permission_string, None)
        return list(permissions)

    def get_role_names(self) -> list[str]:
        """Get role names in assignment order."""
        return [role.name for role in self._roles]

    def is_admin(self) -> bool:
        """Check for the ADMIN or SUPER_ADMIN role by name."""
        return self.has_any_role(ADMIN_ROLE_NAMES)

    def is_super_admin(self) -> bool:
        return self.has_role(SystemRole.SUPER_ADMIN.value)

    def is_active(self) -> bool:
        return self._status == UserStatus.ACTIVE

    def is_suspended(self) -> bool:
        return self._status == UserStatus.SUSPENDED

    def is_email_verified(self) -> bool:
        return self._email_verified_at is not None

    def can_perform_admin_actions(self) -> bool:
        return self.is_active() and self.is_admin()

    def _touch(self) -> None:
        self._updated_at = _utcnow()

    def __eq__(self, other: object) -> bool:
        """Entity equality based on identity (id), not value."""
        if not isinstance(other, User):
            return False
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return (
            f"User(id={self._id}, email={self._email}, "
            f"status={self._status.value}, roles={self.get_role_names()})"
        )
