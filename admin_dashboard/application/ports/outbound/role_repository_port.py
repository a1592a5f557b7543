"""Role repository port interface."""

from typing import Optional, Protocol
from uuid import UUID

from admin_dashboard.domain.entities.role import Role


class RoleRepositoryPort(Protocol):
    """Repository interface for Role entity.

    Roles are always returned with their permissions loaded.
    """

    async def add(self, role: Role) -> Role:
        """
        Add a new role together with its permission links.

        Args:
            role: Role entity to add (id may be None)

        Returns:
            Stored role entity with its id assigned

        Raises:
            NotFoundError: If a linked permission doesn't exist
        """
        ...

    async def get_by_id(self, role_id: UUID) -> Optional[Role]:
        """
        Retrieve role by ID.

        Args:
            role_id: Role's unique identifier

        Returns:
            Role entity if found, None otherwise
        """
        ...

    async def get_by_name(self, name: str) -> Optional[Role]:
        """
        Retrieve role by name.

        Args:
            name: Role name

        Returns:
            Role entity if found, None otherwise
        """
        ...

    async def list_all(self, skip: int = 0, limit: int = 100) -> list[Role]:
        """
        List all roles with pagination, ordered by name.

        Args:
            skip: Number of records to skip (offset)
            limit: Maximum number of records to return

        Returns:
            List of role entities
        """
        ...

    async def list_by_user_id(self, user_id: UUID) -> list[Role]:
        """
        List all roles assigned to a specific user.

        Args:
            user_id: User's unique identifier

        Returns:
            List of role entities assigned to the user
        """
        ...

    async def name_exists(self, name: str, exclude_id: Optional[UUID] = None) -> bool:
        """
        Check if a role with this name exists.

        Args:
            name: Role name to check
            exclude_id: Role id to ignore (for renames)

        Returns:
            True if another role holds the name, False otherwise
        """
        ...

    async def update(self, role: Role) -> Role:
        """
        Update the stored role record.

        Permission links are not touched; use ``set_permissions``.

        Raises:
            NotFoundError: If role doesn't exist
        """
        ...

    async def delete(self, role_id: UUID) -> None:
        """
        Delete role and its links.

        Raises:
            NotFoundError: If role doesn't exist
        """
        ...

    async def set_permissions(
        self, role_id: UUID, permission_ids: list[UUID]
    ) -> None:
        """
        Replace all permission links of a role.

        Args:
            role_id: Role's unique identifier
            permission_ids: Ids of the permissions the role keeps

        Raises:
            NotFoundError: If the role or a permission doesn't exist
        """
        ...

    async def is_assigned(self, role_id: UUID) -> bool:
        """Check if any user holds the role."""
        ...

    async def count(self) -> int:
        """Count all roles."""
        ...
