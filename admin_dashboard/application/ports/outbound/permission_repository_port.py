"""Permission repository port interface."""

from typing import Optional, Protocol
from uuid import UUID

from admin_dashboard.domain.entities.permission import Permission


class PermissionRepositoryPort(Protocol):
    """Repository interface for Permission entity."""

    async def add(self, permission: Permission) -> Permission:
        """
        Add a new permission to the repository.

        Args:
            permission: Permission entity to add (id may be None)

        Returns:
            Stored permission entity with its id assigned
        """
        ...

    async def get_by_id(self, permission_id: UUID) -> Optional[Permission]:
        """
        Retrieve permission by ID.

        Args:
            permission_id: Permission's unique identifier

        Returns:
            Permission entity if found, None otherwise
        """
        ...

    async def get_by_resource_and_action(
        self, resource: str, action: str
    ) -> Optional[Permission]:
        """
        Retrieve permission by its ``(resource, action)`` pair.

        Returns:
            Permission entity if found, None otherwise
        """
        ...

    async def list_all(self, skip: int = 0, limit: int = 100) -> list[Permission]:
        """
        List permissions with pagination, ordered by resource then action.

        Args:
            skip: Number of records to skip (offset)
            limit: Maximum number of records to return

        Returns:
            List of permission entities
        """
        ...

    async def list_by_role_id(self, role_id: UUID) -> list[Permission]:
        """
        List the permissions linked to a role.

        Args:
            role_id: Role's unique identifier

        Returns:
            List of permission entities (empty for unknown roles)
        """
        ...

    async def exists(
        self, resource: str, action: str, exclude_id: Optional[UUID] = None
    ) -> bool:
        """
        Check if a permission with this ``(resource, action)`` exists.

        Args:
            resource: Resource token
            action: Action token
            exclude_id: Permission id to ignore (for updates)

        Returns:
            True if another permission holds the pair, False otherwise
        """
        ...

    async def update(self, permission: Permission) -> Permission:
        """
        Update existing permission.

        Raises:
            NotFoundError: If permission doesn't exist
        """
        ...

    async def delete(self, permission_id: UUID) -> None:
        """
        Delete permission and its role links.

        Raises:
            NotFoundError: If permission doesn't exist
        """
        ...

    async def count(self) -> int:
        """Count all permissions."""
        ...
