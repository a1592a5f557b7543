"""User repository port interface."""

from typing import Optional, Protocol
from uuid import UUID

from admin_dashboard.domain.entities.user import User


class UserRepositoryPort(Protocol):
    """Repository interface for User entity.

    Users are always returned fully hydrated: roles with their permissions.
    """

    async def add(self, user: User) -> User:
        """
        Add a new user together with its role links.

        Args:
            user: User entity to add (id may be None)

        Returns:
            Stored user entity with its id assigned

        Raises:
            NotFoundError: If a linked role doesn't exist
        """
        ...

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Retrieve user by ID.

        Args:
            user_id: User's unique identifier

        Returns:
            User entity if found, None otherwise
        """
        ...

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Retrieve user by email address (case-insensitive).

        Args:
            email: User's email address

        Returns:
            User entity if found, None otherwise
        """
        ...

    async def list_all(self, skip: int = 0, limit: int = 100) -> list[User]:
        """
        List users with pagination, newest first.

        Args:
            skip: Number of records to skip (offset)
            limit: Maximum number of records to return

        Returns:
            List of user entities
        """
        ...

    async def update(self, user: User) -> User:
        """
        Update the stored user record (profile and status).

        Role links are not touched; use ``set_roles``.

        Raises:
            NotFoundError: If user doesn't exist
        """
        ...

    async def delete(self, user_id: UUID) -> None:
        """
        Delete user and its role links.

        Raises:
            NotFoundError: If user doesn't exist
        """
        ...

    async def email_exists(
        self, email: str, exclude_id: Optional[UUID] = None
    ) -> bool:
        """
        Check if a user with this email exists.

        Args:
            email: Email to check
            exclude_id: User id to ignore (for updates)

        Returns:
            True if another user holds the email, False otherwise
        """
        ...

    async def set_roles(self, user_id: UUID, role_ids: list[UUID]) -> None:
        """
        Replace all role links of a user.

        Args:
            user_id: User's unique identifier
            role_ids: Ids of the roles the user keeps

        Raises:
            NotFoundError: If the user or a role doesn't exist
        """
        ...

    async def count(self) -> int:
        """Count all users."""
        ...
