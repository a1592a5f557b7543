"""
PostgreSQL implementation of Unit of Work pattern.

This module implements the Unit of Work pattern for managing database transactions
and coordinating repository operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.repositories.permission_repository import (
    PostgresPermissionRepository,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.repositories.role_repository import (
    PostgresRoleRepository,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.repositories.user_repository import (
    PostgresUserRepository,
)


class PostgresUnitOfWork(UnitOfWorkPort):
    """
    PostgreSQL implementation of Unit of Work pattern.

    All repositories share the same SQLAlchemy session, so every operation
    within a unit of work is committed or rolled back atomically.

    Usage:
        async with uow:
            role = await uow.roles.get_by_id(role_id)
            role.update_details("EDITOR", None)
            await uow.roles.update(role)
            await uow.commit()

        # On exception, automatic rollback occurs

    Attributes:
        users: User repository
        roles: Role repository
        permissions: Permission repository
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Unit of Work with a database session.

        Args:
            session: SQLAlchemy AsyncSession for database operations
        """
        self._session = session

        self.users = PostgresUserRepository(session)
        self.roles = PostgresRoleRepository(session)
        self.permissions = PostgresPermissionRepository(session)

    async def __aenter__(self) -> "PostgresUnitOfWork":
        """
        Enter async context manager.

        The transaction is started lazily by the session on first use.
        """
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit context manager (commit or rollback).

        If an exception occurred during the context, rollback the transaction.
        Otherwise, commit the transaction.
        """
        if exc_type is not None:
            await self.rollback()
        else:
            await self.commit()

    async def commit(self) -> None:
        """Commit the current transaction."""
        await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        await self._session.rollback()

    async def close(self) -> None:
        """Close the database session."""
        await self._session.close()
