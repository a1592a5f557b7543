"""Unit of Work port interface."""

from typing import Protocol

from admin_dashboard.application.ports.outbound.permission_repository_port import (
    PermissionRepositoryPort,
)
from admin_dashboard.application.ports.outbound.role_repository_port import (
    RoleRepositoryPort,
)
from admin_dashboard.application.ports.outbound.user_repository_port import (
    UserRepositoryPort,
)


class UnitOfWorkPort(Protocol):
    """
    Unit of Work interface for managing transactions.

    All repository operations within one unit of work are committed or
    rolled back together.

    Usage:
        async with uow:
            role = await uow.roles.get_by_id(role_id)
            role.update_details("EDITOR", "Edits content")
            await uow.roles.update(role)
            await uow.commit()  # Commit is automatic on exit, but can be explicit

        # On exception, automatic rollback occurs
    """

    users: UserRepositoryPort
    roles: RoleRepositoryPort
    permissions: PermissionRepositoryPort

    async def __aenter__(self) -> "UnitOfWorkPort":
        """
        Enter async context manager (begin transaction).

        Returns:
            Self (UnitOfWorkPort instance)
        """
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit context manager (commit or rollback).

        If an exception occurred, the transaction is rolled back.
        Otherwise, the transaction is committed.
        """
        ...

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...
