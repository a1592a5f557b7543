"""
Dependency injection helpers for infrastructure components.

This module provides factories that build units of work without relying on
global state. The storage backend is chosen by Settings.storage_backend.

Usage in FastAPI:
    uow_factory = create_uow_factory(settings)
    get_uow = create_uow_dependency(uow_factory)

    @app.get("/roles")
    async def list_roles(uow: UnitOfWorkPort = Depends(get_uow)):
        ...
"""

from collections.abc import AsyncGenerator
from typing import Callable

from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.infrastructure.adapters.outbound.persistence.memory.store import InMemoryStore
from admin_dashboard.infrastructure.adapters.outbound.persistence.memory.unit_of_work import (
    InMemoryUnitOfWork,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.unit_of_work import (
    PostgresUnitOfWork,
)
from admin_dashboard.infrastructure.config.database import DatabaseConfig
from admin_dashboard.infrastructure.config.settings import Settings

UnitOfWorkFactory = Callable[[], UnitOfWorkPort]


def create_uow_factory(
    settings: Settings,
    store: InMemoryStore | None = None,
    db_config: DatabaseConfig | None = None,
) -> UnitOfWorkFactory:
    """
    Create a factory returning a fresh unit of work per call.

    Args:
        settings: Application settings (selects the backend)
        store: Store to share for the memory backend (a new one by default)
        db_config: Database configuration for the postgresql backend
            (built from settings by default)

    Returns:
        Zero-argument callable producing unit of work instances
    """
    if settings.storage_backend == "memory":
        memory_store = store or InMemoryStore()

        def memory_uow() -> UnitOfWorkPort:
            return InMemoryUnitOfWork(memory_store)

        return memory_uow

    database = db_config or DatabaseConfig.from_settings(settings)

    def postgres_uow() -> UnitOfWorkPort:
        return PostgresUnitOfWork(database.get_session())

    return postgres_uow


def create_uow_dependency(
    uow_factory: UnitOfWorkFactory,
) -> Callable[[], AsyncGenerator[UnitOfWorkPort, None]]:
    """
    Create a Unit of Work dependency for FastAPI.

    Args:
        uow_factory: Factory from create_uow_factory()

    Returns:
        Async generator function for dependency injection
    """

    async def get_uow() -> AsyncGenerator[UnitOfWorkPort, None]:
        uow = uow_factory()
        try:
            yield uow
        finally:
            close = getattr(uow, "close", None)
            if close is not None:
                await close()

    return get_uow
