"""
In-memory implementation of Unit of Work pattern.

Writes go straight to the shared store while the unit of work holds the
store lock; rollback restores the snapshot taken at entry (or at the last
commit).
"""

from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.infrastructure.adapters.outbound.persistence.memory.repositories import (
    InMemoryPermissionRepository,
    InMemoryRoleRepository,
    InMemoryUserRepository,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.memory.store import (
    InMemoryStore,
    StoreState,
)


class InMemoryUnitOfWork(UnitOfWorkPort):
    """
    Unit of Work over an InMemoryStore.

    Usage:
        store = InMemoryStore()
        async with InMemoryUnitOfWork(store) as uow:
            await uow.permissions.add(permission)
            await uow.commit()

    Attributes:
        users: User repository
        roles: Role repository
        permissions: Permission repository
    """

    def __init__(self, store: InMemoryStore):
        """
        Initialize Unit of Work over a store.

        Args:
            store: Shared store (one per process or per test)
        """
        self._store = store
        self._snapshot: StoreState | None = None

        self.users = InMemoryUserRepository(store)
        self.roles = InMemoryRoleRepository(store)
        self.permissions = InMemoryPermissionRepository(store)

    async def __aenter__(self) -> "InMemoryUnitOfWork":
        await self._store.lock.acquire()
        self._snapshot = self._store.snapshot()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        try:
            if exc_type is not None:
                await self.rollback()
            else:
                await self.commit()
        finally:
            self._snapshot = None
            self._store.lock.release()

    async def commit(self) -> None:
        """Make the current state the new rollback point."""
        self._snapshot = self._store.snapshot()

    async def rollback(self) -> None:
        """Discard every change since entry or the last commit."""
        if self._snapshot is not None:
            self._store.restore(self._snapshot)
