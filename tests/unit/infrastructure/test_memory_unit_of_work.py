"""Unit tests for InMemoryUnitOfWork."""

import pytest

from admin_dashboard.domain.entities.role import Role
from admin_dashboard.infrastructure.adapters.outbound.persistence.memory import (
    InMemoryUnitOfWork,
)


class TestInMemoryUnitOfWork:
    """Test transaction semantics of InMemoryUnitOfWork."""

    @pytest.mark.asyncio
    async def test_commit_persists(self, store):
        """Test committed changes are visible to later units of work."""
        async with InMemoryUnitOfWork(store) as uow:
            await uow.roles.add(Role.create(name="EDITOR"))
            await uow.commit()

        async with InMemoryUnitOfWork(store) as uow:
            assert await uow.roles.get_by_name("EDITOR") is not None

    @pytest.mark.asyncio
    async def test_exception_rolls_back(self, store):
        """Test an exception discards every change of the unit of work."""
        with pytest.raises(RuntimeError):
            async with InMemoryUnitOfWork(store) as uow:
                await uow.roles.add(Role.create(name="EDITOR"))
                raise RuntimeError("boom")

        async with InMemoryUnitOfWork(store) as uow:
            assert await uow.roles.count() == 0

    @pytest.mark.asyncio
    async def test_rollback_keeps_committed_work(self, store):
        """Test rollback only discards changes since the last commit."""
        async with InMemoryUnitOfWork(store) as uow:
            await uow.roles.add(Role.create(name="EDITOR"))
            await uow.commit()
            await uow.roles.add(Role.create(name="AUTHOR"))
            await uow.rollback()

            assert [r.name for r in await uow.roles.list_all()] == ["EDITOR"]

    @pytest.mark.asyncio
    async def test_lock_released_after_failure(self, store):
        """Test the store lock is released when the block raises."""
        with pytest.raises(ValueError):
            async with InMemoryUnitOfWork(store):
                raise ValueError("fail")

        assert store.lock.locked() is False

    @pytest.mark.asyncio
    async def test_clear(self, store):
        """Test clearing the store drops all data."""
        async with InMemoryUnitOfWork(store) as uow:
            await uow.roles.add(Role.create(name="EDITOR"))

        store.clear()

        async with InMemoryUnitOfWork(store) as uow:
            assert await uow.roles.count() == 0
