"""
Pytest configuration and shared fixtures.

This module provides:
- Entity factories (permissions, roles, users)
- An in-memory store and unit of work factory
- A seeded catalog for integration tests
"""

from typing import Callable, Optional
from uuid import uuid4

import pytest
import pytest_asyncio

from admin_dashboard.application.use_cases.rbac import SeedRbacUseCase
from admin_dashboard.domain.entities.permission import Permission
from admin_dashboard.domain.entities.role import Role
from admin_dashboard.domain.entities.user import User
from admin_dashboard.domain.value_objects.email import Email
from admin_dashboard.domain.value_objects.user_status import UserStatus
from admin_dashboard.infrastructure.adapters.outbound.persistence.memory import (
    InMemoryStore,
    InMemoryUnitOfWork,
)


# ============================================================================
# Entity Factories
# ============================================================================
@pytest.fixture
def make_permission() -> Callable[..., Permission]:
    """Factory for persisted-looking permissions built from a permission string."""

    def factory(permission_string: str, description: Optional[str] = None) -> Permission:
        resource, action = permission_string.split(":")
        permission = Permission.create(
            name=permission_string,
            resource=resource,
            action=action,
            description=description,
        )
        permission.id = uuid4()
        return permission

    return factory


@pytest.fixture
def make_role(make_permission) -> Callable[..., Role]:
    """Factory for roles granting the given permission strings."""

    def factory(
        name: str,
        permissions: Optional[list[str]] = None,
        is_system: bool = False,
    ) -> Role:
        role = Role.create(
            name=name,
            is_system=is_system,
            permissions=[make_permission(p) for p in permissions or []],
        )
        role.id = uuid4()
        return role

    return factory


@pytest.fixture
def make_user() -> Callable[..., User]:
    """Factory for users holding the given roles."""

    def factory(
        roles: Optional[list[Role]] = None,
        status: UserStatus = UserStatus.ACTIVE,
        email: Optional[str] = None,
    ) -> User:
        user = User.create(
            email=Email(email or f"user-{uuid4().hex[:8]}@example.com"),
            name="Test User",
            status=status,
            roles=roles,
        )
        user.id = uuid4()
        return user

    return factory


# ============================================================================
# Storage Fixtures
# ============================================================================
@pytest.fixture
def store() -> InMemoryStore:
    """Fresh in-memory store per test."""
    return InMemoryStore()


@pytest.fixture
def uow_factory(store) -> Callable[[], InMemoryUnitOfWork]:
    """Factory returning a new unit of work over the test store."""
    return lambda: InMemoryUnitOfWork(store)


@pytest_asyncio.fixture
async def seeded_uow_factory(uow_factory) -> Callable[[], InMemoryUnitOfWork]:
    """Unit of work factory over a store holding the built-in catalog."""
    await SeedRbacUseCase(uow_factory()).execute()
    return uow_factory


@pytest_asyncio.fixture
async def create_user(seeded_uow_factory) -> Callable:
    """Persist a user holding the named (seeded) roles; returns the stored user."""

    async def factory(
        role_names: list[str],
        status: UserStatus = UserStatus.ACTIVE,
        email: Optional[str] = None,
    ) -> User:
        async with seeded_uow_factory() as uow:
            roles = [await uow.roles.get_by_name(name) for name in role_names]
            user = User.create(
                email=Email(email or f"user-{uuid4().hex[:8]}@example.com"),
                name="Stored User",
                status=status,
                roles=roles,
            )
            return await uow.users.add(user)

    return factory
