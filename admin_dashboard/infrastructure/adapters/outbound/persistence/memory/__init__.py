"""In-memory persistence adapter (development and tests)."""

from admin_dashboard.infrastructure.adapters.outbound.persistence.memory.repositories import (
    InMemoryPermissionRepository,
    InMemoryRoleRepository,
    InMemoryUserRepository,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.memory.store import (
    InMemoryStore,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.memory.unit_of_work import (
    InMemoryUnitOfWork,
)

__all__ = [
    "InMemoryPermissionRepository",
    "InMemoryRoleRepository",
    "InMemoryStore",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
