"""
PostgreSQL repository implementations.

All repositories inherit from BaseRepository for common CRUD operations
and implement their specific port interfaces.
"""

from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    BaseRepository,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.repositories.permission_repository import (
    PostgresPermissionRepository,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.repositories.role_repository import (
    PostgresRoleRepository,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.repositories.user_repository import (
    PostgresUserRepository,
)

__all__ = [
    "BaseRepository",
    "PostgresPermissionRepository",
    "PostgresRoleRepository",
    "PostgresUserRepository",
]
