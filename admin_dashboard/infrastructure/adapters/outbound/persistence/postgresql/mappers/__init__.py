"""
Mappers for converting between domain entities and database models.

Mappers live in the Infrastructure layer and know about both domain
entities and SQLAlchemy models.
"""

from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.mappers.permission_mapper import (
    PermissionMapper,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.mappers.role_mapper import (
    RoleMapper,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.mappers.user_mapper import (
    UserMapper,
)

__all__ = [
    "PermissionMapper",
    "RoleMapper",
    "UserMapper",
]
