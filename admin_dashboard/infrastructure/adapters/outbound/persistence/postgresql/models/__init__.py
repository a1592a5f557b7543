"""
SQLAlchemy models for PostgreSQL persistence.

Pure SQLAlchemy models with NO business logic; business logic lives in the
domain layer (admin_dashboard.domain.entities).
"""

from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.models.base import (
    Base,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.models.mixins import (
    TimestampMixin,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.models.rbac_models import (
    PermissionModel,
    RoleModel,
    UserModel,
    role_permissions,
    user_roles,
)

__all__ = [
    # Base
    "Base",
    # Models
    "PermissionModel",
    "RoleModel",
    "UserModel",
    # Junction Tables
    "role_permissions",
    "user_roles",
    # Mixins
    "TimestampMixin",
]
