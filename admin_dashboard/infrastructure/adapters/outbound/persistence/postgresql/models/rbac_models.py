"""
Permission, Role and User SQLAlchemy models.

This module defines:
- PermissionModel: one ``resource:action`` capability
- RoleModel: named set of permissions
- UserModel: dashboard user
- role_permissions / user_roles: many-to-many junction tables

Junction rows carry a ``position`` so that permissions and roles load in
the order they were granted. Relationships are read-only; repositories
write junction rows directly.
"""

from datetime import UTC, datetime
from typing import Optional

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.models.base import (
    Base,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.models.mixins import (
    TimestampMixin,
)

# =============================================================================
# Junction Tables (Many-to-Many)
# =============================================================================

role_permissions = Table(
    "role_permissions",
    Base.metadata,
    Column(
        "role_id",
        UUID(as_uuid=True),
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "permission_id",
        UUID(as_uuid=True),
        ForeignKey("permissions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("position", Integer, nullable=False, default=0),
    Column(
        "granted_at",
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    ),
)

user_roles = Table(
    "user_roles",
    Base.metadata,
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "role_id",
        UUID(as_uuid=True),
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("position", Integer, nullable=False, default=0),
    Column(
        "assigned_at",
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
    ),
)


# =============================================================================
# Permission Model
# =============================================================================


class PermissionModel(Base, TimestampMixin):
    """
    Permission SQLAlchemy model.

    Pure SQLAlchemy with no business logic; see
    domain.entities.permission.Permission.
    """

    __tablename__ = "permissions"
    __table_args__ = (
        UniqueConstraint("resource", "action", name="uq_permissions_resource_action"),
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    resource: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    action: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"PermissionModel(id={self.id}, permission={self.resource}:{self.action})"


# =============================================================================
# Role Model
# =============================================================================


class RoleModel(Base, TimestampMixin):
    """
    Role SQLAlchemy model.

    Pure SQLAlchemy with no business logic; see domain.entities.role.Role.
    """

    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, index=True)
    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    is_system: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    permissions: Mapped[list["PermissionModel"]] = relationship(
        "PermissionModel",
        secondary=role_permissions,
        order_by=role_permissions.c.position,
        lazy="selectin",  # Load permissions automatically
        viewonly=True,
    )

    def __repr__(self) -> str:
        return f"RoleModel(id={self.id}, name={self.name})"


# =============================================================================
# User Model
# =============================================================================


class UserModel(Base, TimestampMixin):
    """
    User SQLAlchemy model.

    Pure SQLAlchemy with no business logic; see domain.entities.user.User.
    Emails are stored normalized (lower case).
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    image: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="ACTIVE", index=True)
    email_verified_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    roles: Mapped[list["RoleModel"]] = relationship(
        "RoleModel",
        secondary=user_roles,
        order_by=user_roles.c.position,
        lazy="selectin",  # Load roles (and their permissions) automatically
        viewonly=True,
    )

    def __repr__(self) -> str:
        return f"UserModel(id={self.id}, email={self.email})"
