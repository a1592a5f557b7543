"""
Mapper between Role domain entity and RoleModel database model.

Permissions are loaded through the role_permissions junction table;
the mapper only converts what is already loaded and never writes links.
"""

from typing import Optional

from admin_dashboard.domain.entities.role import Role
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.mappers.permission_mapper import (
    PermissionMapper,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.models.rbac_models import (
    RoleModel,
)


class RoleMapper:
    """Mapper between Role entity and RoleModel."""

    @staticmethod
    def to_entity(model: RoleModel) -> Role:
        """
        Convert SQLAlchemy model (with permissions loaded) to domain entity.

        Args:
            model: RoleModel from database

        Returns:
            Role domain entity
        """
        return Role.from_persistence(
            {
                "id": model.id,
                "name": model.name,
                "description": model.description,
                "is_system": model.is_system,
                "created_at": model.created_at,
                "updated_at": model.updated_at,
            },
            [PermissionMapper.to_entity(p) for p in model.permissions],
        )

    @staticmethod
    def to_model(entity: Role, existing_model: Optional[RoleModel] = None) -> RoleModel:
        """
        Convert domain entity to SQLAlchemy model (scalar columns only).

        Args:
            entity: Role domain entity
            existing_model: Optional existing model to update (for updates)

        Returns:
            RoleModel for database persistence
        """
        data = entity.to_persistence()

        if existing_model:
            existing_model.name = data["name"]
            existing_model.description = data["description"]
            existing_model.is_system = data["is_system"]
            existing_model.updated_at = data["updated_at"]
            return existing_model

        return RoleModel(**data)
