"""Mapper between Permission domain entity and PermissionModel."""

from typing import Optional

from admin_dashboard.domain.entities.permission import Permission
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.models.rbac_models import (
    PermissionModel,
)


class PermissionMapper:
    """Mapper between Permission entity and PermissionModel."""

    @staticmethod
    def to_entity(model: PermissionModel) -> Permission:
        """
        Convert SQLAlchemy model to domain entity.

        Args:
            model: PermissionModel from database

        Returns:
            Permission domain entity
        """
        return Permission.from_persistence(
            {
                "id": model.id,
                "name": model.name,
                "description": model.description,
                "resource": model.resource,
                "action": model.action,
                "created_at": model.created_at,
                "updated_at": model.updated_at,
            }
        )

    @staticmethod
    def to_model(
        entity: Permission, existing_model: Optional[PermissionModel] = None
    ) -> PermissionModel:
        """
        Convert domain entity to SQLAlchemy model.

        Args:
            entity: Permission domain entity
            existing_model: Optional existing model to update (for updates)

        Returns:
            PermissionModel for database persistence
        """
        data = entity.to_persistence()

        if existing_model:
            # Only the description is mutable
            existing_model.description = data["description"]
            existing_model.updated_at = data["updated_at"]
            return existing_model

        return PermissionModel(**data)
