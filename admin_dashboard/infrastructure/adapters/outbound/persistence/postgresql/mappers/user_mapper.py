"""Mapper between User domain entity and UserModel database model."""

from typing import Optional

from admin_dashboard.domain.entities.user import User
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.mappers.role_mapper import (
    RoleMapper,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.models.rbac_models import (
    UserModel,
)


class UserMapper:
    """
    Mapper between User entity and UserModel.

    Handles conversion between:
    - Domain entity (User) with Email and UserStatus value objects
    - SQLAlchemy ORM model (UserModel) with plain strings
    """

    @staticmethod
    def to_entity(model: UserModel) -> User:
        """
        Convert SQLAlchemy model (with roles loaded) to domain entity.

        Args:
            model: UserModel from database

        Returns:
            User domain entity with roles and their permissions
        """
        return User.from_persistence(
            {
                "id": model.id,
                "email": model.email,
                "name": model.name,
                "image": model.image,
                "status": model.status,
                "email_verified_at": model.email_verified_at,
                "created_at": model.created_at,
                "updated_at": model.updated_at,
            },
            [RoleMapper.to_entity(r) for r in model.roles],
        )

    @staticmethod
    def to_model(entity: User, existing_model: Optional[UserModel] = None) -> UserModel:
        """
        Convert domain entity to SQLAlchemy model (scalar columns only).

        Args:
            entity: User domain entity
            existing_model: Optional existing model to update (for updates)

        Returns:
            UserModel for database persistence
        """
        data = entity.to_persistence()

        if existing_model:
            existing_model.email = data["email"]
            existing_model.name = data["name"]
            existing_model.image = data["image"]
            existing_model.status = data["status"]
            existing_model.email_verified_at = data["email_verified_at"]
            existing_model.updated_at = data["updated_at"]
            return existing_model

        return UserModel(**data)
