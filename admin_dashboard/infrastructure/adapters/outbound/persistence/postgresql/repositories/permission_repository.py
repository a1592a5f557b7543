"""PostgreSQL implementation of PermissionRepositoryPort."""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from admin_dashboard.application.ports.outbound.permission_repository_port import (
    PermissionRepositoryPort,
)
from admin_dashboard.domain.entities.permission import Permission
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.mappers.permission_mapper import (
    PermissionMapper,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.models.rbac_models import (
    PermissionModel,
    role_permissions,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    BaseRepository,
)


class PostgresPermissionRepository(
    BaseRepository[PermissionModel, Permission], PermissionRepositoryPort
):
    """PostgreSQL implementation of PermissionRepositoryPort."""

    entity_name = "Permission"

    def __init__(self, session: AsyncSession):
        """
        Initialize PostgreSQL permission repository.

        Args:
            session: SQLAlchemy async session
        """
        super().__init__(session, PermissionModel, PermissionMapper)

    def _default_order(self) -> list[Any]:
        return [PermissionModel.resource, PermissionModel.action]

    async def get_by_resource_and_action(
        self, resource: str, action: str
    ) -> Optional[Permission]:
        stmt = select(PermissionModel).where(
            PermissionModel.resource == resource,
            PermissionModel.action == action,
        )
        return await self._fetch_one(stmt)

    async def list_by_role_id(self, role_id: UUID) -> list[Permission]:
        stmt = (
            select(PermissionModel)
            .join(role_permissions, PermissionModel.id == role_permissions.c.permission_id)
            .where(role_permissions.c.role_id == role_id)
            .order_by(role_permissions.c.position)
        )
        return await self._fetch_all(stmt)

    async def exists(
        self, resource: str, action: str, exclude_id: Optional[UUID] = None
    ) -> bool:
        condition = (PermissionModel.resource == resource) & (
            PermissionModel.action == action
        )
        if exclude_id is not None:
            condition = condition & (PermissionModel.id != exclude_id)

        result = await self.session.execute(select(exists().where(condition)))
        return bool(result.scalar())
