"""PostgreSQL implementation of RoleRepositoryPort."""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import delete, exists, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from admin_dashboard.application.ports.outbound.role_repository_port import (
    RoleRepositoryPort,
)
from admin_dashboard.domain.entities.role import Role
from admin_dashboard.domain.exceptions import NotFoundError
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.mappers.role_mapper import (
    RoleMapper,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.models.rbac_models import (
    PermissionModel,
    RoleModel,
    role_permissions,
    user_roles,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    BaseRepository,
)


class PostgresRoleRepository(BaseRepository[RoleModel, Role], RoleRepositoryPort):
    """
    PostgreSQL implementation of RoleRepositoryPort.

    Inherits common CRUD operations from BaseRepository and writes the
    role_permissions junction rows itself.
    """

    entity_name = "Role"

    def __init__(self, session: AsyncSession):
        """
        Initialize PostgreSQL role repository.

        Args:
            session: SQLAlchemy async session
        """
        super().__init__(session, RoleModel, RoleMapper)

    def _default_order(self) -> list[Any]:
        return [RoleModel.name]

    async def _after_add(self, entity: Role) -> None:
        await self._replace_links(entity.id, [p.id for p in entity.permissions])

    async def _replace_links(self, role_id: UUID, permission_ids: list[UUID]) -> None:
        permission_ids = list(dict.fromkeys(permission_ids))

        if permission_ids:
            result = await self.session.execute(
                select(PermissionModel.id).where(PermissionModel.id.in_(permission_ids))
            )
            found = set(result.scalars().all())
            for permission_id in permission_ids:
                if permission_id not in found:
                    raise NotFoundError("Permission", permission_id)

        await self.session.execute(
            delete(role_permissions).where(role_permissions.c.role_id == role_id)
        )
        if permission_ids:
            await self.session.execute(
                insert(role_permissions),
                [
                    {"role_id": role_id, "permission_id": pid, "position": position}
                    for position, pid in enumerate(permission_ids)
                ],
            )
        await self.session.flush()

    async def get_by_name(self, name: str) -> Optional[Role]:
        """
        Retrieve role by name.

        Args:
            name: Role name

        Returns:
            Role entity if found, None otherwise
        """
        return await self._fetch_one(select(RoleModel).where(RoleModel.name == name))

    async def list_by_user_id(self, user_id: UUID) -> list[Role]:
        """
        List all roles assigned to a user, in assignment order.

        Args:
            user_id: User's unique identifier

        Returns:
            List of role entities
        """
        stmt = (
            select(RoleModel)
            .join(user_roles, RoleModel.id == user_roles.c.role_id)
            .where(user_roles.c.user_id == user_id)
            .order_by(user_roles.c.position)
        )
        return await self._fetch_all(stmt)

    async def name_exists(self, name: str, exclude_id: Optional[UUID] = None) -> bool:
        condition = RoleModel.name == name
        if exclude_id is not None:
            condition = condition & (RoleModel.id != exclude_id)

        result = await self.session.execute(select(exists().where(condition)))
        return bool(result.scalar())

    async def set_permissions(
        self, role_id: UUID, permission_ids: list[UUID]
    ) -> None:
        await self._load_or_raise(role_id)
        await self._replace_links(role_id, permission_ids)

    async def is_assigned(self, role_id: UUID) -> bool:
        result = await self.session.execute(
            select(exists().where(user_roles.c.role_id == role_id))
        )
        return bool(result.scalar())
