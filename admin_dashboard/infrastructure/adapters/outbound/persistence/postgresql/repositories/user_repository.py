"""PostgreSQL implementation of UserRepositoryPort."""

from typing import Optional
from uuid import UUID

from sqlalchemy import delete, exists, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from admin_dashboard.application.ports.outbound.user_repository_port import (
    UserRepositoryPort,
)
from admin_dashboard.domain.entities.user import User
from admin_dashboard.domain.exceptions import NotFoundError
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.mappers.user_mapper import (
    UserMapper,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.models.rbac_models import (
    RoleModel,
    UserModel,
    user_roles,
)
from admin_dashboard.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    BaseRepository,
)


class PostgresUserRepository(BaseRepository[UserModel, User], UserRepositoryPort):
    """
    PostgreSQL implementation of UserRepositoryPort.

    Users load with their roles and the roles' permissions (selectin).
    """

    entity_name = "User"

    def __init__(self, session: AsyncSession):
        """
        Initialize PostgreSQL user repository.

        Args:
            session: SQLAlchemy async session
        """
        super().__init__(session, UserModel, UserMapper)

    async def _after_add(self, entity: User) -> None:
        await self._replace_links(entity.id, [r.id for r in entity.roles])

    async def _replace_links(self, user_id: UUID, role_ids: list[UUID]) -> None:
        role_ids = list(dict.fromkeys(role_ids))

        if role_ids:
            result = await self.session.execute(
                select(RoleModel.id).where(RoleModel.id.in_(role_ids))
            )
            found = set(result.scalars().all())
            for role_id in role_ids:
                if role_id not in found:
                    raise NotFoundError("Role", role_id)

        await self.session.execute(
            delete(user_roles).where(user_roles.c.user_id == user_id)
        )
        if role_ids:
            await self.session.execute(
                insert(user_roles),
                [
                    {"user_id": user_id, "role_id": rid, "position": position}
                    for position, rid in enumerate(role_ids)
                ],
            )
        await self.session.flush()

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Retrieve user by email address.

        Args:
            email: Email address (normalized before lookup)

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserModel).where(UserModel.email == email.strip().lower())
        return await self._fetch_one(stmt)

    async def email_exists(
        self, email: str, exclude_id: Optional[UUID] = None
    ) -> bool:
        condition = UserModel.email == email.strip().lower()
        if exclude_id is not None:
            condition = condition & (UserModel.id != exclude_id)

        result = await self.session.execute(select(exists().where(condition)))
        return bool(result.scalar())

    async def set_roles(self, user_id: UUID, role_ids: list[UUID]) -> None:
        await self._load_or_raise(user_id)
        await self._replace_links(user_id, role_ids)
