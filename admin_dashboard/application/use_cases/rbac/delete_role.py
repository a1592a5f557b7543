"""Delete role use case."""

import logging
from uuid import UUID

from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.application.use_cases._actor import load_actor
from admin_dashboard.domain.exceptions import (
    ConflictError,
    InvalidOperationError,
    NotFoundError,
)
from admin_dashboard.domain.services.authorization import require_any_permission
from admin_dashboard.domain.value_objects.rbac_catalog import SystemPermission

logger = logging.getLogger(__name__)


class DeleteRoleUseCase:
    """Use case for deleting a custom role."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def execute(self, role_id: UUID, current_user_id: UUID) -> None:
        """
        Delete a role.

        Args:
            role_id: Role's unique identifier
            current_user_id: ID of user performing the request

        Raises:
            UnauthorizedError: If the actor may not delete roles
            NotFoundError: If role doesn't exist
            InvalidOperationError: If role is a system role
            ConflictError: If role is still assigned to users
        """
        async with self.uow:
            actor = await load_actor(self.uow, current_user_id)
            require_any_permission(
                actor,
                [
                    SystemPermission.ROLES_DELETE.value,
                    SystemPermission.ROLES_MANAGE.value,
                ],
            )

            role = await self.uow.roles.get_by_id(role_id)
            if role is None:
                raise NotFoundError("Role", role_id)

            if role.is_system:
                raise InvalidOperationError("Cannot delete system roles")

            if await self.uow.roles.is_assigned(role_id):
                raise ConflictError(
                    f"Role '{role.name}' is still assigned to users"
                )

            await self.uow.roles.delete(role_id)
            await self.uow.commit()

        logger.info(f"Deleted role {role.name} ({role_id}) by user {current_user_id}")
