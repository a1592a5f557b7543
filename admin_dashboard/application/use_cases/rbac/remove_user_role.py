"""Remove user role use case."""

import logging
from uuid import UUID

from admin_dashboard.application.dto.rbac_dto import UserPermissionsOutput
from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.application.use_cases._actor import load_actor
from admin_dashboard.application.use_cases.rbac.set_user_roles import (
    ROLE_ASSIGNMENT_PERMISSIONS,
)
from admin_dashboard.domain.exceptions import NotFoundError
from admin_dashboard.domain.services.authorization import require_any_permission

logger = logging.getLogger(__name__)


class RemoveUserRoleUseCase:
    """Use case for revoking a single role from a user."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def execute(
        self, user_id: UUID, role_id: UUID, current_user_id: UUID
    ) -> UserPermissionsOutput:
        """
        Remove a role from a user. Roles the user does not hold are ignored.

        Raises:
            UnauthorizedError: If the actor may not assign roles
            NotFoundError: If user doesn't exist
        """
        async with self.uow:
            actor = await load_actor(self.uow, current_user_id)
            require_any_permission(actor, ROLE_ASSIGNMENT_PERMISSIONS)

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError("User", user_id)

            user.remove_role(role_id)

            await self.uow.users.update(user)
            await self.uow.users.set_roles(user_id, [r.id for r in user.roles])
            await self.uow.commit()

        logger.info(f"Removed role {role_id} from user {user_id} by user {current_user_id}")
        return UserPermissionsOutput.from_entity(user)
