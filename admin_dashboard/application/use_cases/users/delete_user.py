"""Delete user use case."""

import logging
from uuid import UUID

from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.application.use_cases._actor import load_actor
from admin_dashboard.domain.exceptions import NotFoundError
from admin_dashboard.domain.services.authorization import require_any_permission
from admin_dashboard.domain.value_objects.rbac_catalog import SystemPermission

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def execute(self, user_id: UUID, current_user_id: UUID) -> None:
        """
        Delete a user and its role assignments.

        Args:
            user_id: User's unique identifier to delete
            current_user_id: ID of user performing the deletion

        Raises:
            UnauthorizedError: If the actor may not delete users
            NotFoundError: If user doesn't exist
        """
        async with self.uow:
            actor = await load_actor(self.uow, current_user_id)
            require_any_permission(
                actor,
                [
                    SystemPermission.USERS_DELETE.value,
                    SystemPermission.USERS_MANAGE.value,
                ],
            )

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError("User", user_id)

            await self.uow.users.delete(user_id)
            await self.uow.commit()

        logger.info(f"Deleted user {user_id} by user {current_user_id}")
