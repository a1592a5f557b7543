"""Get user use case."""

from uuid import UUID

from admin_dashboard.application.dto.user_dto import UserOutput
from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.application.use_cases._actor import load_actor
from admin_dashboard.domain.exceptions import NotFoundError
from admin_dashboard.domain.services.authorization import (
    require_any_permission,
    require_authenticated,
)
from admin_dashboard.domain.value_objects.rbac_catalog import SystemPermission


class GetUserUseCase:
    """Use case for retrieving a user."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def execute(self, user_id: UUID, current_user_id: UUID) -> UserOutput:
        """
        Get user by ID.

        Users may always read themselves; reading others requires
        ``users:read`` or ``users:manage``.

        Raises:
            UnauthorizedError: If the actor is neither the user nor permitted
            NotFoundError: If user doesn't exist
        """
        async with self.uow:
            actor = await load_actor(self.uow, current_user_id)
            require_authenticated(actor)

            if str(actor.id) != str(user_id):
                require_any_permission(
                    actor,
                    [
                        SystemPermission.USERS_READ.value,
                        SystemPermission.USERS_MANAGE.value,
                    ],
                )

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError("User", user_id)

            return UserOutput.from_entity(user)
