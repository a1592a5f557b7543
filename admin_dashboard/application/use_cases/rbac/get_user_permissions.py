"""Get user permissions use case."""

from uuid import UUID

from admin_dashboard.application.dto.rbac_dto import UserPermissionsOutput
from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.application.use_cases._actor import load_actor
from admin_dashboard.domain.exceptions import NotFoundError
from admin_dashboard.domain.services.authorization import (
    require_ownership_or_permission,
)
from admin_dashboard.domain.value_objects.rbac_catalog import SystemPermission


class GetUserPermissionsUseCase:
    """Use case for inspecting the roles and effective permissions of a user."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def execute(self, user_id: UUID, current_user_id: UUID) -> UserPermissionsOutput:
        """
        Get a user's roles and permissions.

        Users may always inspect themselves; inspecting others requires
        ``users:read``.

        Raises:
            UnauthorizedError: If the actor is neither the user nor permitted
            NotFoundError: If user doesn't exist
        """
        async with self.uow:
            actor = await load_actor(self.uow, current_user_id)
            require_ownership_or_permission(
                actor, user_id, SystemPermission.USERS_READ.value
            )

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError("User", user_id)

            return UserPermissionsOutput.from_entity(user)
