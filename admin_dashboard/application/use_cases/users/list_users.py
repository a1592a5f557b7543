"""List users use case."""

from uuid import UUID

from admin_dashboard.application.dto.user_dto import UserListOutput, UserOutput
from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.application.use_cases._actor import load_actor
from admin_dashboard.domain.services.authorization import require_any_permission
from admin_dashboard.domain.value_objects.rbac_catalog import SystemPermission


class ListUsersUseCase:
    """Use case for listing users, newest first."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def execute(
        self, current_user_id: UUID, skip: int = 0, limit: int = 100
    ) -> UserListOutput:
        """
        List users with pagination.

        Args:
            current_user_id: ID of user performing the request
            skip: Number of records to skip (offset)
            limit: Maximum number of records to return

        Returns:
            Page of users and the total count

        Raises:
            UnauthorizedError: If the actor may not list users
        """
        async with self.uow:
            actor = await load_actor(self.uow, current_user_id)
            require_any_permission(
                actor,
                [
                    SystemPermission.USERS_LIST.value,
                    SystemPermission.USERS_READ.value,
                    SystemPermission.USERS_MANAGE.value,
                ],
            )

            users = await self.uow.users.list_all(skip=skip, limit=limit)
            total = await self.uow.users.count()

            return UserListOutput(
                users=[UserOutput.from_entity(user) for user in users],
                total=total,
                skip=skip,
                limit=limit,
            )
