"""List roles use case."""

from uuid import UUID

from admin_dashboard.application.dto.rbac_dto import RoleListOutput, RoleOutput
from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.application.use_cases._actor import load_actor
from admin_dashboard.domain.services.authorization import require_any_permission
from admin_dashboard.domain.value_objects.rbac_catalog import SystemPermission


class ListRolesUseCase:
    """Use case for listing roles with their permissions."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def execute(
        self, current_user_id: UUID, skip: int = 0, limit: int = 100
    ) -> RoleListOutput:
        """
        List roles with pagination.

        Args:
            current_user_id: ID of user performing the request
            skip: Number of records to skip (offset)
            limit: Maximum number of records to return

        Returns:
            Page of roles and the total count

        Raises:
            UnauthorizedError: If the actor may not list roles
        """
        async with self.uow:
            actor = await load_actor(self.uow, current_user_id)
            require_any_permission(
                actor,
                [
                    SystemPermission.ROLES_LIST.value,
                    SystemPermission.ROLES_READ.value,
                    SystemPermission.ROLES_MANAGE.value,
                ],
            )

            roles = await self.uow.roles.list_all(skip=skip, limit=limit)
            total = await self.uow.roles.count()

            return RoleListOutput(
                roles=[RoleOutput.from_entity(role) for role in roles],
                total=total,
                skip=skip,
                limit=limit,
            )
