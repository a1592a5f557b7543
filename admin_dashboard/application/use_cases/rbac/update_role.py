"""Update role use case."""

import logging
from uuid import UUID

from admin_dashboard.application.dto.rbac_dto import RoleOutput, UpdateRoleInput
from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.application.use_cases._actor import load_actor
from admin_dashboard.domain.exceptions import ConflictError, NotFoundError
from admin_dashboard.domain.services.authorization import require_any_permission
from admin_dashboard.domain.value_objects.rbac_catalog import SystemPermission

logger = logging.getLogger(__name__)


class UpdateRoleUseCase:
    """Use case for renaming a role or changing its description."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def execute(
        self, role_id: UUID, data: UpdateRoleInput, current_user_id: UUID
    ) -> RoleOutput:
        """
        Update role details.

        Args:
            role_id: Role's unique identifier
            data: Fields to change (omitted fields are kept)
            current_user_id: ID of user performing the request

        Returns:
            Updated role

        Raises:
            UnauthorizedError: If the actor may not update roles
            NotFoundError: If role doesn't exist
            InvalidOperationError: If role is a system role
            ValidationError: If the new name is invalid
            ConflictError: If the new name is taken by another role
        """
        async with self.uow:
            actor = await load_actor(self.uow, current_user_id)
            require_any_permission(
                actor,
                [
                    SystemPermission.ROLES_UPDATE.value,
                    SystemPermission.ROLES_MANAGE.value,
                ],
            )

            role = await self.uow.roles.get_by_id(role_id)
            if role is None:
                raise NotFoundError("Role", role_id)

            name = data.name if data.name is not None else role.name
            description = (
                data.description
                if "description" in data.model_fields_set
                else role.description
            )

            role.update_details(name, description)

            if await self.uow.roles.name_exists(role.name, exclude_id=role.id):
                raise ConflictError(f"Role '{role.name}' already exists")

            role = await self.uow.roles.update(role)
            await self.uow.commit()

        logger.info(f"Updated role {role.name} ({role.id}) by user {current_user_id}")
        return RoleOutput.from_entity(role)
