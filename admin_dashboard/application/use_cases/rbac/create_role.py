"""Create role use case."""

import logging
from uuid import UUID

from admin_dashboard.application.dto.rbac_dto import CreateRoleInput, RoleOutput
from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.application.use_cases._actor import (
    load_actor,
    resolve_permissions,
)
from admin_dashboard.domain.entities.role import Role
from admin_dashboard.domain.exceptions import ConflictError, ValidationError
from admin_dashboard.domain.services.authorization import require_any_permission
from admin_dashboard.domain.value_objects.rbac_catalog import (
    MAX_PERMISSIONS_PER_ROLE,
    SystemPermission,
)

logger = logging.getLogger(__name__)


class CreateRoleUseCase:
    """Use case for creating a custom (non-system) role."""

    def __init__(
        self,
        uow: UnitOfWorkPort,
        max_permissions_per_role: int = MAX_PERMISSIONS_PER_ROLE,
    ):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
            max_permissions_per_role: Upper bound on granted permissions
        """
        self.uow = uow
        self.max_permissions_per_role = max_permissions_per_role

    async def execute(self, data: CreateRoleInput, current_user_id: UUID) -> RoleOutput:
        """
        Create a role with its initial permissions.

        Args:
            data: Role attributes and initial permission ids
            current_user_id: ID of user performing the request

        Returns:
            Created role

        Raises:
            UnauthorizedError: If the actor may not create roles
            ValidationError: If the name is invalid or too many permissions
                are requested
            ConflictError: If the name is taken
            NotFoundError: If a permission id is unknown
        """
        async with self.uow:
            actor = await load_actor(self.uow, current_user_id)
            require_any_permission(
                actor,
                [
                    SystemPermission.ROLES_CREATE.value,
                    SystemPermission.ROLES_MANAGE.value,
                ],
            )

            permissions = await resolve_permissions(self.uow, data.permission_ids)
            if len(permissions) > self.max_permissions_per_role:
                raise ValidationError(
                    f"A role cannot have more than "
                    f"{self.max_permissions_per_role} permissions"
                )

            role = Role.create(
                name=data.name,
                description=data.description,
                permissions=permissions,
            )

            if await self.uow.roles.name_exists(role.name):
                raise ConflictError(f"Role '{role.name}' already exists")

            role = await self.uow.roles.add(role)
            await self.uow.commit()

        logger.info(
            f"Created role {role.name} ({role.id}) with "
            f"{len(role.permissions)} permissions by user {current_user_id}"
        )
        return RoleOutput.from_entity(role)
