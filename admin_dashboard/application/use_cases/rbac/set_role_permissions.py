"""Set role permissions use case."""

import logging
from uuid import UUID

from admin_dashboard.application.dto.rbac_dto import RoleOutput, SetRolePermissionsInput
from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.application.use_cases._actor import (
    load_actor,
    resolve_permissions,
)
from admin_dashboard.domain.exceptions import NotFoundError, ValidationError
from admin_dashboard.domain.services.authorization import require_any_permission
from admin_dashboard.domain.value_objects.rbac_catalog import (
    MAX_PERMISSIONS_PER_ROLE,
    SystemPermission,
)

logger = logging.getLogger(__name__)


class SetRolePermissionsUseCase:
    """Use case for replacing every permission granted by a role."""

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

    async def execute(
        self, role_id: UUID, data: SetRolePermissionsInput, current_user_id: UUID
    ) -> RoleOutput:
        """
        Replace the permissions of a role.

        Raises:
            UnauthorizedError: If the actor may not update roles
            NotFoundError: If the role or a permission doesn't exist
            InvalidOperationError: If role is a system role
            ValidationError: If too many permissions are requested
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

            permissions = await resolve_permissions(self.uow, data.permission_ids)
            if len(permissions) > self.max_permissions_per_role:
                raise ValidationError(
                    f"A role cannot have more than "
                    f"{self.max_permissions_per_role} permissions"
                )

            role.set_permissions(permissions)

            await self.uow.roles.update(role)
            await self.uow.roles.set_permissions(
                role_id, [p.id for p in role.permissions]
            )
            await self.uow.commit()

        logger.info(
            f"Set {len(role.permissions)} permissions on role {role.name} "
            f"({role.id}) by user {current_user_id}"
        )
        return RoleOutput.from_entity(role)
