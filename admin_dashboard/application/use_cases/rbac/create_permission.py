"""Create permission use case."""

import logging
from uuid import UUID

from admin_dashboard.application.dto.rbac_dto import (
    CreatePermissionInput,
    PermissionOutput,
)
from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.application.use_cases._actor import load_actor
from admin_dashboard.domain.entities.permission import Permission
from admin_dashboard.domain.exceptions import ConflictError
from admin_dashboard.domain.services.authorization import require_any_permission
from admin_dashboard.domain.value_objects.rbac_catalog import SystemPermission

logger = logging.getLogger(__name__)


class CreatePermissionUseCase:
    """Use case for registering a new ``resource:action`` permission."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def execute(
        self, data: CreatePermissionInput, current_user_id: UUID
    ) -> PermissionOutput:
        """
        Create a permission.

        Args:
            data: Permission attributes
            current_user_id: ID of user performing the request

        Returns:
            Created permission

        Raises:
            UnauthorizedError: If the actor may not create permissions
            ValidationError: If the attributes are invalid
            ConflictError: If the ``(resource, action)`` pair is taken
        """
        async with self.uow:
            actor = await load_actor(self.uow, current_user_id)
            require_any_permission(
                actor,
                [
                    SystemPermission.PERMISSIONS_CREATE.value,
                    SystemPermission.PERMISSIONS_MANAGE.value,
                ],
            )

            permission = Permission.create(
                name=data.name,
                resource=data.resource,
                action=data.action,
                description=data.description,
            )

            if await self.uow.permissions.exists(permission.resource, permission.action):
                raise ConflictError(
                    f"Permission '{permission.get_permission_string()}' already exists"
                )

            permission = await self.uow.permissions.add(permission)
            await self.uow.commit()

        logger.info(
            f"Created permission {permission.get_permission_string()} "
            f"({permission.id}) by user {current_user_id}"
        )
        return PermissionOutput.from_entity(permission)
