"""Set user roles use case."""

import logging
from uuid import UUID

from admin_dashboard.application.dto.rbac_dto import (
    SetUserRolesInput,
    UserPermissionsOutput,
)
from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.application.use_cases._actor import load_actor, resolve_roles
from admin_dashboard.domain.exceptions import NotFoundError, ValidationError
from admin_dashboard.domain.services.authorization import require_any_permission
from admin_dashboard.domain.value_objects.rbac_catalog import (
    MAX_ROLES_PER_USER,
    SystemPermission,
)

logger = logging.getLogger(__name__)

ROLE_ASSIGNMENT_PERMISSIONS = [
    SystemPermission.USERS_MANAGE.value,
    SystemPermission.ROLES_MANAGE.value,
]


class SetUserRolesUseCase:
    """Use case for replacing every role held by a user."""

    def __init__(self, uow: UnitOfWorkPort, max_roles_per_user: int = MAX_ROLES_PER_USER):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
            max_roles_per_user: Upper bound on roles held by one user
        """
        self.uow = uow
        self.max_roles_per_user = max_roles_per_user

    async def execute(
        self, user_id: UUID, data: SetUserRolesInput, current_user_id: UUID
    ) -> UserPermissionsOutput:
        """
        Replace the roles of a user.

        Args:
            user_id: Target user's unique identifier
            data: Role ids the user keeps
            current_user_id: ID of user performing the request

        Returns:
            The user's resulting roles and permissions

        Raises:
            UnauthorizedError: If the actor may not assign roles
            NotFoundError: If the user or a role doesn't exist
            ValidationError: If too many roles are requested
        """
        async with self.uow:
            actor = await load_actor(self.uow, current_user_id)
            require_any_permission(actor, ROLE_ASSIGNMENT_PERMISSIONS)

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError("User", user_id)

            roles = await resolve_roles(self.uow, data.role_ids)
            if len(roles) > self.max_roles_per_user:
                raise ValidationError(
                    f"A user cannot have more than {self.max_roles_per_user} roles"
                )

            user.set_roles(roles)

            await self.uow.users.update(user)
            await self.uow.users.set_roles(user_id, [r.id for r in user.roles])
            await self.uow.commit()

        logger.info(
            f"Set roles {user.get_role_names()} on user {user_id} "
            f"by user {current_user_id}"
        )
        return UserPermissionsOutput.from_entity(user)
