"""Create user use case."""

import logging
from uuid import UUID

from admin_dashboard.application.dto.user_dto import CreateUserInput, UserOutput
from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.application.use_cases._actor import load_actor, resolve_roles
from admin_dashboard.domain.entities.user import User
from admin_dashboard.domain.exceptions import ConflictError, ValidationError
from admin_dashboard.domain.services.authorization import require_any_permission
from admin_dashboard.domain.value_objects.email import Email
from admin_dashboard.domain.value_objects.rbac_catalog import (
    MAX_ROLES_PER_USER,
    SystemPermission,
    SystemRole,
)

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a dashboard user."""

    def __init__(self, uow: UnitOfWorkPort, max_roles_per_user: int = MAX_ROLES_PER_USER):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
            max_roles_per_user: Upper bound on roles held by one user
        """
        self.uow = uow
        self.max_roles_per_user = max_roles_per_user

    async def execute(self, data: CreateUserInput, current_user_id: UUID) -> UserOutput:
        """
        Create an active user.

        Args:
            data: User attributes and initial role ids
            current_user_id: ID of user performing the request

        Returns:
            Created user with its roles and permissions

        Raises:
            UnauthorizedError: If the actor may not create users
            ValidationError: If the email or name is invalid, or too many
                roles are requested
            ConflictError: If the email is already registered
            NotFoundError: If a role id is unknown
        """
        async with self.uow:
            actor = await load_actor(self.uow, current_user_id)
            require_any_permission(
                actor,
                [
                    SystemPermission.USERS_CREATE.value,
                    SystemPermission.USERS_MANAGE.value,
                ],
            )

            email = Email(data.email)
            if await self.uow.users.email_exists(email.value):
                raise ConflictError("Email already exists")

            if data.role_ids:
                roles = await resolve_roles(self.uow, data.role_ids)
            else:
                default_role = await self.uow.roles.get_by_name(SystemRole.USER.value)
                roles = [default_role] if default_role is not None else []

            if len(roles) > self.max_roles_per_user:
                raise ValidationError(
                    f"A user cannot have more than {self.max_roles_per_user} roles"
                )

            user = User.create(
                email=email,
                name=data.name,
                image=data.image,
                roles=roles,
            )

            user = await self.uow.users.add(user)
            await self.uow.commit()

        logger.info(
            f"Created user {user.id} with roles {user.get_role_names()} "
            f"by user {current_user_id}"
        )
        return UserOutput.from_entity(user)
