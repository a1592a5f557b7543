"""Update user use case."""

import logging
from uuid import UUID

from admin_dashboard.application.dto.user_dto import UpdateUserInput, UserOutput
from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.application.use_cases._actor import load_actor
from admin_dashboard.domain.exceptions import NotFoundError
from admin_dashboard.domain.services.authorization import (
    require_admin,
    require_authenticated,
    require_permission,
)
from admin_dashboard.domain.value_objects.rbac_catalog import SystemPermission
from admin_dashboard.domain.value_objects.user_status import UserStatus

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for updating a user's profile or account status."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def execute(
        self, user_id: UUID, data: UpdateUserInput, current_user_id: UUID
    ) -> UserOutput:
        """
        Update a user.

        Users may edit their own profile. Editing others, or changing any
        account status, requires ``users:manage``, or ``users:update`` held
        by an administrator: the USER role holds ``users:update`` for its
        own profile only.

        Args:
            user_id: Target user's unique identifier
            data: Fields to change (omitted fields are kept)
            current_user_id: ID of user performing the request

        Returns:
            Updated user

        Raises:
            UnauthorizedError: If the actor may not make this change
            NotFoundError: If user doesn't exist
            ValidationError: If the new name is blank
        """
        async with self.uow:
            actor = await load_actor(self.uow, current_user_id)
            require_authenticated(actor)

            if data.status is not None or str(actor.id) != str(user_id):
                if not actor.has_permission(SystemPermission.USERS_MANAGE.value):
                    require_permission(actor, SystemPermission.USERS_UPDATE.value)
                    require_admin(actor)

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError("User", user_id)

            changed = data.model_fields_set
            if "name" in changed or "image" in changed:
                user.update_profile(
                    data.name if "name" in changed else user.name,
                    data.image if "image" in changed else user.image,
                )

            if data.status == UserStatus.ACTIVE:
                user.activate()
            elif data.status == UserStatus.INACTIVE:
                user.deactivate()
            elif data.status == UserStatus.SUSPENDED:
                user.suspend()

            user = await self.uow.users.update(user)
            await self.uow.commit()

        logger.info(f"Updated user {user_id} by user {current_user_id}")
        return UserOutput.from_entity(user)
