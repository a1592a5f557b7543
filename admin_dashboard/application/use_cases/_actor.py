"""Helpers shared by the administrative use cases."""

from uuid import UUID

from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.domain.entities.permission import Permission
from admin_dashboard.domain.entities.role import Role
from admin_dashboard.domain.entities.user import User
from admin_dashboard.domain.exceptions import NotFoundError


async def load_actor(uow: UnitOfWorkPort, current_user_id: UUID | None) -> User | None:
    """
    Load the acting user.

    Returns None for an unknown id so that the guard reports it as an
    authentication failure.
    """
    if current_user_id is None:
        return None
    return await uow.users.get_by_id(current_user_id)


async def resolve_permissions(
    uow: UnitOfWorkPort, permission_ids: list[UUID]
) -> list[Permission]:
    """
    Load permissions by id, dropping duplicate ids.

    Raises:
        NotFoundError: If any id is unknown
    """
    permissions: list[Permission] = []
    for permission_id in dict.fromkeys(permission_ids):
        permission = await uow.permissions.get_by_id(permission_id)
        if permission is None:
            raise NotFoundError("Permission", permission_id)
        permissions.append(permission)
    return permissions


async def resolve_roles(uow: UnitOfWorkPort, role_ids: list[UUID]) -> list[Role]:
    """
    Load roles by id, dropping duplicate ids.

    Raises:
        NotFoundError: If any id is unknown
    """
    roles: list[Role] = []
    for role_id in dict.fromkeys(role_ids):
        role = await uow.roles.get_by_id(role_id)
        if role is None:
            raise NotFoundError("Role", role_id)
        roles.append(role)
    return roles
