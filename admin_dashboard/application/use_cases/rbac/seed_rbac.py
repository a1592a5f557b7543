"""Seed RBAC catalog use case."""

import logging

from admin_dashboard.application.dto.rbac_dto import SeedRbacOutput
from admin_dashboard.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from admin_dashboard.domain.entities.permission import Permission
from admin_dashboard.domain.entities.role import Role
from admin_dashboard.domain.value_objects.rbac_catalog import (
    DEFAULT_ROLE_PERMISSIONS,
    PERMISSION_DESCRIPTIONS,
    SYSTEM_ROLE_DESCRIPTIONS,
    SystemPermission,
)

logger = logging.getLogger(__name__)


class SeedRbacUseCase:
    """
    Use case for bootstrapping the built-in permissions and system roles.

    Safe to run repeatedly: existing permissions are kept, and existing
    system roles only receive the default permissions they are missing.
    Runs without an acting user; callers are deployment tooling.
    """

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def execute(self) -> SeedRbacOutput:
        """
        Insert whatever part of the catalog is missing.

        Returns:
            Counts of inserted permissions, inserted roles and completed roles
        """
        permissions_created = 0
        roles_created = 0
        roles_updated = 0

        async with self.uow:
            by_string: dict[str, Permission] = {}
            for system_permission in SystemPermission:
                permission = await self.uow.permissions.get_by_resource_and_action(
                    system_permission.resource, system_permission.action
                )
                if permission is None:
                    permission = await self.uow.permissions.add(
                        Permission.create(
                            name=system_permission.value,
                            resource=system_permission.resource,
                            action=system_permission.action,
                            description=PERMISSION_DESCRIPTIONS.get(system_permission),
                        )
                    )
                    permissions_created += 1
                by_string[system_permission.value] = permission

            for system_role, defaults in DEFAULT_ROLE_PERMISSIONS.items():
                wanted = [by_string[p.value] for p in defaults]
                role = await self.uow.roles.get_by_name(system_role.value)

                if role is None:
                    await self.uow.roles.add(
                        Role.create(
                            name=system_role.value,
                            description=SYSTEM_ROLE_DESCRIPTIONS[system_role],
                            is_system=True,
                            permissions=wanted,
                        )
                    )
                    roles_created += 1
                    continue

                # System roles reject entity mutations; complete links directly
                missing = [p for p in wanted if not role.has_permission(str(p))]
                if missing:
                    await self.uow.roles.set_permissions(
                        role.id, [p.id for p in role.permissions + missing]
                    )
                    roles_updated += 1

            await self.uow.commit()

        logger.info(
            f"Seeded RBAC catalog: {permissions_created} permissions created, "
            f"{roles_created} roles created, {roles_updated} roles updated"
        )
        return SeedRbacOutput(
            permissions_created=permissions_created,
            roles_created=roles_created,
            roles_updated=roles_updated,
        )
