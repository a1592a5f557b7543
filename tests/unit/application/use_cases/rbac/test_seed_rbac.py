"""Unit tests for SeedRbacUseCase."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from admin_dashboard.application.use_cases.rbac import SeedRbacUseCase
from admin_dashboard.domain.value_objects.rbac_catalog import (
    DEFAULT_ROLE_PERMISSIONS,
    SystemPermission,
    SystemRole,
)


def _assign_id(entity):
    entity.id = uuid4()
    return entity


class TestSeedRbacUseCase:
    """Test SeedRbacUseCase."""

    @pytest.mark.asyncio
    async def test_seed_empty_store(self, mock_uow):
        """Test every permission and system role is created."""
        mock_uow.permissions.get_by_resource_and_action = AsyncMock(return_value=None)
        mock_uow.permissions.add = AsyncMock(side_effect=_assign_id)
        mock_uow.roles.get_by_name = AsyncMock(return_value=None)
        mock_uow.roles.add = AsyncMock(side_effect=_assign_id)

        result = await SeedRbacUseCase(mock_uow).execute()

        assert result.permissions_created == len(SystemPermission)
        assert result.roles_created == len(SystemRole)
        assert result.roles_updated == 0

        created_roles = {
            call.args[0].name: call.args[0] for call in mock_uow.roles.add.call_args_list
        }
        admin = created_roles["ADMIN"]
        assert admin.is_system is True
        assert admin.get_permission_strings() == [
            p.value for p in DEFAULT_ROLE_PERMISSIONS[SystemRole.ADMIN]
        ]
        mock_uow.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_seed_completes_existing_system_role(self, mock_uow, make_permission, make_role):
        """Test an existing system role only receives its missing defaults."""
        existing = {p.value: make_permission(p.value) for p in SystemPermission}
        mock_uow.permissions.get_by_resource_and_action = AsyncMock(
            side_effect=lambda resource, action: existing[f"{resource}:{action}"]
        )
        mock_uow.permissions.add = AsyncMock()

        user_role = make_role("USER", ["users:read", "posts:read"], is_system=True)
        full_roles = {
            role: make_role(
                role.value, [p.value for p in DEFAULT_ROLE_PERMISSIONS[role]], is_system=True
            )
            for role in (SystemRole.SUPER_ADMIN, SystemRole.ADMIN)
        }
        by_name = {r.name: r for r in full_roles.values()}
        by_name["USER"] = user_role
        mock_uow.roles.get_by_name = AsyncMock(side_effect=lambda name: by_name[name])
        mock_uow.roles.add = AsyncMock()
        mock_uow.roles.set_permissions = AsyncMock()

        result = await SeedRbacUseCase(mock_uow).execute()

        assert result.permissions_created == 0
        assert result.roles_created == 0
        assert result.roles_updated == 1
        mock_uow.permissions.add.assert_not_called()
        mock_uow.roles.add.assert_not_called()

        role_id, permission_ids = mock_uow.roles.set_permissions.call_args.args
        assert role_id == user_role.id
        strings_by_id = {
            p.id: p.get_permission_string()
            for p in list(existing.values()) + user_role.permissions
        }
        granted = [strings_by_id[permission_id] for permission_id in permission_ids]
        assert sorted(granted) == sorted(
            p.value for p in DEFAULT_ROLE_PERMISSIONS[SystemRole.USER]
        )
        # Existing grants keep their ids and come first
        assert permission_ids[:2] == [p.id for p in user_role.permissions]
