"""Unit tests for CreateRoleUseCase."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from admin_dashboard.application.dto.rbac_dto import CreateRoleInput
from admin_dashboard.application.use_cases.rbac import CreateRoleUseCase
from admin_dashboard.domain.exceptions import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)


def _assign_id(role):
    role.id = uuid4()
    return role


@pytest.fixture
def catalog(make_permission, stored_permissions):
    permissions = [make_permission("posts:read"), make_permission("posts:update")]
    for permission in permissions:
        stored_permissions[permission.id] = permission
    return permissions


class TestCreateRoleUseCase:
    """Test CreateRoleUseCase."""

    @pytest.mark.asyncio
    async def test_create_role_success(self, mock_uow, manager, catalog):
        """Test successful role creation with permissions."""
        mock_uow.roles.name_exists = AsyncMock(return_value=False)
        mock_uow.roles.add = AsyncMock(side_effect=_assign_id)
        data = CreateRoleInput(
            name="EDITOR",
            description="Edits posts",
            permission_ids=[p.id for p in catalog],
        )

        result = await CreateRoleUseCase(mock_uow).execute(data, manager.id)

        assert result.name == "EDITOR"
        assert result.is_system is False
        assert result.permissions == ["posts:read", "posts:update"]
        mock_uow.roles.name_exists.assert_called_once_with("EDITOR")
        mock_uow.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_duplicate_permission_ids_collapse(self, mock_uow, manager, catalog):
        """Test repeated permission ids count once."""
        mock_uow.roles.name_exists = AsyncMock(return_value=False)
        mock_uow.roles.add = AsyncMock(side_effect=_assign_id)
        data = CreateRoleInput(
            name="READER", permission_ids=[catalog[0].id, catalog[0].id]
        )

        result = await CreateRoleUseCase(mock_uow, max_permissions_per_role=1).execute(
            data, manager.id
        )

        assert result.permissions == ["posts:read"]

    @pytest.mark.asyncio
    async def test_too_many_permissions(self, mock_uow, manager, catalog):
        """Test exceeding the permission limit raises ValidationError."""
        mock_uow.roles.add = AsyncMock()
        data = CreateRoleInput(name="EDITOR", permission_ids=[p.id for p in catalog])

        with pytest.raises(ValidationError):
            await CreateRoleUseCase(mock_uow, max_permissions_per_role=1).execute(
                data, manager.id
            )

        mock_uow.roles.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_permission(self, mock_uow, manager, stored_permissions):
        """Test an unknown permission id raises NotFoundError."""
        missing = uuid4()
        data = CreateRoleInput(name="EDITOR", permission_ids=[missing])

        with pytest.raises(NotFoundError) as exc_info:
            await CreateRoleUseCase(mock_uow).execute(data, manager.id)

        assert exc_info.value.entity_name == "Permission"
        assert exc_info.value.identifier == missing

    @pytest.mark.asyncio
    async def test_name_taken(self, mock_uow, manager, stored_permissions):
        """Test an existing name raises ConflictError."""
        mock_uow.roles.name_exists = AsyncMock(return_value=True)
        mock_uow.roles.add = AsyncMock()

        with pytest.raises(ConflictError):
            await CreateRoleUseCase(mock_uow).execute(CreateRoleInput(name="EDITOR"), manager.id)

        mock_uow.roles.add.assert_not_called()
        mock_uow.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_name(self, mock_uow, manager, stored_permissions):
        """Test a malformed name raises ValidationError."""
        with pytest.raises(ValidationError):
            await CreateRoleUseCase(mock_uow).execute(
                CreateRoleInput(name="content editor"), manager.id
            )

    @pytest.mark.asyncio
    async def test_denied(self, mock_uow, member):
        """Test an actor without role management is rejected."""
        with pytest.raises(UnauthorizedError) as exc_info:
            await CreateRoleUseCase(mock_uow).execute(CreateRoleInput(name="EDITOR"), member.id)

        assert exc_info.value.message == "Permission denied: one of roles:create, roles:manage"
