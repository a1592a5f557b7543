"""Unit tests for UpdateRoleUseCase."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from admin_dashboard.application.dto.rbac_dto import UpdateRoleInput
from admin_dashboard.application.use_cases.rbac import UpdateRoleUseCase
from admin_dashboard.domain.exceptions import (
    ConflictError,
    InvalidOperationError,
    NotFoundError,
)


@pytest.fixture
def editor_role(make_role, stored_roles):
    role = make_role("EDITOR", ["posts:update"])
    role.update_details("EDITOR", "Edits posts")
    stored_roles[role.id] = role
    return role


class TestUpdateRoleUseCase:
    """Test UpdateRoleUseCase."""

    @pytest.mark.asyncio
    async def test_rename(self, mock_uow, manager, editor_role):
        """Test renaming keeps the description when it is omitted."""
        mock_uow.roles.name_exists = AsyncMock(return_value=False)
        mock_uow.roles.update = AsyncMock(side_effect=lambda role: role)

        result = await UpdateRoleUseCase(mock_uow).execute(
            editor_role.id, UpdateRoleInput(name="CONTENT_EDITOR"), manager.id
        )

        assert result.name == "CONTENT_EDITOR"
        assert result.description == "Edits posts"
        mock_uow.roles.name_exists.assert_called_once_with(
            "CONTENT_EDITOR", exclude_id=editor_role.id
        )
        mock_uow.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_clear_description(self, mock_uow, manager, editor_role):
        """Test an explicit null description clears it."""
        mock_uow.roles.name_exists = AsyncMock(return_value=False)
        mock_uow.roles.update = AsyncMock(side_effect=lambda role: role)

        result = await UpdateRoleUseCase(mock_uow).execute(
            editor_role.id, UpdateRoleInput(description=None), manager.id
        )

        assert result.name == "EDITOR"
        assert result.description is None

    @pytest.mark.asyncio
    async def test_name_taken(self, mock_uow, manager, editor_role):
        """Test renaming onto another role's name raises ConflictError."""
        mock_uow.roles.name_exists = AsyncMock(return_value=True)
        mock_uow.roles.update = AsyncMock()

        with pytest.raises(ConflictError):
            await UpdateRoleUseCase(mock_uow).execute(
                editor_role.id, UpdateRoleInput(name="ADMIN"), manager.id
            )

        mock_uow.roles.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_system_role(self, mock_uow, manager, make_role, stored_roles):
        """Test system roles cannot be updated."""
        role = make_role("ADMIN", is_system=True)
        stored_roles[role.id] = role

        with pytest.raises(InvalidOperationError):
            await UpdateRoleUseCase(mock_uow).execute(
                role.id, UpdateRoleInput(description="x"), manager.id
            )

    @pytest.mark.asyncio
    async def test_not_found(self, mock_uow, manager, stored_roles):
        """Test an unknown role raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await UpdateRoleUseCase(mock_uow).execute(
                uuid4(), UpdateRoleInput(name="X"), manager.id
            )
