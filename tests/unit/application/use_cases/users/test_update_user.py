"""Unit tests for UpdateUserUseCase."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from admin_dashboard.application.dto.user_dto import UpdateUserInput
from admin_dashboard.application.use_cases.users import UpdateUserUseCase
from admin_dashboard.domain.exceptions import (
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from admin_dashboard.domain.value_objects.user_status import UserStatus


@pytest.fixture
def user_repo(mock_uow):
    mock_uow.users.update = AsyncMock(side_effect=lambda user: user)
    return mock_uow.users


class TestUpdateUserUseCase:
    """Test UpdateUserUseCase."""

    @pytest.mark.asyncio
    async def test_member_updates_own_profile(self, mock_uow, member, user_repo):
        """Test users may change their own name and avatar."""
        result = await UpdateUserUseCase(mock_uow).execute(
            member.id,
            UpdateUserInput(name="Renamed", image="https://example.com/a.png"),
            member.id,
        )

        assert result.name == "Renamed"
        assert result.image == "https://example.com/a.png"
        user_repo.update.assert_called_once()
        mock_uow.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_omitted_fields_are_kept(self, mock_uow, member, user_repo):
        """Test only the fields sent are changed; explicit None clears."""
        member.update_profile("Member", "https://example.com/a.png")

        result = await UpdateUserUseCase(mock_uow).execute(
            member.id, UpdateUserInput(image=None), member.id
        )

        assert result.name == "Member"
        assert result.image is None

    @pytest.mark.asyncio
    async def test_manager_suspends_user(self, mock_uow, manager, member, user_repo):
        """Test a users:manage holder can change another user's status."""
        result = await UpdateUserUseCase(mock_uow).execute(
            member.id, UpdateUserInput(status=UserStatus.SUSPENDED), manager.id
        )

        assert result.status == "SUSPENDED"
        assert member.is_suspended() is True

    @pytest.mark.asyncio
    async def test_member_cannot_change_own_status(self, mock_uow, member, user_repo):
        """Test status changes need a users permission even on one's own account."""
        with pytest.raises(UnauthorizedError):
            await UpdateUserUseCase(mock_uow).execute(
                member.id, UpdateUserInput(status=UserStatus.INACTIVE), member.id
            )

        user_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_member_cannot_update_other(self, mock_uow, manager, member, user_repo):
        """Test editing another user's profile is denied without permission."""
        with pytest.raises(UnauthorizedError):
            await UpdateUserUseCase(mock_uow).execute(
                manager.id, UpdateUserInput(name="Hijacked"), member.id
            )

        user_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_permission_alone_is_own_profile_only(
        self, mock_uow, make_role, make_user, stored_users, member, user_repo
    ):
        """Test users:update without an admin role cannot reach other accounts."""
        editor = make_user(roles=[make_role("USER", ["users:read", "users:update"])])
        stored_users[editor.id] = editor

        with pytest.raises(UnauthorizedError, match="Admin access required"):
            await UpdateUserUseCase(mock_uow).execute(
                member.id, UpdateUserInput(status=UserStatus.SUSPENDED), editor.id
            )

        assert member.is_active() is True
        user_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_admin_with_update_permission_edits_other(
        self, mock_uow, make_role, make_user, stored_users, member, user_repo
    ):
        """Test an administrator holding users:update can edit other users."""
        admin = make_user(roles=[make_role("ADMIN", ["users:update"], is_system=True)])
        stored_users[admin.id] = admin

        result = await UpdateUserUseCase(mock_uow).execute(
            member.id, UpdateUserInput(name="Edited"), admin.id
        )

        assert result.name == "Edited"

    @pytest.mark.asyncio
    async def test_suspended_actor_is_denied(self, mock_uow, member, user_repo):
        """Test an inactive actor cannot update even their own profile."""
        member.suspend()

        with pytest.raises(UnauthorizedError, match="Account is not active"):
            await UpdateUserUseCase(mock_uow).execute(
                member.id, UpdateUserInput(name="Renamed"), member.id
            )

    @pytest.mark.asyncio
    async def test_blank_name(self, mock_uow, member, user_repo):
        """Test a blank name raises ValidationError."""
        with pytest.raises(ValidationError):
            await UpdateUserUseCase(mock_uow).execute(
                member.id, UpdateUserInput(name="   "), member.id
            )

        user_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_not_found(self, mock_uow, manager, user_repo):
        """Test an unknown user raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await UpdateUserUseCase(mock_uow).execute(
                uuid4(), UpdateUserInput(name="X"), manager.id
            )
