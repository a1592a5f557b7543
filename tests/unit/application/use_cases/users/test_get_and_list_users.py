"""Unit tests for GetUserUseCase and ListUsersUseCase."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from admin_dashboard.application.use_cases.users import GetUserUseCase, ListUsersUseCase
from admin_dashboard.domain.exceptions import NotFoundError, UnauthorizedError


class TestGetUserUseCase:
    """Test GetUserUseCase."""

    @pytest.mark.asyncio
    async def test_member_reads_self(self, mock_uow, member):
        """Test users may read their own record without users:read."""
        result = await GetUserUseCase(mock_uow).execute(member.id, member.id)

        assert result.id == member.id
        assert result.roles == ["USER"]
        assert result.permissions == ["comments:read", "posts:read"]

    @pytest.mark.asyncio
    async def test_manager_reads_other(self, mock_uow, manager, member):
        """Test users:read grants access to other users."""
        result = await GetUserUseCase(mock_uow).execute(member.id, manager.id)

        assert result.email == member.email.value

    @pytest.mark.asyncio
    async def test_member_cannot_read_other(self, mock_uow, manager, member):
        """Test reading someone else without users:read is denied."""
        with pytest.raises(UnauthorizedError, match="Permission denied"):
            await GetUserUseCase(mock_uow).execute(manager.id, member.id)

    @pytest.mark.asyncio
    async def test_not_found(self, mock_uow, manager):
        """Test an unknown user raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await GetUserUseCase(mock_uow).execute(uuid4(), manager.id)


class TestListUsersUseCase:
    """Test ListUsersUseCase."""

    @pytest.mark.asyncio
    async def test_list_users(self, mock_uow, manager, member):
        """Test a page of users with the total count."""
        mock_uow.users.list_all = AsyncMock(return_value=[member, manager])
        mock_uow.users.count = AsyncMock(return_value=12)

        result = await ListUsersUseCase(mock_uow).execute(manager.id, skip=10, limit=2)

        assert [user.id for user in result.users] == [member.id, manager.id]
        assert result.total == 12
        assert result.skip == 10
        assert result.limit == 2
        mock_uow.users.list_all.assert_called_once_with(skip=10, limit=2)

    @pytest.mark.asyncio
    async def test_member_cannot_list(self, mock_uow, member):
        """Test listing users requires a users permission."""
        mock_uow.users.list_all = AsyncMock()

        with pytest.raises(UnauthorizedError):
            await ListUsersUseCase(mock_uow).execute(member.id)

        mock_uow.users.list_all.assert_not_called()
