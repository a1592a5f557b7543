"""Unit tests for User entity."""

from uuid import uuid4

import pytest

from admin_dashboard.domain.entities.user import User
from admin_dashboard.domain.exceptions import InvalidOperationError, ValidationError
from admin_dashboard.domain.value_objects.email import Email
from admin_dashboard.domain.value_objects.user_status import UserStatus


class TestUserCreation:
    """Test User entity creation."""

    def test_create_user_defaults(self):
        """Test a new user is active, unverified and holds no roles."""
        user = User.create(email=Email("Jane@Example.com"))
        assert user.id is None
        assert user.email.value == "jane@example.com"
        assert user.status == UserStatus.ACTIVE
        assert user.roles == []
        assert user.is_email_verified() is False

    def test_blank_name_raises_error(self):
        """Test a blank name is rejected."""
        with pytest.raises(ValidationError):
            User.create(email=Email("a@example.com"), name="  ")

    def test_duplicate_roles_collapse(self, make_role):
        """Test roles sharing a name are stored once."""
        user = User.create(
            email=Email("a@example.com"),
            roles=[make_role("EDITOR"), make_role("EDITOR")],
        )
        assert user.get_role_names() == ["EDITOR"]


class TestUserPermissions:
    """Test permission resolution across roles."""

    def test_permissions_are_union_of_roles(self, make_role, make_user):
        """Test a user gains a permission granted by any one role."""
        user = make_user(
            roles=[
                make_role("EDITOR", ["posts:read", "posts:update"]),
                make_role("MODERATOR", ["comments:delete"]),
            ]
        )
        assert user.has_permission("posts:update") is True
        assert user.has_permission("comments:delete") is True
        assert user.has_permission("users:delete") is False
        assert user.has_all_permissions(["posts:read", "comments:delete"]) is True

    def test_no_roles_has_no_permissions(self, make_user):
        """Test a user without roles holds nothing."""
        user = make_user()
        assert user.has_permission("posts:read") is False
        assert user.has_any_permission(["posts:read"]) is False
        assert user.get_all_permissions() == []

    def test_empty_lists(self, make_user):
        """Test any-of an empty list is false and all-of is vacuously true."""
        user = make_user()
        assert user.has_any_permission([]) is False
        assert user.has_all_permissions([]) is True
        assert user.has_any_role([]) is False
        assert user.has_all_roles([]) is True

    def test_get_all_permissions_deduplicated(self, make_role, make_user):
        """Test a permission granted by two roles appears once."""
        user = make_user(
            roles=[
                make_role("EDITOR", ["posts:read", "posts:update"]),
                make_role("READER", ["posts:read"]),
            ]
        )
        assert user.get_all_permissions() == ["posts:read", "posts:update"]

    def test_permission_queries_ignore_status(self, make_role, make_user):
        """Test entity queries do not look at status (guards do)."""
        user = make_user(
            roles=[make_role("EDITOR", ["posts:read"])],
            status=UserStatus.SUSPENDED,
        )
        assert user.has_permission("posts:read") is True


class TestUserRoles:
    """Test role assignment."""

    def test_assign_role(self, make_role, make_user):
        """Test assigning a role."""
        user = make_user()
        user.assign_role(make_role("EDITOR"))
        assert user.has_role("EDITOR") is True

    def test_assign_held_role_is_noop(self, make_role, make_user):
        """Test assigning an already held role leaves updated_at unchanged."""
        user = make_user(roles=[make_role("EDITOR")])
        before = user.updated_at

        user.assign_role(make_role("EDITOR"))

        assert user.get_role_names() == ["EDITOR"]
        assert user.updated_at == before

    def test_assign_roles_skips_held(self, make_role, make_user):
        """Test assign_roles appends new roles in order and skips held ones."""
        user = make_user(roles=[make_role("EDITOR")])
        user.assign_roles([make_role("AUTHOR"), make_role("EDITOR"), make_role("VIEWER")])
        assert user.get_role_names() == ["EDITOR", "AUTHOR", "VIEWER"]

    def test_remove_role(self, make_role, make_user):
        """Test removing a role by id."""
        editor = make_role("EDITOR")
        user = make_user(roles=[editor, make_role("AUTHOR")])
        user.remove_role(editor.id)
        assert user.get_role_names() == ["AUTHOR"]

    def test_remove_unknown_role_touches(self, make_role, make_user):
        """Test removing an absent id still refreshes updated_at."""
        user = make_user(roles=[make_role("EDITOR")])
        before = user.updated_at
        user.remove_role(uuid4())
        assert user.get_role_names() == ["EDITOR"]
        assert user.updated_at >= before

    def test_set_roles_replaces(self, make_role, make_user):
        """Test set_roles replaces every role."""
        user = make_user(roles=[make_role("EDITOR")])
        user.set_roles([make_role("AUTHOR"), make_role("AUTHOR")])
        assert user.get_role_names() == ["AUTHOR"]

    def test_roles_accessor_returns_copy(self, make_role, make_user):
        """Test mutating the returned list does not affect the user."""
        user = make_user()
        user.roles.append(make_role("EDITOR"))
        assert user.roles == []

    def test_admin_checks_by_role_name(self, make_role, make_user):
        """Test admin status comes from role names, not permissions."""
        admin = make_user(roles=[make_role("ADMIN")])
        super_admin = make_user(roles=[make_role("SUPER_ADMIN")])
        manager = make_user(roles=[make_role("MANAGER", ["users:manage"])])

        assert admin.is_admin() is True
        assert admin.is_super_admin() is False
        assert super_admin.is_admin() is True
        assert super_admin.is_super_admin() is True
        assert manager.is_admin() is False


class TestUserLifecycle:
    """Test status and profile changes."""

    def test_status_transitions(self, make_user):
        """Test activate, deactivate and suspend."""
        user = make_user()
        user.suspend()
        assert user.is_suspended() is True
        assert user.is_active() is False
        user.deactivate()
        assert user.status == UserStatus.INACTIVE
        user.activate()
        assert user.is_active() is True

    def test_same_status_is_noop(self, make_user):
        """Test setting the current status does not touch."""
        user = make_user()
        before = user.updated_at
        user.activate()
        assert user.updated_at == before

    def test_verify_email_once(self, make_user):
        """Test email can only be verified once."""
        user = make_user()
        user.verify_email()
        assert user.is_email_verified() is True
        with pytest.raises(InvalidOperationError):
            user.verify_email()

    def test_can_perform_admin_actions(self, make_role, make_user):
        """Test admin actions require an active admin."""
        user = make_user(roles=[make_role("ADMIN")])
        assert user.can_perform_admin_actions() is True
        user.suspend()
        assert user.can_perform_admin_actions() is False

    def test_update_profile(self, make_user):
        """Test profile update and blank name rejection."""
        user = make_user()
        user.update_profile("New Name", "https://example.com/a.png")
        assert user.name == "New Name"
        assert user.image == "https://example.com/a.png"
        with pytest.raises(ValidationError):
            user.update_profile("", None)


class TestUserIdentity:
    """Test equality and persistence."""

    def test_equal_by_id(self, make_user):
        """Test users with the same id are equal."""
        first = make_user(email="a@example.com")
        second = make_user(email="b@example.com")
        second.id = first.id
        assert first == second

    def test_unsaved_users_compare_by_identity(self):
        """Test users without id equal only themselves."""
        first = User.create(email=Email("a@example.com"))
        second = User.create(email=Email("a@example.com"))
        assert first == first
        assert first != second

    def test_round_trip(self, make_role, make_user):
        """Test persistence round trip keeps scalar fields and uses given roles."""
        role = make_role("EDITOR", ["posts:read"])
        user = make_user(roles=[role], status=UserStatus.SUSPENDED)

        data = user.to_persistence()
        restored = User.from_persistence(data, [role])

        assert "roles" not in data
        assert data["status"] == "SUSPENDED"
        assert restored == user
        assert restored.email == user.email
        assert restored.status == UserStatus.SUSPENDED
        assert restored.has_permission("posts:read") is True
