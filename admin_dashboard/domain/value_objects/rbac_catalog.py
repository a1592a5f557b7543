"""
Built-in RBAC catalog.

Defines the system role names, the resources and actions the dashboard
knows about, and the predefined permission strings granted to each
system role when the catalog is seeded.
"""

from enum import Enum


class SystemRole(str, Enum):
    """Role names treated as a stable contract by seeding and admin tooling."""

    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    USER = "USER"

    def __str__(self) -> str:
        return self.value


class Resource(str, Enum):
    """Resources that permissions can be granted on."""

    USERS = "users"
    ROLES = "roles"
    PERMISSIONS = "permissions"
    POSTS = "posts"
    COMMENTS = "comments"
    SETTINGS = "settings"
    ANALYTICS = "analytics"
    REPORTS = "reports"


class Action(str, Enum):
    """Actions that can be performed on a resource."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    MANAGE = "manage"  # Full control
    LIST = "list"
    VIEW = "view"
    EXPORT = "export"
    IMPORT = "import"


class SystemPermission(str, Enum):
    """
    Predefined permission strings.

    Every value follows the ``resource:action`` convention and round-trips
    through ``Permission.get_permission_string()``.
    """

    # User management
    USERS_CREATE = "users:create"
    USERS_READ = "users:read"
    USERS_UPDATE = "users:update"
    USERS_DELETE = "users:delete"
    USERS_MANAGE = "users:manage"
    USERS_LIST = "users:list"
    USERS_EXPORT = "users:export"

    # Role management
    ROLES_CREATE = "roles:create"
    ROLES_READ = "roles:read"
    ROLES_UPDATE = "roles:update"
    ROLES_DELETE = "roles:delete"
    ROLES_MANAGE = "roles:manage"
    ROLES_LIST = "roles:list"

    # Permission management
    PERMISSIONS_CREATE = "permissions:create"
    PERMISSIONS_READ = "permissions:read"
    PERMISSIONS_UPDATE = "permissions:update"
    PERMISSIONS_DELETE = "permissions:delete"
    PERMISSIONS_MANAGE = "permissions:manage"
    PERMISSIONS_LIST = "permissions:list"

    # Content management
    POSTS_CREATE = "posts:create"
    POSTS_READ = "posts:read"
    POSTS_UPDATE = "posts:update"
    POSTS_DELETE = "posts:delete"
    POSTS_MANAGE = "posts:manage"
    POSTS_LIST = "posts:list"

    # Comments
    COMMENTS_CREATE = "comments:create"
    COMMENTS_READ = "comments:read"
    COMMENTS_UPDATE = "comments:update"
    COMMENTS_DELETE = "comments:delete"
    COMMENTS_MANAGE = "comments:manage"

    # Settings
    SETTINGS_READ = "settings:read"
    SETTINGS_UPDATE = "settings:update"
    SETTINGS_MANAGE = "settings:manage"

    # Analytics
    ANALYTICS_VIEW = "analytics:view"
    ANALYTICS_EXPORT = "analytics:export"

    # Reports
    REPORTS_CREATE = "reports:create"
    REPORTS_VIEW = "reports:view"
    REPORTS_EXPORT = "reports:export"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"SystemPermission.{self.name}"

    @property
    def resource(self) -> str:
        """Extract resource name from permission (e.g., 'users' from 'users:read')."""
        return self.value.split(":")[0]

    @property
    def action(self) -> str:
        """Extract action from permission (e.g., 'read' from 'users:read')."""
        return self.value.split(":")[1]

    @classmethod
    def for_resource(cls, resource: Resource | str) -> list["SystemPermission"]:
        """Get the predefined permissions for one resource."""
        return [p for p in cls if p.resource == Resource(resource).value]


DEFAULT_ROLE_PERMISSIONS: dict[SystemRole, tuple[SystemPermission, ...]] = {
    SystemRole.SUPER_ADMIN: (
        SystemPermission.USERS_MANAGE,
        SystemPermission.ROLES_MANAGE,
        SystemPermission.PERMISSIONS_MANAGE,
        SystemPermission.POSTS_MANAGE,
        SystemPermission.COMMENTS_MANAGE,
        SystemPermission.SETTINGS_MANAGE,
        SystemPermission.ANALYTICS_VIEW,
        SystemPermission.ANALYTICS_EXPORT,
        SystemPermission.REPORTS_CREATE,
        SystemPermission.REPORTS_VIEW,
        SystemPermission.REPORTS_EXPORT,
    ),
    SystemRole.ADMIN: (
        SystemPermission.USERS_CREATE,
        SystemPermission.USERS_READ,
        SystemPermission.USERS_UPDATE,
        SystemPermission.USERS_LIST,
        SystemPermission.USERS_EXPORT,
        SystemPermission.ROLES_READ,
        SystemPermission.ROLES_LIST,
        SystemPermission.POSTS_MANAGE,
        SystemPermission.COMMENTS_MANAGE,
        SystemPermission.ANALYTICS_VIEW,
        SystemPermission.REPORTS_VIEW,
    ),
    SystemRole.USER: (
        SystemPermission.USERS_READ,
        SystemPermission.USERS_UPDATE,  # Own profile only
        SystemPermission.POSTS_CREATE,
        SystemPermission.POSTS_READ,
        SystemPermission.COMMENTS_CREATE,
        SystemPermission.COMMENTS_READ,
    ),
}

SYSTEM_ROLE_DESCRIPTIONS: dict[SystemRole, str] = {
    SystemRole.SUPER_ADMIN: "Full access to every resource",
    SystemRole.ADMIN: "User and content administration",
    SystemRole.USER: "Standard user",
}

PERMISSION_DESCRIPTIONS: dict[SystemPermission, str] = {
    # Users
    SystemPermission.USERS_CREATE: "Create new users",
    SystemPermission.USERS_READ: "View user details",
    SystemPermission.USERS_UPDATE: "Update user information",
    SystemPermission.USERS_DELETE: "Delete users",
    SystemPermission.USERS_MANAGE: "Full control over user management",
    SystemPermission.USERS_LIST: "View list of users",
    SystemPermission.USERS_EXPORT: "Export user data",
    # Roles
    SystemPermission.ROLES_CREATE: "Create new roles",
    SystemPermission.ROLES_READ: "View role details",
    SystemPermission.ROLES_UPDATE: "Update role information",
    SystemPermission.ROLES_DELETE: "Delete roles",
    SystemPermission.ROLES_MANAGE: "Full control over role management",
    SystemPermission.ROLES_LIST: "View list of roles",
    # Permissions
    SystemPermission.PERMISSIONS_CREATE: "Create new permissions",
    SystemPermission.PERMISSIONS_READ: "View permission details",
    SystemPermission.PERMISSIONS_UPDATE: "Update permission information",
    SystemPermission.PERMISSIONS_DELETE: "Delete permissions",
    SystemPermission.PERMISSIONS_MANAGE: "Full control over permission management",
    SystemPermission.PERMISSIONS_LIST: "View list of permissions",
    # Posts
    SystemPermission.POSTS_CREATE: "Create new posts",
    SystemPermission.POSTS_READ: "View posts",
    SystemPermission.POSTS_UPDATE: "Update posts",
    SystemPermission.POSTS_DELETE: "Delete posts",
    SystemPermission.POSTS_MANAGE: "Full control over post management",
    SystemPermission.POSTS_LIST: "View list of posts",
    # Comments
    SystemPermission.COMMENTS_CREATE: "Create comments",
    SystemPermission.COMMENTS_READ: "View comments",
    SystemPermission.COMMENTS_UPDATE: "Update comments",
    SystemPermission.COMMENTS_DELETE: "Delete comments",
    SystemPermission.COMMENTS_MANAGE: "Full control over comment management",
    # Settings
    SystemPermission.SETTINGS_READ: "View settings",
    SystemPermission.SETTINGS_UPDATE: "Update settings",
    SystemPermission.SETTINGS_MANAGE: "Full control over settings",
    # Analytics
    SystemPermission.ANALYTICS_VIEW: "View analytics dashboard",
    SystemPermission.ANALYTICS_EXPORT: "Export analytics data",
    # Reports
    SystemPermission.REPORTS_CREATE: "Create reports",
    SystemPermission.REPORTS_VIEW: "View reports",
    SystemPermission.REPORTS_EXPORT: "Export reports",
}

# Assignment limits (overridable through settings)
MAX_ROLES_PER_USER = 10
MAX_PERMISSIONS_PER_ROLE = 100
DEFAULT_USER_ROLE = SystemRole.USER
