"""
In-memory repository implementations.

Each load hydrates new entity objects from the store's records, so callers
never share mutable state with the store or with each other.
"""

from typing import Optional
from uuid import UUID, uuid4

from admin_dashboard.domain.entities.permission import Permission
from admin_dashboard.domain.entities.role import Role
from admin_dashboard.domain.entities.user import User
from admin_dashboard.domain.exceptions import ConflictError, NotFoundError
from admin_dashboard.infrastructure.adapters.outbound.persistence.memory.store import (
    InMemoryStore,
)


class InMemoryPermissionRepository:
    """Permission repository backed by an InMemoryStore."""

    def __init__(self, store: InMemoryStore):
        self.store = store

    def _hydrate(self, permission_id: UUID) -> Permission:
        return Permission.from_persistence(
            dict(self.store.state.permissions[permission_id])
        )

    async def add(self, permission: Permission) -> Permission:
        if await self.exists(permission.resource, permission.action):
            raise ConflictError(
                f"Permission '{permission.get_permission_string()}' already exists"
            )

        permission.id = permission.id or uuid4()
        self.store.state.permissions[permission.id] = permission.to_persistence()
        return self._hydrate(permission.id)

    async def get_by_id(self, permission_id: UUID) -> Optional[Permission]:
        if permission_id not in self.store.state.permissions:
            return None
        return self._hydrate(permission_id)

    async def get_by_resource_and_action(
        self, resource: str, action: str
    ) -> Optional[Permission]:
        for permission_id, record in self.store.state.permissions.items():
            if record["resource"] == resource and record["action"] == action:
                return self._hydrate(permission_id)
        return None

    async def list_all(self, skip: int = 0, limit: int = 100) -> list[Permission]:
        records = sorted(
            self.store.state.permissions.values(),
            key=lambda r: (r["resource"], r["action"]),
        )
        return [self._hydrate(r["id"]) for r in records[skip : skip + limit]]

    async def list_by_role_id(self, role_id: UUID) -> list[Permission]:
        return [
            self._hydrate(permission_id)
            for permission_id in self.store.state.role_permissions.get(role_id, [])
        ]

    async def exists(
        self, resource: str, action: str, exclude_id: Optional[UUID] = None
    ) -> bool:
        return any(
            record["resource"] == resource
            and record["action"] == action
            and permission_id != exclude_id
            for permission_id, record in self.store.state.permissions.items()
        )

    async def update(self, permission: Permission) -> Permission:
        if permission.id not in self.store.state.permissions:
            raise NotFoundError("Permission", permission.id)

        self.store.state.permissions[permission.id] = permission.to_persistence()
        return self._hydrate(permission.id)

    async def delete(self, permission_id: UUID) -> None:
        if permission_id not in self.store.state.permissions:
            raise NotFoundError("Permission", permission_id)

        del self.store.state.permissions[permission_id]
        for linked in self.store.state.role_permissions.values():
            if permission_id in linked:
                linked.remove(permission_id)

    async def count(self) -> int:
        return len(self.store.state.permissions)


class InMemoryRoleRepository:
    """Role repository backed by an InMemoryStore."""

    def __init__(self, store: InMemoryStore):
        self.store = store
        self._permissions = InMemoryPermissionRepository(store)

    def _hydrate(self, role_id: UUID) -> Role:
        permission_ids = self.store.state.role_permissions.get(role_id, [])
        return Role.from_persistence(
            dict(self.store.state.roles[role_id]),
            [self._permissions._hydrate(pid) for pid in permission_ids],
        )

    def _check_permissions(self, permission_ids: list[UUID]) -> list[UUID]:
        for permission_id in permission_ids:
            if permission_id not in self.store.state.permissions:
                raise NotFoundError("Permission", permission_id)
        return list(dict.fromkeys(permission_ids))

    async def add(self, role: Role) -> Role:
        if await self.name_exists(role.name):
            raise ConflictError(f"Role '{role.name}' already exists")

        permission_ids = self._check_permissions([p.id for p in role.permissions])

        role.id = role.id or uuid4()
        self.store.state.roles[role.id] = role.to_persistence()
        self.store.state.role_permissions[role.id] = permission_ids
        return self._hydrate(role.id)

    async def get_by_id(self, role_id: UUID) -> Optional[Role]:
        if role_id not in self.store.state.roles:
            return None
        return self._hydrate(role_id)

    async def get_by_name(self, name: str) -> Optional[Role]:
        for role_id, record in self.store.state.roles.items():
            if record["name"] == name:
                return self._hydrate(role_id)
        return None

    async def list_all(self, skip: int = 0, limit: int = 100) -> list[Role]:
        records = sorted(self.store.state.roles.values(), key=lambda r: r["name"])
        return [self._hydrate(r["id"]) for r in records[skip : skip + limit]]

    async def list_by_user_id(self, user_id: UUID) -> list[Role]:
        return [
            self._hydrate(role_id)
            for role_id in self.store.state.user_roles.get(user_id, [])
        ]

    async def name_exists(self, name: str, exclude_id: Optional[UUID] = None) -> bool:
        return any(
            record["name"] == name and role_id != exclude_id
            for role_id, record in self.store.state.roles.items()
        )

    async def update(self, role: Role) -> Role:
        if role.id not in self.store.state.roles:
            raise NotFoundError("Role", role.id)

        if await self.name_exists(role.name, exclude_id=role.id):
            raise ConflictError(f"Role '{role.name}' already exists")

        self.store.state.roles[role.id] = role.to_persistence()
        return self._hydrate(role.id)

    async def delete(self, role_id: UUID) -> None:
        if role_id not in self.store.state.roles:
            raise NotFoundError("Role", role_id)

        del self.store.state.roles[role_id]
        self.store.state.role_permissions.pop(role_id, None)
        for linked in self.store.state.user_roles.values():
            if role_id in linked:
                linked.remove(role_id)

    async def set_permissions(
        self, role_id: UUID, permission_ids: list[UUID]
    ) -> None:
        if role_id not in self.store.state.roles:
            raise NotFoundError("Role", role_id)

        self.store.state.role_permissions[role_id] = self._check_permissions(
            permission_ids
        )

    async def is_assigned(self, role_id: UUID) -> bool:
        return any(role_id in linked for linked in self.store.state.user_roles.values())

    async def count(self) -> int:
        return len(self.store.state.roles)


class InMemoryUserRepository:
    """User repository backed by an InMemoryStore."""

    def __init__(self, store: InMemoryStore):
        self.store = store
        self._roles = InMemoryRoleRepository(store)

    def _hydrate(self, user_id: UUID) -> User:
        role_ids = self.store.state.user_roles.get(user_id, [])
        return User.from_persistence(
            dict(self.store.state.users[user_id]),
            [self._roles._hydrate(rid) for rid in role_ids],
        )

    def _check_roles(self, role_ids: list[UUID]) -> list[UUID]:
        for role_id in role_ids:
            if role_id not in self.store.state.roles:
                raise NotFoundError("Role", role_id)
        return list(dict.fromkeys(role_ids))

    async def add(self, user: User) -> User:
        if await self.email_exists(user.email.value):
            raise ConflictError(f"User with email '{user.email}' already exists")

        role_ids = self._check_roles([r.id for r in user.roles])

        user.id = user.id or uuid4()
        self.store.state.users[user.id] = user.to_persistence()
        self.store.state.user_roles[user.id] = role_ids
        return self._hydrate(user.id)

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        if user_id not in self.store.state.users:
            return None
        return self._hydrate(user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        email = email.strip().lower()
        for user_id, record in self.store.state.users.items():
            if record["email"] == email:
                return self._hydrate(user_id)
        return None

    async def list_all(self, skip: int = 0, limit: int = 100) -> list[User]:
        records = sorted(
            self.store.state.users.values(),
            key=lambda r: r["created_at"],
            reverse=True,
        )
        return [self._hydrate(r["id"]) for r in records[skip : skip + limit]]

    async def update(self, user: User) -> User:
        if user.id not in self.store.state.users:
            raise NotFoundError("User", user.id)

        if await self.email_exists(user.email.value, exclude_id=user.id):
            raise ConflictError(f"User with email '{user.email}' already exists")

        self.store.state.users[user.id] = user.to_persistence()
        return self._hydrate(user.id)

    async def delete(self, user_id: UUID) -> None:
        if user_id not in self.store.state.users:
            raise NotFoundError("User", user_id)

        del self.store.state.users[user_id]
        self.store.state.user_roles.pop(user_id, None)

    async def email_exists(
        self, email: str, exclude_id: Optional[UUID] = None
    ) -> bool:
        email = email.strip().lower()
        return any(
            record["email"] == email and user_id != exclude_id
            for user_id, record in self.store.state.users.items()
        )

    async def set_roles(self, user_id: UUID, role_ids: list[UUID]) -> None:
        if user_id not in self.store.state.users:
            raise NotFoundError("User", user_id)

        self.store.state.user_roles[user_id] = self._check_roles(role_ids)

    async def count(self) -> int:
        return len(self.store.state.users)
