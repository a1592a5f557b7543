"""
In-memory record store.

Holds plain dict records for permissions, roles and users, plus ordered
link tables. Entities never live in the store; repositories build fresh
copies from records on every load.
"""

import asyncio
import copy
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID


@dataclass
class StoreState:
    """Snapshot-able tables of the store."""

    permissions: dict[UUID, dict[str, Any]] = field(default_factory=dict)
    roles: dict[UUID, dict[str, Any]] = field(default_factory=dict)
    users: dict[UUID, dict[str, Any]] = field(default_factory=dict)
    # role id -> permission ids, in grant order
    role_permissions: dict[UUID, list[UUID]] = field(default_factory=dict)
    # user id -> role ids, in assignment order
    user_roles: dict[UUID, list[UUID]] = field(default_factory=dict)


class InMemoryStore:
    """
    Process-local storage shared by in-memory units of work.

    ``lock`` serializes units of work, so a unit of work sees no writes from
    others while it runs.
    """

    def __init__(self) -> None:
        self.state = StoreState()
        self.lock = asyncio.Lock()

    def snapshot(self) -> StoreState:
        """Deep copy of the current tables."""
        return copy.deepcopy(self.state)

    def restore(self, snapshot: StoreState) -> None:
        """Replace the current tables with a snapshot."""
        self.state = copy.deepcopy(snapshot)

    def clear(self) -> None:
        """Drop all data."""
        self.state = StoreState()
