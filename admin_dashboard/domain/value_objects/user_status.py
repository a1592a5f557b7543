"""User account status value object."""

from enum import Enum


class UserStatus(str, Enum):
    """
    Lifecycle status of a user account.

    Only ACTIVE users pass authorization checks.
    """

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"

    def __str__(self) -> str:
        return self.value
