"""Authorization domain exceptions."""

from admin_dashboard.domain.exceptions.base import DomainException


class UnauthorizedError(DomainException):
    """
    Raised when a user is not allowed to perform an action.

    The message carries the reason: not authenticated, not active,
    the missing permission or role, or a custom message.
    """

    def __init__(self, message: str = "Unauthorized access"):
        super().__init__(message=message, code="UNAUTHORIZED")
