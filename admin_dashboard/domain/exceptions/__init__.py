"""Domain exceptions package."""

from admin_dashboard.domain.exceptions.authorization_exceptions import UnauthorizedError
from admin_dashboard.domain.exceptions.base import DomainException
from admin_dashboard.domain.exceptions.entity_exceptions import (
    ConflictError,
    InvalidOperationError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    # Base
    "DomainException",
    # Entity exceptions
    "ValidationError",
    "InvalidOperationError",
    "NotFoundError",
    "ConflictError",
    # Authorization exceptions
    "UnauthorizedError",
]
