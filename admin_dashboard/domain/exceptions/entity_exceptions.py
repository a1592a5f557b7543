"""Entity validation and state domain exceptions."""

from admin_dashboard.domain.exceptions.base import DomainException


class ValidationError(DomainException):
    """Raised when input to an entity constructor or mutator is malformed."""

    def __init__(self, message: str):
        super().__init__(message=message, code="VALIDATION_ERROR")


class InvalidOperationError(DomainException):
    """Raised when an operation cannot be performed in the current state."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_OPERATION")


class NotFoundError(DomainException):
    """Raised when a requested entity cannot be resolved."""

    def __init__(self, entity_name: str, identifier: object):
        self.entity_name = entity_name
        self.identifier = identifier
        super().__init__(
            message=f"{entity_name} with identifier '{identifier}' not found",
            code="NOT_FOUND",
        )


class ConflictError(DomainException):
    """Raised when a change conflicts with existing data (e.g. a unique name)."""

    def __init__(self, message: str):
        super().__init__(message=message, code="CONFLICT")
