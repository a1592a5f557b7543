"""Email value object."""

import re
from dataclasses import dataclass

from admin_dashboard.domain.exceptions import ValidationError


EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class Email:
    """
    Email value object with validation.

    Immutable value object representing an email address.
    Validates format and normalizes to lowercase.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate email format and normalize."""
        if not self.value or not self.value.strip():
            raise ValidationError("Email is required")

        normalized = self.value.strip().lower()

        if not EMAIL_REGEX.match(normalized):
            raise ValidationError("Invalid email format")

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email(value={self.value!r})"

    @property
    def domain(self) -> str:
        """Extract domain part from email address."""
        return self.value.split("@")[1]
