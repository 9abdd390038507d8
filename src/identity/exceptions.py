"""Exception types for SIN identity records."""


class IdentityError(Exception):
    """Base exception for all identity record errors."""
    pass


class InvalidArgumentError(IdentityError, ValueError):
    """A required construction argument is absent or empty."""
    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(message or f"{field} is required")
        self.field = field
