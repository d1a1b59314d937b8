"""Domain layer errors."""

from dataclasses import dataclass


class DomainError(Exception):
    """Base domain error."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class FieldError:
    """A single invalid input field."""

    field: str
    message: str


class ValidationError(DomainError):
    """Malformed or out-of-range input."""

    def __init__(self, message: str, errors: list[FieldError] | None = None):
        self.errors = errors or []
        super().__init__(message)

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        """Build a validation error for a single field."""
        return cls(message, [FieldError(field=field, message=message)])


class AuthenticationError(DomainError):
    """Raised when the caller could not be identified."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an action they are not allowed to perform."""

    def __init__(
        self,
        message: str,
        resource: str | None = None,
        resource_id: str | None = None,
    ):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is absent or soft-deleted."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class ConflictError(DomainError):
    """Raised when a write would duplicate or not change existing state."""

    pass


class InvalidStateError(DomainError):
    """Raised when a transition is not allowed from the current state."""

    pass
