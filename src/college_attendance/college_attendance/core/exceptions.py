class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when query parameters are invalid."""


class NotFoundError(DomainError):
    """Raised when a referenced student does not exist."""
