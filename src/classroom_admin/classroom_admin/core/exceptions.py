class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when form input is invalid or incomplete."""


class NotFoundError(DomainError):
    """Raised by the presentation layer when an identifier does not resolve."""
