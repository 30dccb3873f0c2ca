class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a command targets an employee (or leave date) that does not exist."""


class InvalidStateError(DomainError):
    """Raised when a leave request is decided outside the Pending state."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
