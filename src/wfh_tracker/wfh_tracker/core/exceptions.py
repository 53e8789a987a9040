class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when an operation is not allowed in the current deployment."""


class StoreUnavailableError(DomainError):
    """Raised when the status store cannot be reached or has been closed."""


class RosterUnavailableError(DomainError):
    """Raised when the roster file is missing, unreadable or inconsistent."""
