class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a record with the given id does not exist."""


class StoreError(Exception):
    """Raised by key-value store backends when the underlying storage fails."""
