class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StorageError(DomainError):
    """Raised when the key-value backend cannot be read or written."""


class MalformedLogError(DomainError):
    """Raised when the stored submission log cannot be decoded."""
