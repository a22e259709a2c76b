class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class SnapshotError(DomainError):
    """Raised when the state snapshot cannot be written."""
