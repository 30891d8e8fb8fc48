"""Domain exceptions for business rule violations."""


class DomainError(Exception):
    """Base exception for domain layer."""


class ValidationError(DomainError):
    """Raised when input validation fails."""


class RecordNotFoundError(DomainError):
    """Raised when a catalog record is not found in the store."""


class ConflictError(DomainError):
    """Raised when an operation would break a referential or uniqueness rule."""


class InfrastructureError(DomainError):
    """Raised when infrastructure operations fail (DB, network, etc.)."""
