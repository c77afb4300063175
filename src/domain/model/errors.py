"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
The markdown renderer raises none of them: it assumes well-formed input.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class StorageError(DomainError):
    """Backing store failed to complete the operation."""
