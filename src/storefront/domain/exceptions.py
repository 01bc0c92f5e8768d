"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input is missing or a business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class UpstreamUnavailableError(DomainException):
    """An external collaborator (catalog, payment) failed or timed out."""


class ConflictError(DomainException):
    """The entity being created collides with an existing one."""
