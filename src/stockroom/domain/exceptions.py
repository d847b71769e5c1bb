"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed or a business rule was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class OutOfStockError(DomainException):
    """The product exists but has no stock left to sell."""


class CapabilityUnavailableError(DomainException):
    """A host capability (camera, audio) is missing or was denied."""
