"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so callers (the CLI today) can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input is malformed or a product invariant was violated."""


class NotFoundError(DomainException):
    """A requested product does not exist."""
