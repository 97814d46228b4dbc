"""Domain-level exceptions.

Most storefront and game input degrades to a defined sentinel instead of
failing (NaN guesses, default quantities, no-op removals). The few rules
that do reject input raise subclasses of DomainException so the CLI layer
can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
