"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.

Note that an unknown cart identifier is *not* an error: the pricing
pipeline drops it silently.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value or invariant was violated (bad money, bad catalog data...)."""
