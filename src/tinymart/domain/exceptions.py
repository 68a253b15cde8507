"""Domain-level exceptions.

Only genuine failures are raised: unparsable input and unknown catalog
entries.  Expected conditions such as a full cart or an out-of-range
price are reported through the notifier instead.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An input could not be turned into a valid domain value."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
