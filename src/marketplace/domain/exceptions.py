"""Domain-level exceptions.

Every business rule violation is a subclass of DomainException so the CLI
layer can catch them uniformly, show the message and keep the menu loop
running.  None of these are fatal to the process.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(DomainException):
    """A malformed argument or an invariant-breaking assignment."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InsufficientStockError(DomainException):
    """A reservation exceeds the available stock or is not positive."""


class EmptyCartError(DomainException):
    """Checkout was attempted on a cart without lines."""


class OrderLogError(DomainException):
    """The order log could not be written."""
