"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """The catalog has no product for the requested SKU."""

    def __init__(self, sku: int) -> None:
        super().__init__(f"Product not found: SKU {sku}")
        self.sku = sku


class ExchangeRateError(DomainException):
    """An amount cannot be converted between two currencies."""
