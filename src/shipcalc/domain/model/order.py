"""Product orders — what the customer asks to be priced."""

from __future__ import annotations

from dataclasses import dataclass

from shipcalc.domain.exceptions import ValidationError
from shipcalc.domain.model.value_objects import Quantity


@dataclass(frozen=True)
class ProductOrder:
    """A request for a quantity of one product.

    Immutable: the calculator only reads orders, it never changes them.
    A plain ``int`` quantity is wrapped in ``Quantity`` on construction.
    """

    sku: int
    quantity: Quantity

    def __post_init__(self) -> None:
        if isinstance(self.quantity, Quantity):
            return
        if not isinstance(self.quantity, int) or isinstance(self.quantity, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )
        object.__setattr__(self, "quantity", Quantity(self.quantity))

    @staticmethod
    def of(sku: int, quantity: int) -> ProductOrder:
        """Convenient factory that wraps a raw quantity."""
        return ProductOrder(sku=sku, quantity=Quantity(quantity))
