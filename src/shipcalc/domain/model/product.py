"""Product entity.

Products live in the catalog, independently of any order. The
calculator resolves a fresh Product for every order it prices.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from shipcalc.domain.model.value_objects import Parcel, to_decimal


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    ``price`` applies to ordinary batches, ``wholesale_price`` to batches
    large enough to qualify for the volume discount. A product without a
    wholesale price sells at ``price`` either way. ``weight`` (kg) and
    ``volume`` (m3) are per unit.
    """

    sku: int
    price: Decimal
    wholesale_price: Decimal | None = None
    weight: Decimal = Decimal("0")
    volume: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        if self.wholesale_price is None:
            object.__setattr__(self, "wholesale_price", self.price)
        for name in ("price", "wholesale_price", "weight", "volume"):
            object.__setattr__(self, name, to_decimal(getattr(self, name), f"Product {name}"))

    def unit_price(self, wholesale: bool) -> Decimal:
        return self.wholesale_price if wholesale else self.price

    def footprint(self, quantity: int) -> Parcel:
        """Weight and volume of *quantity* units of this product."""
        return Parcel(self.weight * quantity, self.volume * quantity)
