"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from shipcalc.domain.exceptions import ValidationError

ZERO = Decimal("0")


def to_decimal(value: str | int | Decimal, field_name: str) -> Decimal:
    """Coerce *value* to a non-negative Decimal.

    Floats go through ``str`` first so 14.4 stays 14.4 rather than its
    binary approximation.
    """
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {field_name}: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid {field_name}: {value!r}")
    if result < ZERO:
        raise ValidationError(f"{field_name} cannot be negative, got {result}")
    return result


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Parcel:
    """The physical footprint of a shipment.

    A batch of orders always travels as a single parcel, so parcels are
    built by adding up the footprint of each order line.
    """

    weight: Decimal
    volume: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "weight", to_decimal(self.weight, "Parcel weight"))
        object.__setattr__(self, "volume", to_decimal(self.volume, "Parcel volume"))

    def __add__(self, other: Parcel) -> Parcel:
        return Parcel(self.weight + other.weight, self.volume + other.volume)

    @property
    def is_empty(self) -> bool:
        return self.weight == ZERO and self.volume == ZERO

    def __str__(self) -> str:
        return f"{self.weight} kg / {self.volume} m3"

    @staticmethod
    def empty() -> Parcel:
        return Parcel(ZERO, ZERO)
