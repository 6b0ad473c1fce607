"""Shipping calculator driven by a flat tariff."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from shipcalc.domain.model.value_objects import ZERO, Parcel, to_decimal
from shipcalc.domain.service.shipping_calculator import ShippingCalculator


class TariffShippingCalculator(ShippingCalculator):
    """Charges a base fee plus a rate per kilogram and per cubic metre.

    The tariff only sees the parcel, not the orders in it. A parcel with
    no weight and no volume costs nothing, base fee included. That covers
    the empty batch as well as products the catalog lists without weight
    or volume, which have nothing physical to ship.
    """

    def __init__(
        self,
        base_fee: str | Decimal = ZERO,
        per_kg: str | Decimal = ZERO,
        per_volume: str | Decimal = ZERO,
    ) -> None:
        self._base_fee = to_decimal(base_fee, "Base fee")
        self._per_kg = to_decimal(per_kg, "Rate per kg")
        self._per_volume = to_decimal(per_volume, "Rate per m3")

    def calculate(self, parcel: Parcel) -> Decimal:
        if parcel.is_empty:
            return ZERO
        return (
            self._base_fee
            + parcel.weight * self._per_kg
            + parcel.volume * self._per_volume
        )

    @staticmethod
    def from_json(file_path: Path) -> TariffShippingCalculator:
        """Load a tariff such as ``{"base_fee": "4.50", "per_kg": "1.20"}``."""
        raw = json.loads(file_path.read_text(encoding="utf-8"))
        return TariffShippingCalculator(
            base_fee=raw.get("base_fee", "0"),
            per_kg=raw.get("per_kg", "0"),
            per_volume=raw.get("per_volume", "0"),
        )
