"""Abstract shipping-cost estimator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from shipcalc.domain.model.value_objects import Parcel


class ShippingCalculator(ABC):

    @abstractmethod
    def calculate(self, parcel: Parcel) -> Decimal:
        """Return the cost of shipping *parcel*, in the catalog currency."""
