"""Abstract currency converter."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class CurrencyConverter(ABC):

    @abstractmethod
    def exchange(self, amount: Decimal) -> Decimal:
        """Convert *amount* from the catalog currency to the target one."""
