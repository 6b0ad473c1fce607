"""Currency converter backed by a static rate table."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from shipcalc.domain.exceptions import ExchangeRateError, ValidationError
from shipcalc.domain.model.value_objects import to_decimal
from shipcalc.domain.service.currency_converter import CurrencyConverter


class FixedRateCurrencyConverter(CurrencyConverter):
    """Converts between two currencies of a rate table.

    Each rate is the value of one unit of that currency in a common
    base, so ``amount * rates[source] / rates[target]`` converts from
    *source* to *target*.
    """

    def __init__(self, rates: dict[str, Decimal], source: str, target: str) -> None:
        self._rates = {code.upper(): rate for code, rate in rates.items()}
        self.source = source.upper()
        self.target = target.upper()
        for code in (self.source, self.target):
            if code not in self._rates:
                raise ExchangeRateError(f"No exchange rate for currency '{code}'")
            if self._rates[code] <= 0:
                raise ExchangeRateError(f"Exchange rate for '{code}' must be positive")

    def exchange(self, amount: Decimal) -> Decimal:
        if self.source == self.target:
            return amount
        return amount * self._rates[self.source] / self._rates[self.target]

    @staticmethod
    def from_json(file_path: Path, source: str, target: str) -> FixedRateCurrencyConverter:
        """Load rates such as ``{"GBP": "1", "EUR": "0.86"}``."""
        raw = json.loads(file_path.read_text(encoding="utf-8"))
        try:
            rates = {code: to_decimal(rate, f"{code} rate") for code, rate in raw.items()}
        except ValidationError as exc:
            raise ExchangeRateError(str(exc)) from exc
        return FixedRateCurrencyConverter(rates, source, target)
