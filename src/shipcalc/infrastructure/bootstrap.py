"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from decimal import Decimal
from pathlib import Path

from shipcalc.domain.service.order_calculator import OrderCalculator
from shipcalc.infrastructure.currency.fixed_rate_converter import (
    FixedRateCurrencyConverter,
)
from shipcalc.infrastructure.persistence.json_product_catalog import (
    JsonProductCatalog,
)
from shipcalc.infrastructure.shipping.tariff_shipping_calculator import (
    TariffShippingCalculator,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    return Path(os.environ.get("SHIPCALC_DATA_DIR", _DEFAULT_DATA_DIR))


def base_currency() -> str:
    """Currency the catalog prices and the tariff are expressed in."""
    return os.environ.get("SHIPCALC_BASE_CURRENCY", "GBP").upper()


def product_catalog() -> JsonProductCatalog:
    return JsonProductCatalog(data_dir() / "products.json")


def shipping_calculator() -> TariffShippingCalculator:
    tariff = data_dir() / "tariff.json"
    if not tariff.exists():
        return TariffShippingCalculator()
    return TariffShippingCalculator.from_json(tariff)


def currency_converter(target: str) -> FixedRateCurrencyConverter:
    rates = data_dir() / "rates.json"
    if not rates.exists():
        return FixedRateCurrencyConverter(
            {base_currency(): Decimal("1")}, source=base_currency(), target=target
        )
    return FixedRateCurrencyConverter.from_json(
        rates, source=base_currency(), target=target
    )


def order_calculator(target: str) -> OrderCalculator:
    return OrderCalculator(
        product_catalog=product_catalog(),
        shipping_calculator=shipping_calculator(),
        currency_converter=currency_converter(target),
    )
