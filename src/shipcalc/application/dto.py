"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (SKU + quantity)."""

    sku: int
    quantity: int


@dataclass(frozen=True)
class QuoteDTO:
    """Output: a priced batch of orders as displayed to the user."""

    currency: str
    order_count: int
    total_quantity: int
    wholesale: bool
    total: str  # formatted, e.g. "48.80"


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as displayed to the user."""

    sku: int
    price: str
    wholesale_price: str
    weight: str
    volume: str
