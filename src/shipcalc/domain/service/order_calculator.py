"""Domain service: Order Calculator.

Prices a batch of product orders in the customer's currency.  It
coordinates three collaborators: the product catalog, the shipping
calculator and the currency converter.

The volume discount is a property of the whole batch, so pricing runs
in two passes:
  Pass 1 — sum the quantities and decide the pricing mode once.
  Pass 2 — look up each product, accumulate the item subtotal and
           pack every unit into a single parcel.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal

from shipcalc.domain.model.order import ProductOrder
from shipcalc.domain.model.value_objects import ZERO, Parcel
from shipcalc.domain.repository.product_catalog import ProductCatalog
from shipcalc.domain.service.currency_converter import CurrencyConverter
from shipcalc.domain.service.shipping_calculator import ShippingCalculator

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
WHOLESALE_THRESHOLD = 15


class OrderCalculator:

    def __init__(
        self,
        product_catalog: ProductCatalog,
        shipping_calculator: ShippingCalculator,
        currency_converter: CurrencyConverter,
    ) -> None:
        self._product_catalog = product_catalog
        self._shipping_calculator = shipping_calculator
        self._currency_converter = currency_converter

    @staticmethod
    def is_wholesale(orders: Sequence[ProductOrder]) -> bool:
        """True when the batch holds more than WHOLESALE_THRESHOLD units.

        The decision covers every order in the batch, including orders
        that are small on their own.
        """
        total_quantity = sum(order.quantity.value for order in orders)
        return total_quantity > WHOLESALE_THRESHOLD

    def get_price(self, orders: Sequence[ProductOrder]) -> Decimal:
        """Return the total price of *orders* in the target currency.

        Steps:
        1. Decide retail or wholesale pricing for the whole batch.
        2. Resolve each product (fail fast on the first lookup error).
        3. Add up item prices and pack all units into one parcel.
        4. Price the parcel once, then convert items + shipping once.

        An empty batch is still priced: the zero subtotal and the empty
        parcel go through shipping and conversion like any other.
        """
        wholesale = self.is_wholesale(orders)
        logger.debug(
            "Pricing %d order(s) at %s prices",
            len(orders),
            "wholesale" if wholesale else "retail",
        )

        subtotal = ZERO
        parcel = Parcel.empty()

        for order in orders:
            product = self._product_catalog.get(order.sku)
            quantity = order.quantity.value
            subtotal += product.unit_price(wholesale) * quantity
            parcel += product.footprint(quantity)

        shipping_cost = self._shipping_calculator.calculate(parcel)
        logger.debug(
            "Items subtotal %s, parcel %s, shipping %s", subtotal, parcel, shipping_cost
        )

        total = self._currency_converter.exchange(subtotal + shipping_cost)
        logger.info("Priced %d order(s): %s", len(orders), total)
        return total
