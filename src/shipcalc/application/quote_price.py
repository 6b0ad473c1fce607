"""Application service: Quote Price use case.

Turns raw item specs into validated ProductOrders and hands them to
the OrderCalculator domain service.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from shipcalc.application.dto import OrderItemSpec, QuoteDTO
from shipcalc.domain.model.order import ProductOrder
from shipcalc.domain.service.order_calculator import OrderCalculator

_CENTS = Decimal("0.01")


class QuotePriceHandler:

    def __init__(self, calculator: OrderCalculator, currency: str) -> None:
        self._calculator = calculator
        self._currency = currency

    def handle(self, item_specs: list[OrderItemSpec]) -> QuoteDTO:
        """Price a batch of items.

        Every quantity is validated before the catalog is touched, so a
        bad spec never triggers a lookup.
        """
        orders = [ProductOrder.of(spec.sku, spec.quantity) for spec in item_specs]
        total = self._calculator.get_price(orders)

        return QuoteDTO(
            currency=self._currency,
            order_count=len(orders),
            total_quantity=sum(order.quantity.value for order in orders),
            wholesale=OrderCalculator.is_wholesale(orders),
            total=str(total.quantize(_CENTS, rounding=ROUND_HALF_UP)),
        )
