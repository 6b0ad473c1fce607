"""CLI command for pricing a batch of orders."""

from __future__ import annotations

import click

from shipcalc.application.dto import OrderItemSpec
from shipcalc.application.quote_price import QuotePriceHandler
from shipcalc.domain.exceptions import DomainException
from shipcalc.infrastructure.bootstrap import base_currency, order_calculator


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '20:2,14:3' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'SKU:Quantity'."
            )
        sku_str, qty_str = pair.rsplit(":", 1)
        try:
            sku = int(sku_str)
        except ValueError:
            raise click.BadParameter(f"Invalid SKU '{sku_str.strip()}'.")
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for SKU {sku}."
            )
        specs.append(OrderItemSpec(sku=sku, quantity=qty))
    return specs


@click.command("quote")
@click.option("--items", required=True, help="Items as 'SKU:Qty,SKU:Qty'.")
@click.option("--currency", default=None, help="Target currency (defaults to the catalog currency).")
def quote(items: str, currency: str | None) -> None:
    """Price a batch of orders, shipping included."""
    specs = _parse_items(items)
    target = (currency or base_currency()).upper()

    try:
        handler = QuotePriceHandler(order_calculator(target), currency=target)
        dto = handler.handle(specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Orders:   {dto.order_count}")
    click.echo(f"Units:    {dto.total_quantity}")
    click.echo(f"Pricing:  {'wholesale' if dto.wholesale else 'retail'}")
    click.echo(f"Total:    {dto.total} {dto.currency}")
