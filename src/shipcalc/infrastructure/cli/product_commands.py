"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from shipcalc.application.list_products import ListProductsHandler
from shipcalc.infrastructure.bootstrap import product_catalog


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(product_catalog()).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'SKU':<6} {'Price':>10} {'Wholesale':>10} {'Weight':>8} {'Volume':>8}")
    click.echo("-" * 46)
    for p in products:
        click.echo(
            f"{p.sku:<6} {p.price:>10} {p.wholesale_price:>10} {p.weight:>8} {p.volume:>8}"
        )
