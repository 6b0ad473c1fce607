import logging

import click

from shipcalc.infrastructure.cli.product_commands import product_list
from shipcalc.infrastructure.cli.quote_commands import quote


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """shipcalc — price orders with shipping in any currency"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Browse the product catalog."""


# Register subcommands
cli.add_command(quote)
product.add_command(product_list)
