import logging
from pathlib import Path

import click

from pcs.infrastructure.bootstrap import set_data_dir
from pcs.infrastructure.cli.checkout_commands import checkout_run
from pcs.infrastructure.cli.product_commands import product_add, product_list

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log pipeline decisions.")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding products.json (overrides PCS_DATA_DIR).",
)
def cli(verbose: bool, data_dir: Path | None) -> None:
    """PCS — Promotional Checkout System"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
    set_data_dir(data_dir)


@cli.group()
def checkout() -> None:
    """Price carts."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


# Register subcommands
checkout.add_command(checkout_run)

product.add_command(product_add)
product.add_command(product_list)
