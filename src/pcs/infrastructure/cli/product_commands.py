"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from pcs.application.add_product import AddProductHandler
from pcs.application.list_products import ListProductsHandler
from pcs.domain.exceptions import DomainException
from pcs.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product identifier (e.g. 006).")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price (e.g. 40).")
def product_add(product_id: str, name: str, price: str) -> None:
    """Add a new product to the catalog."""
    try:
        handler = AddProductHandler(product_repo=product_repository())
        product = handler.handle(product_id=product_id, name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    try:
        products = ListProductsHandler(product_repo=product_repository()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    if not products:
        click.echo("No products found.")
        return
    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10}")
