"""CLI commands for pricing a cart."""

from __future__ import annotations

import json
from pathlib import Path

import click

from pcs.application.checkout_cart import CheckoutCartHandler
from pcs.application.dto import CheckoutDTO
from pcs.domain.exceptions import DomainException
from pcs.infrastructure.bootstrap import product_repository


def _load_cart_file(path: Path) -> list[str]:
    """Read a JSON list of product identifiers, e.g. '["003", "002"]'."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise click.BadParameter(f"Cart file is not valid JSON: {exc}") from exc
    if not isinstance(raw, list) or not all(isinstance(i, str) for i in raw):
        raise click.BadParameter("Cart file must contain a list of product IDs.")
    return raw


def _display_breakdown(dto: CheckoutDTO) -> None:
    click.echo(
        f"  {'ID':<6} {'Product':<16} {'Qty':>5} {'Price':>10} {'Paid':>10} "
        f"{'Total':>10}  Coupons"
    )
    click.echo(f"  {'-'*80}")
    for order in dto.orders:
        coupons = ", ".join(order.coupons) or "-"
        click.echo(
            f"  {order.product_id:<6} {order.product_name:<16} {order.quantity:>5} "
            f"{order.original_price:>10} {order.discounted_price:>10} "
            f"{order.line_total:>10}  {coupons}"
        )
    click.echo(f"  {'-'*80}")


@click.command("run")
@click.argument("product_ids", nargs=-1)
@click.option(
    "--cart-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON file with a list of product IDs (appended after PRODUCT_IDS).",
)
@click.option("--breakdown", is_flag=True, default=False, help="Show every priced order.")
def checkout_run(
    product_ids: tuple[str, ...],
    cart_file: Path | None,
    breakdown: bool,
) -> None:
    """Price a cart of product IDs and print the total."""
    cart = list(product_ids)
    if cart_file is not None:
        cart.extend(_load_cart_file(cart_file))

    try:
        handler = CheckoutCartHandler(product_repo=product_repository())
        dto = handler.handle(cart)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if breakdown:
        _display_breakdown(dto)
    if dto.dropped_ids:
        click.echo(f"Ignored unknown IDs: {', '.join(dto.dropped_ids)}")
    click.echo(f"Total: {dto.total}")
