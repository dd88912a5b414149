"""Domain service: Order aggregation.

Turns the raw cart (a sequence of product identifiers) into one Order
per distinct product.  Identifiers missing from the catalog are dropped
here; they never reach the discount rules.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from pcs.domain.model.order import Order
from pcs.domain.model.product import Product
from pcs.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartAggregation:
    """Untouched orders plus the cart entries the catalog did not know."""

    orders: list[Order]
    dropped_ids: list[str]


def lookup(catalog: Mapping[str, Product], product_id: str) -> Product | None:
    return catalog.get(product_id)


def aggregate_cart(
    cart: Iterable[str],
    product_repo: ProductRepository,
) -> CartAggregation:
    """Group the resolvable cart entries into untouched orders.

    Entries with the same identifier collapse into one order wherever
    they sit in the cart.  Orders come out in first-appearance order;
    unknown entries are kept, in cart order, in ``dropped_ids``.
    """
    catalog = product_repo.snapshot()
    groups: dict[str, list[Product]] = {}
    dropped: list[str] = []
    for product_id in cart:
        product = lookup(catalog, product_id)
        if product is None:
            logger.debug("Dropping unknown product id %r from cart", product_id)
            dropped.append(product_id)
            continue
        groups.setdefault(product.id, []).append(product)

    return CartAggregation(
        orders=[Order.create(products[0], len(products)) for products in groups.values()],
        dropped_ids=dropped,
    )


def aggregate_orders(
    cart: Iterable[str],
    product_repo: ProductRepository,
) -> list[Order]:
    return aggregate_cart(cart, product_repo).orders
