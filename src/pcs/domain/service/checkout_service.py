"""Domain service: Checkout.

Composes the pricing pipeline in its fixed order:

    aggregate -> Coupon A (pairwise) -> Coupon B (volume) -> sum

Coupon B's eligibility depends on which orders Coupon A left untouched,
so the two rules cannot be reordered.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from pcs.domain.model.order import Order
from pcs.domain.model.value_objects import Money
from pcs.domain.repository.product_repository import ProductRepository
from pcs.domain.service.discount_rules import (
    apply_pairwise_discount,
    apply_volume_discount,
)
from pcs.domain.service.order_aggregator import aggregate_cart, aggregate_orders


def sum_orders(orders: Iterable[Order]) -> Money:
    """Sum ``discounted_price * quantity`` over *orders* without rounding."""
    total = Money.zero()
    for order in orders:
        total = total + order.line_total
    return total


@dataclass(frozen=True)
class CheckoutResult:
    """The final order set, the total it sums to and the dropped entries."""

    orders: list[Order]
    total: Money
    dropped_ids: list[str] = field(default_factory=list)


class CheckoutService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def price_orders(self, cart: Iterable[str]) -> list[Order]:
        """Run the cart through aggregation and both discount rules."""
        return self._apply_rules(aggregate_orders(cart, self._product_repo))

    def checkout(self, cart: Iterable[str]) -> Money:
        return sum_orders(self.price_orders(cart))

    def quote(self, cart: Iterable[str]) -> CheckoutResult:
        """Like ``checkout()`` but keeps the priced orders for inspection."""
        aggregation = aggregate_cart(cart, self._product_repo)
        orders = self._apply_rules(aggregation.orders)
        return CheckoutResult(
            orders=orders,
            total=sum_orders(orders),
            dropped_ids=aggregation.dropped_ids,
        )

    @staticmethod
    def _apply_rules(orders: list[Order]) -> list[Order]:
        return apply_volume_discount(apply_pairwise_discount(orders))
