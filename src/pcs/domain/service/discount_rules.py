"""Domain service: the two promotional discount rules.

Coupon A (pairwise): within one order, units are paired two at a time;
the first unit of each pair keeps its price and the second costs half.
An odd unit left over stays untouched.

Coupon B (volume): when at least three units across the whole cart were
left untouched by Coupon A, every untouched order gets a flat reduction
off its unit price.

Both rules take a list of orders and return a new list with the same
total quantity.  Neither rule mutates its input.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from pcs.domain.model.order import CouponLabel, Order
from pcs.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
PAIRWISE_MIN_QUANTITY = 2
VOLUME_MIN_UNITS = 3
VOLUME_REDUCTION = Money(Decimal("5"))


# --- Coupon A -----------------------------------------------------------------


def apply_pairwise_discount(orders: list[Order]) -> list[Order]:
    """Split every order of two or more units into priced halves.

    For an order of quantity ``q`` and unit price ``p``:
      - ``q // 2`` units at ``p``, labelled PAIRWISE_FULL
      - ``q // 2`` units at ``p / 2``, labelled PAIRWISE_DISCOUNTED
      - one leftover unit at ``p`` with its labels unchanged, only when
        ``q`` is odd

    Orders below the threshold pass through untouched.
    """
    result: list[Order] = []
    for order in orders:
        quantity = order.quantity.value
        if quantity < PAIRWISE_MIN_QUANTITY:
            result.append(order)
            continue

        half = quantity // 2
        result.append(order.derive(CouponLabel.PAIRWISE_FULL, quantity=half))
        result.append(
            order.derive(
                CouponLabel.PAIRWISE_DISCOUNTED,
                quantity=half,
                discounted_price=order.discounted_price.halved(),
            )
        )
        if quantity % 2 == 1:
            result.append(order.with_quantity(1))

        logger.debug(
            "Pairwise discount split %s x%d into %d + %d%s",
            order.product_name,
            quantity,
            half,
            half,
            " + 1 leftover" if quantity % 2 == 1 else "",
        )
    return result


# --- Coupon B -----------------------------------------------------------------


def untouched_units(orders: list[Order]) -> int:
    """Count the units no per-unit rule has touched yet."""
    return sum(order.quantity.value for order in orders if order.is_untouched)


def apply_volume_discount(orders: list[Order]) -> list[Order]:
    """Reduce the unit price of every untouched order once the cart qualifies.

    Two phases: the eligibility count is taken over the whole cart first,
    then the reduction is mapped over untouched orders only.  The price is
    not floored at zero.
    """
    eligible = untouched_units(orders)
    if eligible < VOLUME_MIN_UNITS:
        logger.debug(
            "Volume discount not triggered (%d untouched units, need %d)",
            eligible,
            VOLUME_MIN_UNITS,
        )
        return list(orders)

    logger.debug("Volume discount triggered by %d untouched units", eligible)
    return [
        order.derive(
            CouponLabel.VOLUME_DISCOUNTED,
            discounted_price=order.discounted_price - VOLUME_REDUCTION,
        )
        if order.is_untouched
        else order
        for order in orders
    ]
