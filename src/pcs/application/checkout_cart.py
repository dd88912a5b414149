"""Application service: Checkout Cart use case.

Prices a cart against the catalog and maps the result to a DTO.  Cart
entries that the catalog does not know are reported back in
``dropped_ids`` but never fail the checkout.
"""

from __future__ import annotations

import logging

from pcs.application.dto import CheckoutDTO, PricedOrderDTO
from pcs.domain.model.order import Order
from pcs.domain.repository.product_repository import ProductRepository
from pcs.domain.service.checkout_service import CheckoutService

logger = logging.getLogger(__name__)


class CheckoutCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, cart: list[str]) -> CheckoutDTO:
        """Price *cart* and return the orders and total for display."""
        result = CheckoutService(self._product_repo).quote(cart)

        if result.dropped_ids:
            logger.info("Ignored %d unknown cart entries", len(result.dropped_ids))
            logger.debug("Ignored cart entries: %s", result.dropped_ids)
        logger.info(
            "Priced cart of %d entries into %d orders, total %s",
            len(cart),
            len(result.orders),
            result.total,
        )
        return CheckoutDTO(
            orders=[self._to_dto(order) for order in result.orders],
            total=str(result.total),
            dropped_ids=list(result.dropped_ids),
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order: Order) -> PricedOrderDTO:
        return PricedOrderDTO(
            product_id=order.product_id,
            product_name=order.product_name,
            quantity=order.quantity.value,
            original_price=str(order.original_price),
            discounted_price=str(order.discounted_price),
            coupons=[label.value for label in order.activated_coupons],
            line_total=str(order.line_total),
        )
