"""Order — the pricing pipeline's working unit.

One Order is created per distinct product in the cart. Discount rules
never mutate an Order: they return new Orders derived from it, possibly
splitting one Order into several siblings that share its product but
carry a fraction of its quantity.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from pcs.domain.model.product import Product
from pcs.domain.model.value_objects import Money, Quantity


class CouponLabel(Enum):
    """Marks which rule produced or modified an order."""

    PAIRWISE_FULL = "pairwise-full"
    PAIRWISE_DISCOUNTED = "pairwise-discounted"
    VOLUME_DISCOUNTED = "volume-discounted"


@dataclass(frozen=True)
class Order:
    """A group of identical units priced together.

    ``original_price`` is the catalog price snapshot and never changes.
    ``discounted_price`` starts equal to it and only goes down as rules
    apply.  An empty ``activated_coupons`` means no rule has touched the
    order yet.
    """

    product_id: str
    product_name: str
    original_price: Money
    discounted_price: Money
    quantity: Quantity
    activated_coupons: tuple[CouponLabel, ...] = ()

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(product: Product, quantity: int) -> Order:
        """Open a fresh, untouched order for *quantity* units of *product*."""
        return Order(
            product_id=product.id,
            product_name=product.name,
            original_price=product.price,
            discounted_price=product.price,
            quantity=Quantity(quantity),
        )

    # --- Derivation -----------------------------------------------------------

    def derive(
        self,
        label: CouponLabel,
        *,
        quantity: int | None = None,
        discounted_price: Money | None = None,
    ) -> Order:
        """Return a copy touched by the rule *label*.

        Quantity and unit price are carried over unless overridden.
        """
        return replace(
            self,
            quantity=self.quantity if quantity is None else Quantity(quantity),
            discounted_price=(
                self.discounted_price if discounted_price is None else discounted_price
            ),
            activated_coupons=self.activated_coupons + (label,),
        )

    def with_quantity(self, quantity: int) -> Order:
        """Return a copy carrying *quantity* units with labels unchanged."""
        return replace(self, quantity=Quantity(quantity))

    # --- Computed properties --------------------------------------------------

    @property
    def is_untouched(self) -> bool:
        return not self.activated_coupons

    @property
    def line_total(self) -> Money:
        return self.discounted_price * self.quantity.value
