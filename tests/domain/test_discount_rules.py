"""Unit tests for the pairwise (Coupon A) and volume (Coupon B) rules."""

from collections import defaultdict

from pcs.domain.model.order import CouponLabel, Order
from pcs.domain.model.product import Product
from pcs.domain.model.value_objects import Money, Quantity
from pcs.domain.service.discount_rules import (
    VOLUME_REDUCTION,
    apply_pairwise_discount,
    apply_volume_discount,
    untouched_units,
)


def _order(qty: int, price: str = "55", pid: str = "003", name: str = "Sprite") -> Order:
    return Order.create(Product(id=pid, name=name, price=Money.of(price)), qty)


def _quantities_by_product(orders: list[Order]) -> dict[str, int]:
    totals: dict[str, int] = defaultdict(int)
    for order in orders:
        totals[order.product_id] += order.quantity.value
    return dict(totals)


# ── Coupon A ─────────────────────────────────────────────────────────────────


class TestPairwiseDiscount:

    def test_single_unit_passes_through(self):
        order = _order(1)
        assert apply_pairwise_discount([order]) == [order]

    def test_even_quantity_splits_in_two(self):
        full, half = apply_pairwise_discount([_order(4)])
        assert full.quantity == Quantity(2)
        assert full.discounted_price == Money.of(55)
        assert full.activated_coupons == (CouponLabel.PAIRWISE_FULL,)
        assert half.quantity == Quantity(2)
        assert half.discounted_price == Money.of("27.5")
        assert half.activated_coupons == (CouponLabel.PAIRWISE_DISCOUNTED,)

    def test_quantity_five_leaves_untouched_unit(self):
        result = apply_pairwise_discount([_order(5)])
        assert sorted(o.quantity.value for o in result) == [1, 2, 2]
        (leftover,) = [o for o in result if o.quantity.value == 1]
        assert leftover.activated_coupons == ()
        assert leftover.discounted_price == Money.of(55)
        assert leftover.product_id == "003"
        assert leftover.product_name == "Sprite"

    def test_quantity_two_has_no_leftover(self):
        result = apply_pairwise_discount([_order(2)])
        assert len(result) == 2
        assert all(not o.is_untouched for o in result)

    def test_original_price_is_kept_on_every_sibling(self):
        result = apply_pairwise_discount([_order(3)])
        assert all(o.original_price == Money.of(55) for o in result)

    def test_halves_the_current_discounted_price(self):
        already_reduced = _order(2).derive(
            CouponLabel.VOLUME_DISCOUNTED, discounted_price=Money.of(40)
        )
        _, half = apply_pairwise_discount([already_reduced])
        assert half.discounted_price == Money.of(20)

    def test_quantity_is_conserved_per_product(self):
        orders = [
            _order(q, pid=str(q), name=f"P{q}") for q in (1, 2, 3, 4, 7, 10)
        ]
        result = apply_pairwise_discount(orders)
        assert _quantities_by_product(result) == _quantities_by_product(orders)

    def test_does_not_mutate_input(self):
        orders = [_order(3)]
        apply_pairwise_discount(orders)
        assert orders == [_order(3)]

    def test_empty_input(self):
        assert apply_pairwise_discount([]) == []


# ── Coupon B ─────────────────────────────────────────────────────────────────


class TestVolumeDiscount:

    def test_two_untouched_units_do_not_trigger(self):
        orders = [_order(1, pid="002", name="Royal"), _order(1, pid="004", name="Fanta")]
        assert apply_volume_discount(orders) == orders

    def test_three_untouched_units_trigger(self):
        orders = [
            _order(1, "50", pid="002", name="Royal"),
            _order(1, "60", pid="004", name="Fanta"),
            _order(1, "35", pid="005", name="Lemon Tea"),
        ]
        result = apply_volume_discount(orders)
        assert [o.discounted_price for o in result] == [
            Money.of(45),
            Money.of(55),
            Money.of(30),
        ]
        assert all(
            o.activated_coupons == (CouponLabel.VOLUME_DISCOUNTED,) for o in result
        )

    def test_single_untouched_order_of_three_units_triggers(self):
        (order,) = apply_volume_discount([_order(3)])
        assert order.discounted_price == Money.of(50)
        assert order.quantity == Quantity(3)

    def test_touched_orders_are_neither_counted_nor_reduced(self):
        touched = _order(2).derive(CouponLabel.PAIRWISE_FULL)
        untouched = [_order(1, pid="002", name="Royal"), _order(1, pid="004", name="Fanta")]
        assert untouched_units([touched] + untouched) == 2
        assert apply_volume_discount([touched] + untouched) == [touched] + untouched

    def test_touched_orders_pass_through_when_triggered(self):
        touched = _order(2).derive(CouponLabel.PAIRWISE_FULL)
        result = apply_volume_discount([touched, _order(3, pid="002", name="Royal")])
        assert result[0] == touched
        assert result[1].discounted_price == Money.of(50)

    def test_price_is_not_clamped_at_zero(self):
        cheap = _order(3, "2", pid="009", name="Gum")
        (order,) = apply_volume_discount([cheap])
        assert order.discounted_price == Money.of(-3)
        assert order.line_total == Money.of(-9)

    def test_reduction_is_five(self):
        assert VOLUME_REDUCTION == Money.of(5)

    def test_quantity_is_conserved(self):
        orders = [_order(3), _order(1, pid="002", name="Royal")]
        result = apply_volume_discount(orders)
        assert _quantities_by_product(result) == _quantities_by_product(orders)

    def test_empty_input(self):
        assert apply_volume_discount([]) == []
