"""Unit tests for grouping a cart into orders."""

from pcs.domain.model.value_objects import Money, Quantity
from pcs.domain.service.order_aggregator import aggregate_cart, aggregate_orders, lookup
from tests.fakes import drinks_catalog


def _by_id(orders):
    return {o.product_id: o for o in orders}


class TestAggregateOrders:

    def test_groups_identical_ids_regardless_of_position(self):
        orders = aggregate_orders(["003", "002", "003", "003", "004"], drinks_catalog())
        by_id = _by_id(orders)
        assert len(orders) == 3
        assert by_id["003"].quantity == Quantity(3)
        assert by_id["002"].quantity == Quantity(1)
        assert by_id["004"].quantity == Quantity(1)

    def test_orders_start_untouched_at_catalog_price(self):
        orders = aggregate_orders(["003", "003"], drinks_catalog())
        (sprite,) = orders
        assert sprite.product_name == "Sprite"
        assert sprite.original_price == Money.of(55)
        assert sprite.discounted_price == Money.of(55)
        assert sprite.is_untouched

    def test_unknown_ids_are_dropped(self):
        orders = aggregate_orders(["003", "006", "999"], drinks_catalog())
        assert [o.product_id for o in orders] == ["003"]

    def test_only_unknown_ids_yields_no_orders(self):
        assert aggregate_orders(["006", "007"], drinks_catalog()) == []

    def test_empty_cart_yields_no_orders(self):
        assert aggregate_orders([], drinks_catalog()) == []

    def test_every_resolved_id_appears_once(self):
        cart = ["001", "002", "001", "005", "002", "001"]
        orders = aggregate_orders(cart, drinks_catalog())
        ids = [o.product_id for o in orders]
        assert sorted(ids) == ["001", "002", "005"]
        assert sum(o.quantity.value for o in orders) == len(cart)

    def test_output_follows_first_appearance(self):
        orders = aggregate_orders(["004", "001", "004"], drinks_catalog())
        assert [o.product_id for o in orders] == ["004", "001"]

    def test_aggregate_cart_reports_dropped_ids_in_cart_order(self):
        aggregation = aggregate_cart(["006", "003", "999", "006"], drinks_catalog())
        assert [o.product_id for o in aggregation.orders] == ["003"]
        assert aggregation.dropped_ids == ["006", "999", "006"]

    def test_lookup_miss_is_none(self):
        catalog = drinks_catalog().snapshot()
        assert lookup(catalog, "003").name == "Sprite"
        assert lookup(catalog, "006") is None
