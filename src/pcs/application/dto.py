"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PricedOrderDTO:
    """Output: one priced order as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    original_price: str  # formatted, e.g. "55.00"
    discounted_price: str
    coupons: list[str]
    line_total: str


@dataclass(frozen=True)
class CheckoutDTO:
    """Output: the priced cart."""

    orders: list[PricedOrderDTO]
    total: str
    dropped_ids: list[str]


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str
