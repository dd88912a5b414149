"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live
elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pcs.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its exact ID, or None if not in the catalog.

        A miss is an expected outcome, never an error.
        """

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or replacement product."""

    def snapshot(self) -> dict[str, Product]:
        """Return the whole catalog keyed by ID, read in one go.

        Pricing a cart looks up every entry against this snapshot so the
        catalog is read once per checkout and cannot shift mid-cart.
        """
        return {product.id: product for product in self.list_all()}
