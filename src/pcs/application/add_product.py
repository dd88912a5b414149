"""Application service: Add Product use case."""

from __future__ import annotations

from pcs.domain.exceptions import ValidationError
from pcs.domain.model.product import Product
from pcs.domain.model.value_objects import Money
from pcs.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, name: str, price: str) -> Product:
        """Add a new product to the catalog.

        Input typed at the CLI is checked here; the pricing pipeline
        itself accepts whatever the catalog holds.
        """
        if not product_id or not product_id.strip():
            raise ValidationError("Product ID is required")
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        product_id = product_id.strip()
        if self._product_repo.get_by_id(product_id) is not None:
            raise ValidationError(f"Product ID '{product_id}' already exists")

        amount = Money.of(price)
        if amount <= Money.zero():
            raise ValidationError("Product price must be greater than zero")

        product = Product(id=product_id, name=name.strip(), price=amount)
        self._product_repo.save(product)
        return product
