"""JSON-file-backed implementation of ProductRepository.

The file holds a list of ``{"id", "name", "price"}`` objects.  Prices
are stored as strings so Decimal precision survives the round-trip;
plain JSON numbers are accepted on load as well.
"""

from __future__ import annotations

import json
from pathlib import Path

from pcs.domain.exceptions import ValidationError
from pcs.domain.model.product import Product
from pcs.domain.model.value_objects import Money
from pcs.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ValidationError(
                f"Catalog file {self._file_path} is not valid JSON: {exc}"
            ) from exc
        if not isinstance(raw, list):
            raise ValidationError(
                f"Catalog file {self._file_path} must contain a list of products"
            )
        products = [self._to_domain(item) for item in raw]
        return {p.id: p for p in products}

    def _to_domain(self, item: object) -> Product:
        if not isinstance(item, dict):
            raise ValidationError(
                f"Catalog file {self._file_path} has a malformed product entry: {item!r}"
            )
        try:
            product_id, name, price = item["id"], item["name"], item["price"]
        except KeyError as exc:
            raise ValidationError(
                f"Catalog file {self._file_path} has a malformed product entry: "
                f"missing {exc}"
            ) from exc
        if not isinstance(product_id, (str, int)) or isinstance(product_id, bool):
            raise ValidationError(
                f"Catalog file {self._file_path} has a non-string product id: {product_id!r}"
            )
        if not isinstance(name, str):
            raise ValidationError(
                f"Catalog file {self._file_path} has a non-string name for "
                f"product '{product_id}'"
            )
        return Product(id=str(product_id), name=name, price=Money.of(price))

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "price": str(p.price.amount),
            }
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
