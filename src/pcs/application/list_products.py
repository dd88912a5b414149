"""Application service: List Products use case (query)."""

from __future__ import annotations

from pcs.application.dto import ProductDTO
from pcs.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        products = sorted(self._product_repo.list_all(), key=lambda p: p.id)
        return [ProductDTO(id=p.id, name=p.name, price=str(p.price)) for p in products]
