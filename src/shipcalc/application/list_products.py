"""Application service: List Products use case."""

from __future__ import annotations

from shipcalc.application.dto import ProductDTO
from shipcalc.domain.repository.product_catalog import ProductCatalog


class ListProductsHandler:

    def __init__(self, product_catalog: ProductCatalog) -> None:
        self._product_catalog = product_catalog

    def handle(self) -> list[ProductDTO]:
        return [
            ProductDTO(
                sku=p.sku,
                price=str(p.price),
                wholesale_price=str(p.wholesale_price),
                weight=str(p.weight),
                volume=str(p.volume),
            )
            for p in self._product_catalog.list_all()
        ]
