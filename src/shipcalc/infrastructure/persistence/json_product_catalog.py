"""JSON-file-backed implementation of ProductCatalog."""

from __future__ import annotations

import json
from pathlib import Path

from shipcalc.domain.exceptions import ProductNotFoundError
from shipcalc.domain.model.product import Product
from shipcalc.domain.repository.product_catalog import ProductCatalog


class JsonProductCatalog(ProductCatalog):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductCatalog interface ---------------------------------------------

    def get(self, sku: int) -> Product:
        product = self._load().get(sku)
        if product is None:
            raise ProductNotFoundError(sku)
        return product

    def list_all(self) -> list[Product]:
        return sorted(self._load().values(), key=lambda p: p.sku)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            int(item["sku"]): Product(
                sku=int(item["sku"]),
                price=item["price"],
                wholesale_price=item.get("wholesale_price", item["price"]),
                weight=item.get("weight", "0"),
                volume=item.get("volume", "0"),
            )
            for item in raw
        }

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
