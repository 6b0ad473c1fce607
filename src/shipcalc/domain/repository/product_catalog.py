"""Abstract catalog for Product lookups.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shipcalc.domain.model.product import Product


class ProductCatalog(ABC):

    @abstractmethod
    def get(self, sku: int) -> Product:
        """Return the product for *sku*.

        Raises ProductNotFoundError if the catalog does not know it.
        """

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""
