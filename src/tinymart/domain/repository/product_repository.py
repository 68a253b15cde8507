"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure.  The only implementation today keeps products in
memory for the lifetime of the process.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from tinymart.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, ordered by ID."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Store a new or updated product."""
