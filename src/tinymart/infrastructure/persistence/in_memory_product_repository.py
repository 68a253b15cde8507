"""Dict-backed implementation of ProductRepository.

The catalog lives only as long as the process; nothing is written to
disk.
"""

from __future__ import annotations

from tinymart.domain.model.product import Product
from tinymart.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self.save(p)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return [self._store[key] for key in sorted(self._store)]

    def save(self, product: Product) -> None:
        self._store[product.id] = product
