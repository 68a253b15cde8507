"""Application service: List Catalog use case (query)."""

from __future__ import annotations

from tinymart.application.dto import CatalogLineDTO
from tinymart.domain.model.product import Product, VideoItem
from tinymart.domain.repository.product_repository import ProductRepository


class ListCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, new_release_year: int | None = None) -> list[CatalogLineDTO]:
        """List every product; movies from *new_release_year* on are flagged."""
        return [
            self._to_dto(product, new_release_year)
            for product in self._product_repo.list_all()
        ]

    @staticmethod
    def _to_dto(product: Product, new_release_year: int | None) -> CatalogLineDTO:
        new_release = (
            new_release_year is not None
            and isinstance(product, VideoItem)
            and product.is_new_release(new_release_year)
        )
        return CatalogLineDTO(
            id=product.id,
            kind=product.kind,
            name=product.name,
            price=str(product.price),
            review_rate=product.review_rate,
            new_release=new_release,
        )
