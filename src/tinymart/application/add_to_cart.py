"""Application service: Add To Cart use case."""

from __future__ import annotations

from tinymart.domain.exceptions import EntityNotFoundError
from tinymart.domain.model.cart import Cart
from tinymart.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, cart: Cart, product_id: int) -> bool:
        """Put a catalog product into *cart*.

        Returns the cart's verdict (False when full).  An id missing
        from the catalog is a caller mistake and raises instead.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return cart.add_item(product)
