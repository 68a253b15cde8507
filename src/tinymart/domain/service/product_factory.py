"""Domain service: Product Factory.

Builds catalog products with fresh ids and validated names and prices.
Ids come from a ``ProductIdSequence`` owned by the factory, so two
factories never share a counter and a test can start from a known id.

Validation itself is pure (see ``value_objects``); this service is the
one place that turns a correction into a warning for the notifier.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from tinymart.domain.model.product import (
    AudioItem,
    EBookItem,
    FilmRating,
    Genre,
    PaperBookItem,
    Product,
    VideoItem,
)
from tinymart.domain.model.value_objects import (
    MAX_PRICE,
    MIN_PRICE,
    Money,
    PersonName,
    clamp_price,
    normalize_name,
)
from tinymart.domain.notifier import Notifier

logger = logging.getLogger(__name__)

Amount = str | float | int | Decimal


class ProductIdSequence:
    """Hands out strictly increasing product ids, starting at *start*."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value


class ProductFactory:

    def __init__(self, notifier: Notifier, ids: ProductIdSequence | None = None) -> None:
        self._notifier = notifier
        self._ids = ids or ProductIdSequence()

    # --- Creation -------------------------------------------------------------

    def music(
        self,
        name: str,
        price: Amount,
        performer: PersonName,
        genre: Genre = Genre.POP,
        review_rate: float = 0.0,
    ) -> AudioItem:
        return AudioItem(
            **self._header(name, price, review_rate),
            performer=performer,
            genre=genre,
        )

    def movie(
        self,
        name: str,
        price: Amount,
        director: PersonName,
        release_year: int,
        run_time_minutes: int,
        rating: FilmRating = FilmRating.NOT_RATED,
        review_rate: float = 0.0,
    ) -> VideoItem:
        return VideoItem(
            **self._header(name, price, review_rate),
            director=director,
            release_year=release_year,
            run_time_minutes=run_time_minutes,
            rating=rating,
        )

    def ebook(
        self,
        name: str,
        price: Amount,
        author: PersonName,
        page_count: int,
        review_rate: float = 0.0,
    ) -> EBookItem:
        return EBookItem(
            **self._header(name, price, review_rate),
            author=author,
            page_count=page_count,
        )

    def paper_book(
        self,
        name: str,
        price: Amount,
        author: PersonName,
        page_count: int,
        review_rate: float = 0.0,
    ) -> PaperBookItem:
        return PaperBookItem(
            **self._header(name, price, review_rate),
            author=author,
            page_count=page_count,
        )

    # --- Updates --------------------------------------------------------------

    def rename(self, product: Product, name: str) -> None:
        if product.rename(name):
            self._warn_name(product.id)

    def reprice(self, product: Product, price: Amount) -> None:
        if product.update_price(price):
            self._warn_price(product.price)

    # --- Internal helpers -----------------------------------------------------

    def _header(self, name: str, price: Amount, review_rate: float) -> dict:
        """Allocate an id and validate the fields every product shares."""
        # Unparsable prices raise before an id is spent.
        clean_price, clamped = clamp_price(price)
        product_id = self._ids.next_id()

        clean_name, defaulted = normalize_name(name)
        if defaulted:
            self._warn_name(product_id)
        if clamped:
            self._warn_price(clean_price)

        logger.debug("Allocated product id %s for %r", product_id, clean_name)
        return {
            "id": product_id,
            "name": clean_name,
            "price": clean_price,
            "review_rate": review_rate,
        }

    def _warn_name(self, product_id: int) -> None:
        self._notifier.warn(f"Product #{product_id} has no name; using placeholder")

    def _warn_price(self, price: Money) -> None:
        self._notifier.warn(
            f"Price adjusted to {price} "
            f"(must be between {Money(MIN_PRICE)} and {Money(MAX_PRICE)})"
        )
