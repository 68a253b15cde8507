"""Product hierarchy — the catalog's polymorphic entities.

``Product`` and ``BookItem`` are abstract: ``abc`` refuses to build them,
so only the four concrete variants can ever reach a cart.  Use
``ProductFactory`` for new products — it allocates ids and reports any
name or price correction.  The constructors normalize name and price
too, but quietly, so fixtures can build products with known ids without
breaking the invariants.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from tinymart.domain.model.value_objects import (
    Money,
    PersonName,
    clamp_price,
    normalize_name,
)


class Genre(Enum):
    BLUES = "Blues"
    CLASSICAL = "Classical"
    COUNTRY = "Country"
    FOLK = "Folk"
    JAZZ = "Jazz"
    METAL = "Metal"
    POP = "Pop"
    RNB = "RnB"
    ROCK = "Rock"


class FilmRating(Enum):
    NOT_RATED = "Not Rated"
    G = "G"
    PG = "PG"
    PG_13 = "PG-13"
    R = "R"
    NC_17 = "NC-17"


@dataclass(frozen=True)
class ProductDescription:
    """Everything a report needs to show about one product.

    Header fields come first, in display order; ``details`` holds the
    variant-specific ``(label, value)`` pairs.
    """

    kind: str
    product_id: int
    name: str
    price: Money
    review_rate: float
    details: list[tuple[str, str]]


@dataclass(kw_only=True)
class Product(ABC):
    """A purchasable catalog entry."""

    id: int
    name: str
    price: Money
    review_rate: float = 0.0

    def __post_init__(self) -> None:
        # Silent here; ProductFactory is the path that reports corrections.
        self.name, _ = normalize_name(self.name)
        self.price, _ = clamp_price(self.price.amount)

    # --- Variant hooks --------------------------------------------------------

    @property
    @abstractmethod
    def kind(self) -> str:
        """Display label for the product type, e.g. ``"Music"``."""

    @abstractmethod
    def describe_body(self) -> list[tuple[str, str]]:
        """Variant-specific ``(label, value)`` pairs, in display order."""

    # --- Updates --------------------------------------------------------------

    def rename(self, name: str) -> bool:
        """Set the name; returns True if the sentinel name had to be used."""
        self.name, defaulted = normalize_name(name)
        return defaulted

    def update_price(self, amount: str | float | int | Decimal) -> bool:
        """Set the price, clamping it into range.

        Returns True when the stored price differs from *amount* because
        of clamping.  Never raises for out-of-range values.
        """
        self.price, clamped = clamp_price(amount)
        return clamped

    def update_review_rate(self, rate: float) -> None:
        self.review_rate = rate

    # --- Display --------------------------------------------------------------

    def describe(self) -> ProductDescription:
        return ProductDescription(
            kind=self.kind,
            product_id=self.id,
            name=self.name,
            price=self.price,
            review_rate=self.review_rate,
            details=self.describe_body(),
        )


@dataclass(kw_only=True)
class AudioItem(Product):
    performer: PersonName = field(default_factory=PersonName)
    genre: Genre = Genre.POP

    @property
    def kind(self) -> str:
        return "Music"

    def describe_body(self) -> list[tuple[str, str]]:
        return [
            ("Singer Name", self.performer.full_name),
            ("Genre", self.genre.value),
        ]


@dataclass(kw_only=True)
class VideoItem(Product):
    director: PersonName = field(default_factory=PersonName)
    rating: FilmRating = FilmRating.NOT_RATED
    release_year: int = 0
    run_time_minutes: int = 0

    @property
    def kind(self) -> str:
        return "Movie"

    def is_new_release(self, year: int) -> bool:
        """True if the film came out in *year* or later."""
        return self.release_year >= year

    def describe_body(self) -> list[tuple[str, str]]:
        return [
            ("Release Year", str(self.release_year)),
            ("Film Rating", self.rating.value),
            ("Runtime", str(self.run_time_minutes)),
            ("Director Name", self.director.full_name),
        ]


@dataclass(kw_only=True)
class BookItem(Product, ABC):
    """Shared shape of every book; subclasses only pick the label."""

    author: PersonName = field(default_factory=PersonName)
    page_count: int = 0

    def describe_body(self) -> list[tuple[str, str]]:
        return [
            ("Author", self.author.full_name),
            ("Pages", str(self.page_count)),
        ]


@dataclass(kw_only=True)
class EBookItem(BookItem):

    @property
    def kind(self) -> str:
        return "E-Book"


@dataclass(kw_only=True)
class PaperBookItem(BookItem):

    @property
    def kind(self) -> str:
        return "Paper Book"
