"""Sample catalog used by the CLI.

Products are built in a fixed order, so a fresh factory always gives
them the same ids:

    1 Yesterday              5 Star Wars
    2 Like a Prayer          6 The old Man and the Sea
    3 We are the World       7 The Hobbit
    4 Sound of Music         8 Harry Potter
"""

from __future__ import annotations

from tinymart.domain.model.product import FilmRating, Genre, Product
from tinymart.domain.model.value_objects import PersonName
from tinymart.domain.service.product_factory import ProductFactory

# Reference scenario: fill the cart, try one more, then take two back out.
DEMO_CART_IDS = (1, 4, 3, 8, 6, 5, 2)
DEMO_OVERFLOW_ID = 7
DEMO_REMOVED_IDS = (8, 2)


def build_sample_catalog(factory: ProductFactory) -> list[Product]:
    return [
        factory.music(
            "Yesterday", "16.50", PersonName("Beatles", ""),
            genre=Genre.POP, review_rate=9.8,
        ),
        factory.music(
            "Like a Prayer", "14.99", PersonName("Madonna", ""),
            genre=Genre.POP, review_rate=8.9,
        ),
        factory.music(
            "We are the World", "13.75", PersonName("Michael", "Jackson"),
            genre=Genre.COUNTRY, review_rate=9.1,
        ),
        factory.movie(
            "Sound of Music", "22", PersonName("Robert", "Wise"), 1965, 175,
            rating=FilmRating.G, review_rate=9.2,
        ),
        factory.movie(
            "Star Wars", "22", PersonName("George", "Lucas"), 1977, 120,
            rating=FilmRating.PG, review_rate=8.5,
        ),
        factory.ebook(
            "The old Man and the Sea", "8.30", PersonName("Ernest", "Hemmingway"), 127,
            review_rate=9.5,
        ),
        factory.paper_book(
            "The Hobbit", "12.99", PersonName("J.R.R.", "Tolkien"), 320,
            review_rate=9.7,
        ),
        factory.paper_book(
            "Harry Potter", "24.99", PersonName("J.K.", "Rowling"), 450,
            review_rate=9.8,
        ),
    ]
