"""Cart aggregate — the core of the domain.

The Cart owns an ordered, bounded list of products for one owner.
It is either open (room for more) or full; those are its only states.
Rejected operations return False and tell the notifier why — a full
or empty cart is an everyday situation, not an error.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from tinymart.domain.exceptions import ValidationError
from tinymart.domain.model.product import Product, ProductDescription
from tinymart.domain.model.value_objects import Money, PersonName
from tinymart.domain.notifier import Notifier

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
CART_CAPACITY = 7


@dataclass(frozen=True)
class CartReport:
    """Snapshot of a cart's contents and purchase summary."""

    owner_name: str
    items: list[ProductDescription]
    total_count: int
    total_amount: Money
    average_cost: Money


@dataclass
class Cart:
    """Aggregate root for a shopping cart.

    Invariants:
    - ``len(items)`` never exceeds ``CART_CAPACITY``
    - items keep their insertion order, including after removals
    """

    owner: PersonName
    notifier: Notifier = field(repr=False, compare=False)
    items: list[Product] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.items) > CART_CAPACITY:
            raise ValidationError(
                f"Maximum {CART_CAPACITY} items per cart, got {len(self.items)}"
            )
        self.items = list(self.items)

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product) -> bool:
        """Append *product*; returns False if the cart is already full."""
        if self.is_full:
            self.notifier.info("Cart is full. Cannot add more items.")
            return False
        self.items.append(product)
        return True

    def remove_item(self, product_id: int) -> bool:
        """Remove the product with *product_id*; returns False if absent."""
        if self.is_empty:
            self.notifier.info("Cart is empty. No items to remove.")
            return False

        index = self._find_index(product_id)
        if index is None:
            self.notifier.info(f"Product with ID {product_id} not found in cart.")
            return False

        del self.items[index]
        return True

    # --- Queries --------------------------------------------------------------

    def generate_report(self) -> CartReport:
        """Summarize the cart and hand the result to the notifier.

        Reading only — the cart is not modified.
        """
        descriptions: list[ProductDescription] = []
        total = Money.zero()
        for item in self.items:
            descriptions.append(item.describe())
            total = total + item.price

        count = self.item_count
        average = total / count if count > 0 else Money.zero()

        report = CartReport(
            owner_name=self.owner.full_name,
            items=descriptions,
            total_count=count,
            total_amount=total,
            average_cost=average,
        )
        self.notifier.report(report)
        return report

    # --- Computed properties --------------------------------------------------

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def is_full(self) -> bool:
        return self.item_count >= CART_CAPACITY

    @property
    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return self.item_count

    def __iter__(self) -> Iterator[Product]:
        return iter(self.items)

    # --- Internal helpers -----------------------------------------------------

    def _find_index(self, product_id: int) -> int | None:
        for i, item in enumerate(self.items):
            if item.id == product_id:
                return i
        return None
