"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
The normalization helpers at the bottom are pure: they return the
corrected value together with a flag, and leave it to the caller to
decide whether the correction is worth reporting.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from tinymart.domain.exceptions import ValidationError

CENT = Decimal("0.01")
MIN_PRICE = Decimal("0.01")
MAX_PRICE = Decimal("999.99")
PRICE_CEILING = Decimal("1000")

NO_NAME_PRODUCT = "!No Name Product!"


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal so that totals such as 16.50 + 22 + 13.75 add up
    exactly.  Currency is implied; the shop only ever deals in dollars.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __truediv__(self, count: int) -> Money:
        """Split the amount evenly, rounded half-up to whole cents."""
        if not isinstance(count, int) or isinstance(count, bool):
            raise TypeError(f"Can only divide Money by int, got {type(count).__name__}")
        if count <= 0:
            raise ValidationError("Cannot divide money by a non-positive count")
        return Money((self.amount / count).quantize(CENT, rounding=ROUND_HALF_UP))

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(to_decimal(amount))


@dataclass(frozen=True)
class PersonName:
    """First/last name pair for performers, directors, authors and owners.

    Either part may be empty, e.g. ``PersonName("Madonna", "")``.
    """

    first_name: str = ""
    last_name: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self) -> str:
        return self.full_name

    @staticmethod
    def parse(raw: str) -> PersonName:
        """Split ``"John Smith"`` on the first space."""
        first, _, last = raw.strip().partition(" ")
        return PersonName(first, last.strip())


# ---------------------------------------------------------------------------
# Normalization helpers
# ---------------------------------------------------------------------------


def to_decimal(amount: str | float | int | Decimal) -> Decimal:
    """Coerce a user-supplied amount to a finite Decimal."""
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid money amount: {amount!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"Invalid money amount: {amount!r}")
    return value


def clamp_price(amount: str | float | int | Decimal) -> tuple[Money, bool]:
    """Force a price into the sellable range.

    Returns ``(price, was_clamped)``.  Amounts strictly between 0 and
    1000 are kept exactly; anything at or below zero becomes $0.01 and
    anything at or above 1000 becomes $999.99.
    """
    value = to_decimal(amount)
    if Decimal("0") < value < PRICE_CEILING:
        return Money(value), False
    if value <= Decimal("0"):
        return Money(MIN_PRICE), True
    return Money(MAX_PRICE), True


def normalize_name(name: str | None) -> tuple[str, bool]:
    """Return ``(name, was_defaulted)``; blank names get the sentinel."""
    if name and name.strip():
        return name, False
    return NO_NAME_PRODUCT, True
