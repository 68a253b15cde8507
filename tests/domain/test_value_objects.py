"""Unit tests for domain value objects and normalization helpers."""

from decimal import Decimal

import pytest

from tinymart.domain.exceptions import ValidationError
from tinymart.domain.model.value_objects import (
    NO_NAME_PRODUCT,
    Money,
    PersonName,
    clamp_price,
    normalize_name,
)


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float(self):
        assert Money.of(16.5).amount == Decimal("16.5")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(1.5)

    def test_addition_is_exact(self):
        total = Money.of("16.50") + Money.of("22") + Money.of("13.75")
        assert total == Money.of("52.25")

    def test_division_rounds_half_up_to_cents(self):
        assert (Money.of("82.55") / 5) == Money.of("16.51")
        assert (Money.of("0.05") / 2) == Money.of("0.03")

    def test_division_by_zero_rejected(self):
        with pytest.raises(ValidationError, match="non-positive"):
            Money.of("10") / 0

    def test_division_by_non_int_rejected(self):
        with pytest.raises(TypeError):
            Money.of("10") / 2.5

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("8.3")) == "$8.30"

    def test_zero(self):
        assert Money.zero() == Money.of("0")


# ── PersonName ───────────────────────────────────────────────────────────────


class TestPersonName:

    def test_full_name(self):
        assert PersonName("Michael", "Jackson").full_name == "Michael Jackson"

    def test_full_name_trims_missing_last_name(self):
        assert PersonName("Madonna", "").full_name == "Madonna"

    def test_full_name_trims_missing_first_name(self):
        assert PersonName("", "Tolkien").full_name == "Tolkien"

    def test_empty(self):
        assert PersonName().full_name == ""

    def test_parse(self):
        assert PersonName.parse("  John Smith ") == PersonName("John", "Smith")
        assert PersonName.parse("Cher") == PersonName("Cher", "")


# ── clamp_price ──────────────────────────────────────────────────────────────


class TestClampPrice:

    @pytest.mark.parametrize("amount", ["0", "-0.01", "-500", 0, -1.5])
    def test_at_or_below_zero_becomes_one_cent(self, amount):
        price, clamped = clamp_price(amount)
        assert price == Money.of("0.01")
        assert clamped is True

    @pytest.mark.parametrize("amount", ["1000", "1000.00", "5000", 1e6])
    def test_at_or_above_thousand_becomes_max(self, amount):
        price, clamped = clamp_price(amount)
        assert price == Money.of("999.99")
        assert clamped is True

    @pytest.mark.parametrize("amount", ["0.01", "0.001", "16.50", "999.99", "999.999"])
    def test_in_range_kept_exactly(self, amount):
        price, clamped = clamp_price(amount)
        assert price.amount == Decimal(amount)
        assert clamped is False

    def test_unparsable_rejected(self):
        with pytest.raises(ValidationError):
            clamp_price("twelve")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            clamp_price("NaN")


# ── normalize_name ───────────────────────────────────────────────────────────


class TestNormalizeName:

    @pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
    def test_blank_names_get_sentinel(self, name):
        assert normalize_name(name) == (NO_NAME_PRODUCT, True)

    def test_sentinel_text(self):
        assert NO_NAME_PRODUCT == "!No Name Product!"

    def test_real_name_kept(self):
        assert normalize_name("The Hobbit") == ("The Hobbit", False)
