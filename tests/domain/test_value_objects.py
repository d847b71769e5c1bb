"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from stockroom.domain.exceptions import ValidationError
from stockroom.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("29.99"))
        assert m.amount == Decimal("29.99")

    def test_of_factory_from_string(self):
        assert Money.of("29.99").amount == Decimal("29.99")

    def test_of_factory_from_float(self):
        assert Money.of(29.99).amount == Decimal("29.99")

    def test_of_factory_strips_whitespace(self):
        assert Money.of(" 5 ").amount == Decimal("5")

    def test_zero_allowed(self):
        assert Money.of("0").amount == Decimal("0")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    @pytest.mark.parametrize("raw", ["abc", "", "12,50", True])
    def test_non_numeric_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(raw)

    @pytest.mark.parametrize("raw", ["NaN", "Infinity", "-inf"])
    def test_non_finite_rejected(self, raw):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of(raw)

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("29.99")) == "$29.99"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_of_parses_digits(self):
        assert Quantity.of("12").value == 12
        assert Quantity.of(" 3 ").value == 3

    def test_of_accepts_int(self):
        assert Quantity.of(7).value == 7

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_string_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity.of("-3")

    @pytest.mark.parametrize("raw", ["abc", "5.5", "", "1e3", "+-5", "-+3", "\u00b2", "\u0663"])
    def test_non_integer_text_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid quantity"):
            Quantity.of(raw)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_str(self):
        assert str(Quantity(7)) == "7"
