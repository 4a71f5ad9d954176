"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from repuestos.domain.exceptions import ValidationError
from repuestos.domain.model.value_objects import Money, Percentage, Quantity, round_money


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_non_finite_amount_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money(Decimal("NaN"))

    def test_str_rounds_to_cents(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("26.973")) == "$26.97"
        assert str(Money.of("0.125")) == "$0.13"


class TestRoundMoney:

    def test_half_up(self):
        assert round_money(Decimal("2.345")) == Decimal("2.35")
        assert round_money(Decimal("26.973")) == Decimal("26.97")


# ── Quantity / Percentage ────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    @pytest.mark.parametrize("value", [0, -3])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(value)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="integer"):
            Quantity(True)


class TestPercentage:

    def test_bounds_inclusive(self):
        assert Percentage(Decimal("0")).value == Decimal("0")
        assert Percentage(Decimal("100")).value == Decimal("100")

    @pytest.mark.parametrize("value", ["-0.01", "100.5"])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            Percentage(Decimal(value))
