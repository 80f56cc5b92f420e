"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from marketplace.domain.exceptions import InvalidArgumentError
from marketplace.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "UAH"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(45999).amount == Decimal("45999")

    def test_of_passes_money_through(self):
        m = Money.of("5")
        assert Money.of(m) is m

    def test_of_rejects_garbage(self):
        with pytest.raises(InvalidArgumentError, match="Invalid money amount"):
            Money.of("abc")

    def test_zero_is_allowed(self):
        assert Money.zero().amount == Decimal("0")

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidArgumentError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(InvalidArgumentError, match="Cannot combine"):
            Money(Decimal("10"), "UAH") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("45999")) == "45999.00 UAH"
        assert str(Money.of("9.5")) == "9.50 UAH"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(InvalidArgumentError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(InvalidArgumentError, match="must be positive"):
            Quantity(-3)

    def test_plus_returns_new_quantity(self):
        q = Quantity(2)
        assert q.plus(3) == Quantity(5)
        assert q.value == 2

    def test_str(self):
        assert str(Quantity(7)) == "7"
