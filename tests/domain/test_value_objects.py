"""Unit tests for domain value objects."""

import pytest

from wds.domain.exceptions import ValidationError
from wds.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(25000)
        assert m.amount == 25000
        assert m.currency == "IDR"

    def test_of_factory_from_string(self):
        assert Money.of("25000") == Money(25000)

    def test_of_factory_accepts_grouped_rupiah(self):
        assert Money.of("25.000") == Money(25000)

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Money(10.5)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(-1)

    def test_addition(self):
        assert Money(25000) + Money(5000) == Money(30000)

    def test_multiplication_by_int(self):
        assert Money(1000) * 3 == Money(3000)

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money(1000) * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(10, "IDR") + Money(5, "USD")

    def test_str_formatting(self):
        assert str(Money(25000)) == "Rp 25.000"
        assert str(Money(1250000)) == "Rp 1.250.000"
        assert str(Money(0)) == "Rp 0"

    def test_equality_is_by_value(self):
        assert Money(10) == Money(10)
        assert Money(10) != Money(10, "USD")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)
