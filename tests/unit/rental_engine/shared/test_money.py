from decimal import Decimal

import pytest

from rental_engine.shared.domain import Currency, Money, NegativeAmountError


class TestMoney:
    def test_negative_amount_raises_error(self):
        with pytest.raises(NegativeAmountError):
            Money(Decimal("-1"), Currency.ils())

    def test_negative_amount_is_also_value_error(self):
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"), Currency.ils())

    def test_non_decimal_amount_is_converted(self):
        money = Money(12.5, Currency.ils())
        assert money.amount == Decimal("12.5")

    def test_add(self):
        total = Money.of(100, "ILS").add(Money.of("20.50", "ILS"))
        assert total == Money.of("120.50", "ILS")

    def test_add_different_currency_raises_error(self):
        with pytest.raises(ValueError, match="Currency mismatch"):
            Money.of(1, "ILS").add(Money.of(1, "USD"))

    def test_multiply(self):
        assert Money.of(20, "ILS").multiply(3) == Money.of(60, "ILS")

    def test_rounded_uses_currency_minor_units(self):
        assert Money.of("10.005", "ILS").rounded().amount == Decimal("10.01")
        assert Money.of("10.0005", "JOD").rounded().amount == Decimal("10.001")
        assert Money.of("10.5", "JPY").rounded().amount == Decimal("11")

    def test_is_less_than(self):
        assert Money.of(160, "ILS").is_less_than(Money.of(220, "ILS"))
        assert not Money.of(220, "ILS").is_less_than(Money.of(220, "ILS"))

    def test_zero(self):
        assert Money.zero(Currency.usd()).is_zero()


class TestCurrency:
    def test_code_is_normalized(self):
        assert Currency("ils").code == "ILS"

    def test_unsupported_currency_raises_error(self):
        with pytest.raises(ValueError, match="Unsupported currency"):
            Currency("XYZ")

    def test_default_currency_is_ils(self):
        assert Currency.default() == Currency.ils()

    def test_minor_units(self):
        assert Currency("USD").minor_units == 2
        assert Currency("JOD").minor_units == 3
        assert Currency("JPY").minor_units == 0
