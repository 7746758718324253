from decimal import Decimal

import pytest

from rental_engine.pricing.domain import RateCard, RateUnit
from rental_engine.shared.domain import Currency, Money, NegativeAmountError


class TestRateCard:
    def test_zero_price_is_unavailable(self):
        card = RateCard(price_per_hour=Decimal("0"), price_per_day=Decimal("100"))
        assert card.price_for(RateUnit.HOUR) is None
        assert card.price_for(RateUnit.DAY) == Decimal("100")

    def test_missing_price_is_unavailable(self):
        card = RateCard(price_per_day=Decimal("100"))
        assert not card.has(RateUnit.WEEK)

    def test_negative_price_raises_error(self):
        with pytest.raises(NegativeAmountError, match="price_per_week"):
            RateCard(price_per_week=Decimal("-1"))

    def test_numbers_are_converted_to_decimal(self):
        card = RateCard(price_per_day=99.9)
        assert card.price_per_day == Decimal("99.9")

    def test_has_daily_tier(self):
        assert not RateCard(price_per_hour=Decimal("15")).has_daily_tier()
        assert RateCard(price_per_month=Decimal("900")).has_daily_tier()

    def test_late_fee(self):
        card = RateCard(late_fee_per_day=Decimal("20"), currency=Currency.usd())
        assert card.late_fee() == Money(Decimal("20"), Currency.usd())

    def test_unit_days(self):
        assert [unit.days for unit in RateUnit] == [365, 30, 7, 1, 0]
