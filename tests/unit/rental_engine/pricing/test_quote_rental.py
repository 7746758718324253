from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from rental_engine.pricing.applications import QuoteRentalService
from rental_engine.pricing.domain import RateCard, RentalDuration, RentalInterval
from rental_engine.shared.domain import MissingRateError
from tests.unit.helpers import ils, utc


class TestQuoteRentalService:
    def test_quote_thirty_hours(self, rate_card):
        service = QuoteRentalService()
        interval = RentalInterval(start_at=utc(2024, 1, 1, 10), end_at=utc(2024, 1, 2, 16))

        breakdown = service.quote(rate_card, interval)

        assert breakdown.duration == RentalDuration(whole_days=1, remainder_hours=6)
        assert breakdown.total == ils("220")

    def test_remainder_rounded_up_to_a_day_is_priced_as_a_day(self, rate_card):
        service = QuoteRentalService()
        interval = RentalInterval(
            start_at=utc(2024, 1, 1, 10), end_at=utc(2024, 1, 3, 9, 30)
        )

        breakdown = service.quote(rate_card, interval)

        assert breakdown.duration == RentalDuration(whole_days=2, remainder_hours=0)
        assert breakdown.total == ils("200")

    def test_missing_rate_propagates(self):
        service = QuoteRentalService()
        interval = RentalInterval(start_at=utc(2024, 1, 1, 10), end_at=utc(2024, 1, 1, 12))

        with pytest.raises(MissingRateError):
            service.quote(RateCard(price_per_day=Decimal("100")), interval)

    def test_uses_injected_services(self, rate_card):
        decomposer = MagicMock()
        calculator = MagicMock()
        duration = RentalDuration(whole_days=1, remainder_hours=0)
        decomposer.decompose.return_value = duration
        service = QuoteRentalService(decomposer=decomposer, calculator=calculator)
        interval = RentalInterval(start_at=utc(2024, 1, 1), end_at=utc(2024, 1, 2))

        result = service.quote(rate_card, interval)

        decomposer.decompose.assert_called_once_with(interval)
        calculator.breakdown.assert_called_once_with(rate_card, duration)
        assert result is calculator.breakdown.return_value
