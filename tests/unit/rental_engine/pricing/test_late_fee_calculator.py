from datetime import datetime, timedelta

import pytest

from rental_engine.pricing.domain import LateFeeCalculator
from tests.unit.helpers import ils, utc

SCHEDULED_END = utc(2024, 1, 10, 10)


class TestLateFeeCalculator:
    @pytest.fixture
    def calculator(self):
        return LateFeeCalculator()

    def test_three_days_late(self, calculator):
        fee = calculator.calculate(SCHEDULED_END, ils("20"), utc(2024, 1, 13, 10))
        assert fee == ils("60")

    def test_partial_day_is_not_charged(self, calculator):
        fee = calculator.calculate(SCHEDULED_END, ils("20"), utc(2024, 1, 13, 9, 59))
        assert fee == ils("40")

    @pytest.mark.parametrize(
        "evaluation_time",
        [
            SCHEDULED_END,
            SCHEDULED_END - timedelta(seconds=1),
            SCHEDULED_END - timedelta(days=5),
            SCHEDULED_END + timedelta(hours=23, minutes=59),
        ],
    )
    def test_no_fee_before_a_full_day_has_passed(self, calculator, evaluation_time):
        assert calculator.calculate(SCHEDULED_END, ils("20"), evaluation_time) == ils("0")

    def test_naive_evaluation_time_is_treated_as_utc(self, calculator):
        assert calculator.days_late(SCHEDULED_END, datetime(2024, 1, 12, 10)) == 2

    def test_uses_clock_when_evaluation_time_is_omitted(self):
        calculator = LateFeeCalculator(clock=lambda: utc(2024, 1, 15, 12))

        assert calculator.days_late(SCHEDULED_END) == 5
        assert calculator.calculate(SCHEDULED_END, ils("20")) == ils("100")

    def test_fee_is_rounded(self, calculator):
        fee = calculator.calculate(SCHEDULED_END, ils("10.005"), utc(2024, 1, 11, 10))
        assert fee.amount == ils("10.01").amount
