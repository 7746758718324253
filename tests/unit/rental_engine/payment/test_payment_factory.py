from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from rental_engine.payment.domain.enum import PaymentMethod
from rental_engine.payment.domain.factory import PaymentDetails, PaymentFactory
from rental_engine.payment.domain.value_object import PaymentId
from rental_engine.pricing.domain import LateFeeCalculator
from rental_engine.shared.domain import InvalidIntervalError, NegativeAmountError
from tests.unit.helpers import ils, utc


def _details(**overrides) -> PaymentDetails:
    details: PaymentDetails = {
        "amount": Decimal("220"),
        "payment_method": "card",
        "is_partial": False,
        "partial_amount": Decimal("0"),
    }
    details.update(overrides)  # type: ignore[typeddict-item]
    return details


class TestPaymentFactory:
    def test_late_fee_is_calculated_at_payment_date(self, create_booking):
        # 予定終了 2024-01-10 10:00、日額 20、3 日後に支払い
        booking = create_booking()
        details = _details(
            is_partial=True,
            partial_amount=Decimal("100"),
            payment_date="2024-01-13T10:00:00Z",
        )

        payment = PaymentFactory().create(PaymentId(value=1), booking, 100, details)

        assert payment.late_fee == ils("60")
        assert payment.paid_amount == ils("160")
        assert payment.is_deposit
        assert payment.method == PaymentMethod.CARD
        assert payment.payment_date == utc(2024, 1, 13, 10)

    def test_explicit_late_fee_is_used(self, create_booking):
        details = _details(late_fee=Decimal("5"), payment_date="2024-01-20T10:00:00Z")

        payment = PaymentFactory().create(PaymentId(value=1), create_booking(), 100, details)

        assert payment.late_fee == ils("5")
        assert payment.paid_amount == ils("225")

    def test_payment_date_defaults_to_now(self, create_booking):
        calculator = MagicMock(spec=LateFeeCalculator)
        calculator.calculate.return_value = ils("0")
        factory = PaymentFactory(late_fee_calculator=calculator)

        payment = factory.create(PaymentId(value=1), create_booking(), 100, _details())

        evaluation_time = calculator.calculate.call_args.kwargs["evaluation_time"]
        assert evaluation_time == payment.payment_date
        assert evaluation_time.tzinfo is not None

    def test_split_details_are_kept(self, create_booking):
        details = _details(late_fee=Decimal("0"), split_details='{"card": 120, "cash": 100}')

        payment = PaymentFactory().create(PaymentId(value=1), create_booking(), 100, details)

        assert payment.split_details == '{"card": 120, "cash": 100}'

    def test_zero_amount_raises_error(self, create_booking):
        with pytest.raises(NegativeAmountError):
            PaymentFactory().create(
                PaymentId(value=1),
                create_booking(),
                100,
                _details(amount=Decimal("0"), late_fee=Decimal("0")),
            )

    def test_invalid_payment_date_raises_error(self, create_booking):
        with pytest.raises(InvalidIntervalError):
            PaymentFactory().create(
                PaymentId(value=1), create_booking(), 100, _details(payment_date="yesterday")
            )
