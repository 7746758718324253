from datetime import datetime, timezone
from decimal import Decimal
from typing import NotRequired, TypedDict

from rental_engine.booking.domain.entity import Booking
from rental_engine.payment.domain.entity import Payment
from rental_engine.payment.domain.enum import PaymentMethod
from rental_engine.payment.domain.service import PaymentLedger, PaymentRequest
from rental_engine.payment.domain.value_object import PaymentId
from rental_engine.pricing.domain import LateFeeCalculator
from rental_engine.shared.domain import IsoDateTime, Money


class PaymentDetails(TypedDict):
    """決済の入力データ構造（TypedDict）"""

    amount: Decimal
    payment_method: str
    is_partial: bool
    partial_amount: Decimal
    late_fee: NotRequired[Decimal | None]
    split_details: NotRequired[str | None]
    payment_date: NotRequired[str | None]


class PaymentFactory:
    """決済ファクトリ

    - プリミティブ型から Value Object への変換（通貨は予約の通貨）
    - 延滞料の指定がなければ支払日時点で計算して固定する
    - 金額の導出は PaymentLedger に任せる
    """

    def __init__(
        self,
        ledger: PaymentLedger | None = None,
        late_fee_calculator: LateFeeCalculator | None = None,
    ) -> None:
        self._ledger = ledger or PaymentLedger()
        self._late_fee_calculator = late_fee_calculator or LateFeeCalculator()

    def create(
        self,
        payment_id: PaymentId,
        booking: Booking,
        customer_id: int,
        payment_details: PaymentDetails,
    ) -> Payment:
        """新規決済エンティティを生成する"""
        currency = booking.currency
        raw_payment_date = payment_details.get("payment_date")
        payment_date = (
            IsoDateTime.from_string(raw_payment_date).value
            if raw_payment_date
            else datetime.now(timezone.utc)
        )

        raw_late_fee = payment_details.get("late_fee")
        if raw_late_fee is None:
            late_fee = self._late_fee_calculator.calculate(
                booking.scheduled_end_at,
                booking.late_fee_per_day,
                evaluation_time=payment_date,
            )
        else:
            late_fee = Money(raw_late_fee, currency)

        request = PaymentRequest(
            amount=Money(payment_details["amount"], currency),
            method=PaymentMethod(payment_details["payment_method"]),
            late_fee=late_fee,
            is_partial=payment_details["is_partial"],
            partial_amount=Money(payment_details["partial_amount"], currency),
            split_details=payment_details.get("split_details"),
            payment_date=payment_date,
        )
        return self._ledger.record_payment(
            payment_id, booking, request, customer_id=customer_id
        )
