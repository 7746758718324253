from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable

from rental_engine.booking.domain.entity import Booking
from rental_engine.payment.domain.entity import Payment
from rental_engine.payment.domain.enum import PaymentMethod
from rental_engine.payment.domain.value_object import PaymentId
from rental_engine.shared.domain import Money, NegativeAmountError, PaymentStatus
from rental_engine.shared.domain.exception import BusinessRuleViolationException


@dataclass(frozen=True)
class PaymentRequest:
    """1 回の支払いの入力（Value Object に変換済み）"""

    amount: Money
    method: PaymentMethod
    late_fee: Money
    is_partial: bool = False
    partial_amount: Money | None = None
    split_details: str | None = None
    payment_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if self.amount.is_zero():
            raise NegativeAmountError("Payment amount must be greater than zero")
        if self.partial_amount is None:
            object.__setattr__(self, "partial_amount", Money.zero(self.amount.currency))

    @property
    def principal(self) -> Money:
        """延滞料を除いた今回の支払い額"""
        if self.is_partial and not self.partial_amount.is_zero():
            return self.partial_amount
        return self.amount


@dataclass(frozen=True)
class LedgerSummary:
    """予約単位の入金状況"""

    total_due: Money
    total_paid: Money
    total_late_fees: Money
    balance: Decimal
    completed_count: int

    @property
    def outstanding(self) -> Money:
        """未払い残高（表示用、0 未満にはしない）"""
        return Money(max(self.balance, Decimal("0")), self.total_due.currency)

    @property
    def overpaid(self) -> Money:
        """過払い額"""
        return Money(max(-self.balance, Decimal("0")), self.total_due.currency)

    @property
    def is_settled(self) -> bool:
        return self.balance <= 0


class PaymentLedger:
    """予約に対する支払いを記録し、入金残高を計算するドメインサービス

    - paid_amount = 延滞料 + (部分払いなら partial_amount、そうでなければ amount)
    - is_deposit は呼び出し側から受け取らず、常に導出する
    - 予約のステータスは変更しない（部分払い・デポジットで自動確定させないため）
    - 過払いは拒否しない。balance が負になることで検知できる
    """

    def record_payment(
        self,
        payment_id: PaymentId,
        booking: Booking,
        request: PaymentRequest,
        customer_id: int | None = None,
        created_at: datetime | None = None,
    ) -> Payment:
        """支払いを計算して PENDING の決済を作成する"""
        for money in (request.amount, request.partial_amount, request.late_fee):
            if money.currency != booking.currency:
                raise BusinessRuleViolationException(
                    f"Payment currency {money.currency} does not match "
                    f"booking currency {booking.currency}"
                )

        paid_amount = request.late_fee.add(request.principal)
        is_deposit = request.is_partial or paid_amount.is_less_than(booking.total_amount)

        return Payment(
            id=payment_id,
            booking_id=booking.id,
            tenant_id=booking.tenant_id,
            customer_id=customer_id if customer_id is not None else booking.customer_id,
            amount=request.amount,
            method=request.method,
            paid_amount=paid_amount,
            late_fee=request.late_fee,
            is_partial=request.is_partial,
            partial_amount=request.partial_amount,
            is_deposit=is_deposit,
            status=PaymentStatus.PENDING,
            split_details=request.split_details,
            payment_date=request.payment_date,
            created_at=created_at,
        )

    def balance(self, booking: Booking, payments: Iterable[Payment]) -> Decimal:
        """総額 + 完了済み延滞料 - 完了済み入金額（負なら過払い）"""
        return self.summarize(booking, payments).balance

    def outstanding_balance(self, booking: Booking, payments: Iterable[Payment]) -> Money:
        """未払い残高（0 で下限を切る）"""
        return self.summarize(booking, payments).outstanding

    def summarize(self, booking: Booking, payments: Iterable[Payment]) -> LedgerSummary:
        currency = booking.currency
        total_paid = Money.zero(currency)
        total_late_fees = Money.zero(currency)
        completed_count = 0

        for payment in payments:
            # 他の予約の決済や未完了・払い戻し済みの決済は数えない
            if payment.booking_id != booking.id or not payment.is_completed():
                continue
            total_paid = total_paid.add(payment.paid_amount)
            total_late_fees = total_late_fees.add(payment.late_fee)
            completed_count += 1

        balance = (
            booking.total_amount.amount + total_late_fees.amount - total_paid.amount
        )
        return LedgerSummary(
            total_due=booking.total_amount.add(total_late_fees),
            total_paid=total_paid,
            total_late_fees=total_late_fees,
            balance=balance,
            completed_count=completed_count,
        )
