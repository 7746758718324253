from __future__ import annotations

from pydantic import BaseModel

from rental_engine.booking.domain.value_object import BookingId
from rental_engine.payment.domain.entity.payment import Payment
from rental_engine.payment.domain.service import LedgerSummary


class PaymentData(BaseModel):
    """決済データのレスポンスモデル"""

    payment_id: int
    booking_id: int
    tenant_id: int
    customer_id: int
    amount: float
    payment_method: str
    is_partial: bool
    partial_amount: float
    is_deposit: bool
    late_fee: float
    paid_amount: float
    currency_code: str
    status: str
    split_details: str | None
    payment_date: str
    created_at: str


class BalanceData(BaseModel):
    """予約の入金状況のレスポンスモデル"""

    booking_id: int
    currency_code: str
    total_due: float
    total_paid: float
    total_late_fees: float
    outstanding: float
    overpaid: float
    completed_payments: int
    is_settled: bool


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: PaymentData


class BalanceResponse(BaseModel):
    """入金状況の成功レスポンスモデル"""

    status: str = "success"
    data: BalanceData


def to_response(payment: Payment) -> dict:
    """Payment エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=PaymentData(
            payment_id=payment.id.value,
            booking_id=payment.booking_id.value,
            tenant_id=payment.tenant_id.value,
            customer_id=payment.customer_id,
            amount=float(payment.amount.amount),
            payment_method=payment.method.value,
            is_partial=payment.is_partial,
            partial_amount=float(payment.partial_amount.amount),
            is_deposit=payment.is_deposit,
            late_fee=float(payment.late_fee.amount),
            paid_amount=float(payment.paid_amount.amount),
            currency_code=str(payment.amount.currency),
            status=payment.status.value,
            split_details=payment.split_details,
            payment_date=payment.payment_date.isoformat(),
            created_at=payment.created_at.isoformat(),
        )
    ).model_dump()


def to_balance_response(booking_id: BookingId, summary: LedgerSummary) -> dict:
    """入金状況をレスポンス辞書に変換する"""
    return BalanceResponse(
        data=BalanceData(
            booking_id=booking_id.value,
            currency_code=str(summary.total_due.currency),
            total_due=float(summary.total_due.amount),
            total_paid=float(summary.total_paid.amount),
            total_late_fees=float(summary.total_late_fees.amount),
            outstanding=float(summary.outstanding.amount),
            overpaid=float(summary.overpaid.amount),
            completed_payments=summary.completed_count,
            is_settled=summary.is_settled,
        )
    ).model_dump()
