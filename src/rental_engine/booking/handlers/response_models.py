from __future__ import annotations

from pydantic import BaseModel

from rental_engine.booking.domain.entity import Booking
from rental_engine.pricing.domain import PriceBreakdown


class PriceLineData(BaseModel):
    """料金明細 1 行のレスポンスモデル"""

    unit: str
    quantity: int
    unit_price: float
    subtotal: float


class QuoteData(BaseModel):
    """見積もりのレスポンスモデル"""

    whole_days: int
    remainder_hours: int
    lines: list[PriceLineData]
    total_amount: float
    currency_code: str
    status: str = "pending"


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: int
    tenant_id: int
    branch_id: int | None
    customer_id: int
    vehicle_id: int
    start_date: str
    end_date: str
    total_amount: float
    late_fee_day: float
    currency_code: str
    status: str
    notes: str | None
    created_at: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData


class QuoteResponse(BaseModel):
    """見積もりの成功レスポンスモデル"""

    status: str = "success"
    data: QuoteData


def to_quote_response(quote: PriceBreakdown) -> dict:
    """見積もり結果をレスポンス辞書に変換する"""
    return QuoteResponse(
        data=QuoteData(
            whole_days=quote.duration.whole_days,
            remainder_hours=quote.duration.remainder_hours,
            lines=[
                PriceLineData(
                    unit=line.unit.value,
                    quantity=line.quantity,
                    unit_price=float(line.unit_price.amount),
                    subtotal=float(line.subtotal.amount),
                )
                for line in quote.lines
            ],
            total_amount=float(quote.total.amount),
            currency_code=str(quote.total.currency),
        )
    ).model_dump()


def to_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=BookingData(
            booking_id=booking.id.value,
            tenant_id=booking.tenant_id.value,
            branch_id=booking.branch_id,
            customer_id=booking.customer_id,
            vehicle_id=booking.vehicle_id,
            start_date=booking.interval.start_at.isoformat(),
            end_date=booking.interval.end_at.isoformat(),
            total_amount=float(booking.total_amount.amount),
            late_fee_day=float(booking.late_fee_per_day.amount),
            currency_code=str(booking.currency),
            status=booking.status.value,
            notes=booking.notes,
            created_at=booking.created_at.isoformat(),
        )
    ).model_dump()
