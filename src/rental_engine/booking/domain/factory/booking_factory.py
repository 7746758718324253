from datetime import datetime
from typing import NotRequired, TypedDict

from rental_engine.booking.domain.entity import Booking
from rental_engine.booking.domain.value_object import BookingId
from rental_engine.pricing.applications import QuoteRentalService
from rental_engine.pricing.domain import RateCard, RentalInterval
from rental_engine.shared.domain import BookingStatus, TenantId


class BookingDetails(TypedDict):
    """予約リクエストの入力データ構造"""

    customer_id: int
    vehicle_id: int
    branch_id: int | None
    start_date: str
    end_date: str
    notes: NotRequired[str | None]


class BookingFactory:
    """予約エンティティのファクトリ

    - プリミティブ型から Value Object への変換
    - 料金表からの合計金額の計算（作成時に一度だけ）
    - 初期状態（PENDING）の設定
    """

    def __init__(self, quote_service: QuoteRentalService | None = None) -> None:
        self._quote_service = quote_service or QuoteRentalService()

    def create(
        self,
        booking_id: BookingId,
        tenant_id: TenantId,
        details: BookingDetails,
        rate_card: RateCard,
        created_at: datetime | None = None,
    ) -> Booking:
        """新規予約エンティティを生成する

        Raises:
            InvalidIntervalError: 終了日時が開始日時以前の場合
            MissingRateError: 料金表に適用できる区分がない場合
        """
        interval = RentalInterval.from_strings(details["start_date"], details["end_date"])
        quote = self._quote_service.quote(rate_card, interval)

        return Booking(
            id=booking_id,
            tenant_id=tenant_id,
            branch_id=details["branch_id"],
            customer_id=details["customer_id"],
            vehicle_id=details["vehicle_id"],
            interval=interval,
            total_amount=quote.total,
            late_fee_per_day=rate_card.late_fee(),
            status=BookingStatus.PENDING,
            notes=details.get("notes"),
            created_at=created_at,
        )
