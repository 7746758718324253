from rental_engine.booking.domain import (
    Booking,
    BookingDetails,
    BookingFactory,
    BookingRepository,
)
from rental_engine.pricing.domain import RateCard
from rental_engine.shared.domain import TenantId
from rental_engine.shared.utils import get_logger

logger = get_logger(child=True)


class CreateBookingService:
    """予約作成のユースケース"""

    def __init__(self, repository: BookingRepository, factory: BookingFactory) -> None:
        self._repository = repository
        self._factory = factory

    def create(
        self, tenant_id: TenantId, details: BookingDetails, rate_card: RateCard
    ) -> Booking:
        """料金を計算して PENDING の予約を作成する"""
        booking_id = self._repository.next_identity()
        booking: Booking = self._factory.create(booking_id, tenant_id, details, rate_card)
        self._repository.save(booking)

        logger.info(
            "Booking created",
            extra={
                "booking_id": booking.id.value,
                "tenant_id": tenant_id.value,
                "total_amount": str(booking.total_amount.amount),
                "currency": str(booking.currency),
            },
        )
        return booking
