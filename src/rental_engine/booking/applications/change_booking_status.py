from rental_engine.booking.domain import Booking, BookingId, BookingRepository
from rental_engine.shared.domain import (
    BookingStatus,
    ResourceNotFoundException,
    TenantId,
)
from rental_engine.shared.utils import get_logger

logger = get_logger(child=True)


class ChangeBookingStatusService:
    """予約ステータス変更のユースケース

    決済の登録では予約を自動で確定しないため、確定・完了・キャンセルは
    オペレーターからの明示的な操作としてここを通る。
    """

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def change_status(
        self, tenant_id: TenantId, booking_id: BookingId, target: BookingStatus
    ) -> Booking:
        booking = self._repository.find_for_tenant(tenant_id, booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        expected_status = booking.status
        booking.change_status(target)
        self._repository.update(booking, expected_status=expected_status)

        for event in booking.flush_domain_events():
            logger.info(
                "Booking status changed",
                extra={
                    "booking_id": event.aggregate_id,
                    "tenant_id": tenant_id.value,
                    "previous": event.previous,
                    "current": event.current,
                },
            )
        return booking
