from rental_engine.booking.domain import BookingId, BookingRepository
from rental_engine.payment.domain import (
    LedgerSummary,
    PaymentLedger,
    PaymentRepository,
)
from rental_engine.shared.domain import ResourceNotFoundException, TenantId


class GetBookingBalanceService:
    """予約の入金状況（残高・過払い）を返すユースケース"""

    def __init__(
        self,
        booking_repository: BookingRepository,
        payment_repository: PaymentRepository,
        ledger: PaymentLedger | None = None,
    ) -> None:
        self._booking_repository = booking_repository
        self._payment_repository = payment_repository
        self._ledger = ledger or PaymentLedger()

    def summarize(self, tenant_id: TenantId, booking_id: BookingId) -> LedgerSummary:
        booking = self._booking_repository.find_for_tenant(tenant_id, booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")
        payments = self._payment_repository.find_by_booking_id(booking_id)
        return self._ledger.summarize(booking, payments)
