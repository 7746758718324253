from rental_engine.booking.domain import BookingId, BookingRepository
from rental_engine.payment.domain import (
    Payment,
    PaymentDetails,
    PaymentFactory,
    PaymentRepository,
)
from rental_engine.shared.domain import ResourceNotFoundException, TenantId
from rental_engine.shared.utils import get_logger

logger = get_logger(child=True)


class RecordPaymentService:
    """決済登録のユースケース

    予約はテナントと顧客の両方が一致する場合のみ対象とする。
    登録した決済は PENDING のままで、予約のステータスも変えない。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        payment_repository: PaymentRepository,
        factory: PaymentFactory,
    ) -> None:
        self._booking_repository = booking_repository
        self._payment_repository = payment_repository
        self._factory = factory

    def record(
        self,
        tenant_id: TenantId,
        customer_id: int,
        booking_id: BookingId,
        payment_details: PaymentDetails,
    ) -> Payment:
        booking = self._booking_repository.find_for_tenant(
            tenant_id, booking_id, customer_id=customer_id
        )
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        payment_id = self._payment_repository.next_identity()
        payment = self._factory.create(payment_id, booking, customer_id, payment_details)
        self._payment_repository.save(payment)

        logger.info(
            "Payment recorded",
            extra={
                "payment_id": payment.id.value,
                "booking_id": booking_id.value,
                "tenant_id": tenant_id.value,
                "paid_amount": str(payment.paid_amount.amount),
                "late_fee": str(payment.late_fee.amount),
                "is_deposit": payment.is_deposit,
            },
        )
        return payment
