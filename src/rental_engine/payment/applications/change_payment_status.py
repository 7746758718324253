from rental_engine.payment.domain import Payment, PaymentId, PaymentRepository
from rental_engine.shared.domain import (
    PaymentStatus,
    ResourceNotFoundException,
    TenantId,
)
from rental_engine.shared.utils import get_logger

logger = get_logger(child=True)


class ChangePaymentStatusService:
    """決済ステータス変更のユースケース（オペレーター / 決済ゲートウェイからの確定）"""

    def __init__(self, repository: PaymentRepository) -> None:
        self._repository = repository

    def change_status(
        self, tenant_id: TenantId, payment_id: PaymentId, target: PaymentStatus
    ) -> Payment:
        payment = self._repository.find_by_id(payment_id)
        if payment is None or payment.tenant_id != tenant_id:
            raise ResourceNotFoundException(f"Payment not found: {payment_id}")

        expected_status = payment.status
        payment.change_status(target)
        self._repository.update(payment, expected_status=expected_status)

        for event in payment.flush_domain_events():
            logger.info(
                "Payment status changed",
                extra={
                    "payment_id": event.aggregate_id,
                    "booking_id": payment.booking_id.value,
                    "previous": event.previous,
                    "current": event.current,
                },
            )
        return payment
