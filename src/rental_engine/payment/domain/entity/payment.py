from datetime import datetime, timezone

from rental_engine.booking.domain.value_object import BookingId
from rental_engine.payment.domain.enum import PaymentMethod
from rental_engine.payment.domain.value_object import PaymentId
from rental_engine.shared.domain import (
    AggregateRoot,
    BookingStateMachine,
    Money,
    PaymentStatus,
    StatusChanged,
    TenantId,
)


class Payment(AggregateRoot[PaymentId]):
    """決済エンティティ（1 回の支払い）

    paid_amount / is_deposit / late_fee は作成時に確定した値をそのまま保持し、
    後から別の決済が追加されても再計算しない。
    """

    _state_machine = BookingStateMachine()

    def __init__(
        self,
        id: PaymentId,
        booking_id: BookingId,
        tenant_id: TenantId,
        customer_id: int,
        amount: Money,
        method: PaymentMethod,
        paid_amount: Money,
        late_fee: Money,
        is_partial: bool = False,
        partial_amount: Money | None = None,
        is_deposit: bool = False,
        status: PaymentStatus = PaymentStatus.PENDING,
        split_details: str | None = None,
        payment_date: datetime | None = None,
        created_at: datetime | None = None,
    ) -> None:
        super().__init__(id)
        self._booking_id = booking_id
        self._tenant_id = tenant_id
        self._customer_id = customer_id
        self._amount = amount
        self._method = method
        self._paid_amount = paid_amount
        self._late_fee = late_fee
        self._is_partial = is_partial
        self._partial_amount = partial_amount or Money.zero(amount.currency)
        self._is_deposit = is_deposit
        self._status = status
        self._split_details = split_details
        self._created_at = created_at or datetime.now(timezone.utc)
        self._payment_date = payment_date or self._created_at

    @property
    def booking_id(self) -> BookingId:
        return self._booking_id

    @property
    def tenant_id(self) -> TenantId:
        return self._tenant_id

    @property
    def customer_id(self) -> int:
        return self._customer_id

    @property
    def amount(self) -> Money:
        return self._amount

    @property
    def method(self) -> PaymentMethod:
        return self._method

    @property
    def paid_amount(self) -> Money:
        return self._paid_amount

    @property
    def late_fee(self) -> Money:
        return self._late_fee

    @property
    def is_partial(self) -> bool:
        return self._is_partial

    @property
    def partial_amount(self) -> Money:
        return self._partial_amount

    @property
    def is_deposit(self) -> bool:
        return self._is_deposit

    @property
    def status(self) -> PaymentStatus:
        return self._status

    @property
    def split_details(self) -> str | None:
        return self._split_details

    @property
    def payment_date(self) -> datetime:
        return self._payment_date

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def is_completed(self) -> bool:
        return self._status == PaymentStatus.COMPLETED

    def change_status(self, target: PaymentStatus) -> None:
        """遷移表に従ってステータスを変更する"""
        previous = self._status
        self._status = self._state_machine.transition_payment(previous, target)
        self.add_domain_event(
            StatusChanged(
                aggregate="payment",
                aggregate_id=self.id.value,
                previous=previous.value,
                current=self._status.value,
            )
        )

    def complete(self) -> None:
        """決済を完了する"""
        self.change_status(PaymentStatus.COMPLETED)

    def fail(self) -> None:
        """決済失敗として記録する"""
        self.change_status(PaymentStatus.FAILED)

    def refund(self) -> None:
        """完了済みの決済を払い戻す"""
        self.change_status(PaymentStatus.REFUNDED)
