from datetime import datetime, timezone

from rental_engine.booking.domain.value_object import BookingId
from rental_engine.pricing.domain import RentalInterval
from rental_engine.shared.domain import (
    AggregateRoot,
    BookingStateMachine,
    BookingStatus,
    Currency,
    Money,
    StatusChanged,
    TenantId,
)
from rental_engine.shared.domain.exception import BusinessRuleViolationException


class Booking(AggregateRoot[BookingId]):
    """レンタル予約

    total_amount は作成時に一度だけ計算し、見積もり直し（requote）以外では変えない。
    物理削除はせず、キャンセルはステータスで表す。
    """

    _state_machine = BookingStateMachine()

    def __init__(
        self,
        id: BookingId,
        tenant_id: TenantId,
        customer_id: int,
        vehicle_id: int,
        interval: RentalInterval,
        total_amount: Money,
        late_fee_per_day: Money,
        branch_id: int | None = None,
        status: BookingStatus = BookingStatus.PENDING,
        notes: str | None = None,
        created_at: datetime | None = None,
    ) -> None:
        super().__init__(id)

        self._tenant_id = tenant_id
        self._branch_id = branch_id
        self._customer_id = customer_id
        self._vehicle_id = vehicle_id
        self._interval = interval
        self._total_amount = total_amount
        self._late_fee_per_day = late_fee_per_day
        self._status = status
        self._notes = notes
        self._created_at = created_at or datetime.now(timezone.utc)

        self._validate_currency()

    def _validate_currency(self) -> None:
        """料金と延滞料の通貨は一致していなければならない"""
        if self._total_amount.currency != self._late_fee_per_day.currency:
            raise BusinessRuleViolationException(
                "Total amount and late fee must share the same currency"
            )

    @property
    def tenant_id(self) -> TenantId:
        return self._tenant_id

    @property
    def branch_id(self) -> int | None:
        return self._branch_id

    @property
    def customer_id(self) -> int:
        return self._customer_id

    @property
    def vehicle_id(self) -> int:
        return self._vehicle_id

    @property
    def interval(self) -> RentalInterval:
        return self._interval

    @property
    def scheduled_end_at(self) -> datetime:
        return self._interval.end_at

    @property
    def total_amount(self) -> Money:
        return self._total_amount

    @property
    def late_fee_per_day(self) -> Money:
        return self._late_fee_per_day

    @property
    def currency(self) -> Currency:
        return self._total_amount.currency

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def notes(self) -> str | None:
        return self._notes

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def belongs_to(self, tenant_id: TenantId, customer_id: int | None = None) -> bool:
        """テナント（と顧客）のスコープに属するか"""
        if self._tenant_id != tenant_id:
            return False
        return customer_id is None or self._customer_id == customer_id

    def change_status(self, target: BookingStatus) -> None:
        """遷移表に従ってステータスを変更する"""
        previous = self._status
        self._status = self._state_machine.transition_booking(previous, target)
        self.add_domain_event(
            StatusChanged(
                aggregate="booking",
                aggregate_id=self.id.value,
                previous=previous.value,
                current=self._status.value,
            )
        )

    def confirm(self) -> None:
        """予約を確定する"""
        self.change_status(BookingStatus.CONFIRMED)

    def cancel(self) -> None:
        """予約をキャンセルする（pending / confirmed からのみ）"""
        self.change_status(BookingStatus.CANCELLED)

    def complete(self) -> None:
        """返却・点検済みとして完了する"""
        self.change_status(BookingStatus.COMPLETED)

    def requote(self, interval: RentalInterval, total_amount: Money) -> None:
        """期間と料金を見積もり直す（確定前のみ）"""
        if self._status != BookingStatus.PENDING:
            raise BusinessRuleViolationException(
                f"Cannot requote a booking in {self._status.value} status"
            )
        if total_amount.currency != self.currency:
            raise BusinessRuleViolationException("Cannot change booking currency")
        self._interval = interval
        self._total_amount = total_amount
