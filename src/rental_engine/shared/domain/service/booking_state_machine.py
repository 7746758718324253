from __future__ import annotations

from enum import Enum
from typing import ClassVar, Mapping, TypeVar

from ..enum import BookingStatus, PaymentStatus
from ..exception import IllegalTransitionError

S = TypeVar("S", bound=Enum)


class BookingStateMachine:
    """予約と決済のステータス遷移を管理する

    遷移表にない遷移は IllegalTransitionError とし、状態は変更しない。
    決済の状態は予約の状態とは独立して遷移する。
    """

    BOOKING_TRANSITIONS: ClassVar[Mapping[BookingStatus, frozenset[BookingStatus]]] = {
        BookingStatus.PENDING: frozenset(
            {BookingStatus.CONFIRMED, BookingStatus.CANCELLED}
        ),
        BookingStatus.CONFIRMED: frozenset(
            {BookingStatus.COMPLETED, BookingStatus.CANCELLED}
        ),
        BookingStatus.COMPLETED: frozenset(),
        BookingStatus.CANCELLED: frozenset(),
    }

    PAYMENT_TRANSITIONS: ClassVar[Mapping[PaymentStatus, frozenset[PaymentStatus]]] = {
        PaymentStatus.PENDING: frozenset(
            {PaymentStatus.COMPLETED, PaymentStatus.FAILED}
        ),
        PaymentStatus.COMPLETED: frozenset({PaymentStatus.REFUNDED}),
        PaymentStatus.FAILED: frozenset(),
        PaymentStatus.REFUNDED: frozenset(),
    }

    def can_transition_booking(
        self, current: BookingStatus, target: BookingStatus
    ) -> bool:
        return target in self.BOOKING_TRANSITIONS[current]

    def can_transition_payment(
        self, current: PaymentStatus, target: PaymentStatus
    ) -> bool:
        return target in self.PAYMENT_TRANSITIONS[current]

    def transition_booking(
        self, current: BookingStatus, target: BookingStatus
    ) -> BookingStatus:
        """予約の遷移を検証し、遷移後のステータスを返す"""
        return self._transition("booking", self.BOOKING_TRANSITIONS, current, target)

    def transition_payment(
        self, current: PaymentStatus, target: PaymentStatus
    ) -> PaymentStatus:
        """決済の遷移を検証し、遷移後のステータスを返す"""
        return self._transition("payment", self.PAYMENT_TRANSITIONS, current, target)

    @staticmethod
    def is_terminal(status: BookingStatus | PaymentStatus) -> bool:
        if isinstance(status, BookingStatus):
            return not BookingStateMachine.BOOKING_TRANSITIONS[status]
        return not BookingStateMachine.PAYMENT_TRANSITIONS[status]

    @staticmethod
    def _transition(
        entity: str, table: Mapping[S, frozenset[S]], current: S, target: S
    ) -> S:
        if target not in table[current]:
            raise IllegalTransitionError(entity, current.value, target.value)
        return target
