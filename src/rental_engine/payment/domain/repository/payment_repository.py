from abc import abstractmethod

from rental_engine.booking.domain.value_object import BookingId
from rental_engine.payment.domain.entity import Payment
from rental_engine.payment.domain.value_object import PaymentId
from rental_engine.shared.domain import PaymentStatus, Repository


class PaymentRepository(Repository[Payment, PaymentId]):
    """決済リポジトリのインターフェース"""

    @abstractmethod
    def next_identity(self) -> PaymentId:
        """新しい決済IDを払い出す"""
        raise NotImplementedError

    @abstractmethod
    def save(self, payment: Payment) -> None:
        """決済を保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, payment_id: PaymentId) -> Payment | None:
        """決済IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_booking_id(self, booking_id: BookingId) -> list[Payment]:
        """予約に紐づく決済をすべて返す（支払い履歴）"""
        raise NotImplementedError

    @abstractmethod
    def update(
        self, payment: Payment, expected_status: PaymentStatus | None = None
    ) -> None:
        """決済のステータスを更新する（expected_status があれば楽観ロック）"""
        raise NotImplementedError
