from abc import abstractmethod

from rental_engine.booking.domain.entity import Booking
from rental_engine.booking.domain.value_object import BookingId
from rental_engine.shared.domain import BookingStatus, Repository, TenantId


class BookingRepository(Repository[Booking, BookingId]):
    """予約リポジトリのインターフェース"""

    @abstractmethod
    def next_identity(self) -> BookingId:
        """新しい予約IDを払い出す"""
        raise NotImplementedError

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """予約を保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def update(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        """予約を更新する（expected_status があれば楽観ロック）"""
        raise NotImplementedError

    def find_for_tenant(
        self,
        tenant_id: TenantId,
        booking_id: BookingId,
        customer_id: int | None = None,
    ) -> Booking | None:
        """テナント（と顧客）のスコープ内で予約を検索する

        スコープ外の予約は存在しないものとして扱う。
        """
        booking = self.find_by_id(booking_id)
        if booking is None or not booking.belongs_to(tenant_id, customer_id):
            return None
        return booking
