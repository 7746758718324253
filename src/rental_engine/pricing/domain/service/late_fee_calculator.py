from datetime import datetime, timedelta, timezone
from typing import Callable

from rental_engine.shared.domain import Money
from rental_engine.shared.domain.value_object import ensure_aware

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LateFeeCalculator:
    """延滞料を計算するドメインサービス

    評価時刻を省略すると clock（既定は現在時刻）を使うため、呼び出し時刻によって
    結果が変わる。決済時点の延滞料を固定したい場合は Payment 側に保存すること。
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock

    def days_late(
        self, scheduled_end_at: datetime, evaluation_time: datetime | None = None
    ) -> int:
        """予定終了日時から経過した日数（切り捨て、0 未満にはならない）"""
        evaluated_at = ensure_aware(evaluation_time or self._clock())
        elapsed = evaluated_at - ensure_aware(scheduled_end_at)
        return max(0, elapsed // timedelta(days=1))

    def calculate(
        self,
        scheduled_end_at: datetime,
        late_fee_per_day: Money,
        evaluation_time: datetime | None = None,
    ) -> Money:
        """延滞料 = 延滞日数 × 日額"""
        days = self.days_late(scheduled_end_at, evaluation_time)
        return late_fee_per_day.multiply(days).rounded()
