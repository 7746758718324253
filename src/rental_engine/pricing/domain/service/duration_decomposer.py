from datetime import timedelta

from rental_engine.pricing.domain.value_object import RentalDuration, RentalInterval
from rental_engine.shared.domain import InvalidIntervalError

ONE_DAY = timedelta(days=1)
ONE_HOUR = timedelta(hours=1)


class DurationDecomposer:
    """レンタル期間を「日数 + 端数時間」に分解するドメインサービス

    端数時間は切り上げる（1 時間未満の利用も 1 時間として課金する）。
    切り上げで 24 時間になった場合は 1 日に繰り上げる。
    計算は timedelta のまま行い、浮動小数点の誤差を持ち込まない。
    """

    def decompose(self, interval: RentalInterval) -> RentalDuration:
        total = interval.length
        if total <= timedelta(0):
            raise InvalidIntervalError("Rental interval must have a positive length")

        whole_days, remainder = divmod(total, ONE_DAY)
        remainder_hours, partial = divmod(remainder, ONE_HOUR)
        if partial > timedelta(0):
            remainder_hours += 1
        if remainder_hours == 24:
            whole_days, remainder_hours = whole_days + 1, 0

        return RentalDuration(whole_days=whole_days, remainder_hours=remainder_hours)
