from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from rental_engine.shared.domain import Currency, Money, NegativeAmountError


class RateUnit(str, Enum):
    """料金区分（長い順）"""

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"

    @property
    def days(self) -> int:
        """1 区分あたりの日数（HOUR は 0）"""
        return _DAYS_PER_UNIT[self]


_DAYS_PER_UNIT = {
    RateUnit.YEAR: 365,
    RateUnit.MONTH: 30,
    RateUnit.WEEK: 7,
    RateUnit.DAY: 1,
    RateUnit.HOUR: 0,
}


@dataclass(frozen=True)
class RateCard:
    """車両の料金表（評価時点のスナップショット）

    未設定または 0 の区分は「利用不可」として計算から除外する。
    late_fee_per_day は予約時に予約へコピーされる延滞料（日額）。
    """

    price_per_hour: Decimal | None = None
    price_per_day: Decimal | None = None
    price_per_week: Decimal | None = None
    price_per_month: Decimal | None = None
    price_per_year: Decimal | None = None
    late_fee_per_day: Decimal = Decimal("0")
    currency: Currency = field(default_factory=Currency.default)

    def __post_init__(self) -> None:
        for name in (
            "price_per_hour",
            "price_per_day",
            "price_per_week",
            "price_per_month",
            "price_per_year",
            "late_fee_per_day",
        ):
            value = getattr(self, name)
            if value is None:
                continue
            if not isinstance(value, Decimal):
                value = Decimal(str(value))
                object.__setattr__(self, name, value)
            if value < 0:
                raise NegativeAmountError(f"{name} cannot be negative: {value}")

    def price_for(self, unit: RateUnit) -> Decimal | None:
        """区分の単価を返す。利用不可の区分は None"""
        price = getattr(self, f"price_per_{unit.value}")
        if price is None or price == 0:
            return None
        return price

    def has(self, unit: RateUnit) -> bool:
        return self.price_for(unit) is not None

    def has_daily_tier(self) -> bool:
        """日単位以上の区分が 1 つでも設定されているか"""
        return any(self.has(unit) for unit in RateUnit if unit is not RateUnit.HOUR)

    def late_fee(self) -> Money:
        return Money(self.late_fee_per_day, self.currency)
