from __future__ import annotations

from dataclasses import dataclass

from rental_engine.pricing.domain.value_object import (
    RateCard,
    RateUnit,
    RentalDuration,
)
from rental_engine.shared.domain import Money, MissingRateError

# 日単位以上の区分を大きい順に貪欲に適用する
_GREEDY_UNITS = (RateUnit.YEAR, RateUnit.MONTH, RateUnit.WEEK)


@dataclass(frozen=True)
class PriceLine:
    """料金明細の 1 行"""

    unit: RateUnit
    quantity: int
    unit_price: Money

    @property
    def subtotal(self) -> Money:
        return self.unit_price.multiply(self.quantity)


@dataclass(frozen=True)
class PriceBreakdown:
    """料金計算の結果（明細 + 合計）"""

    duration: RentalDuration
    lines: tuple[PriceLine, ...]
    total: Money


class RateCalculator:
    """料金表と期間から合計金額を計算するドメインサービス

    同じ入力には常に同じ結果を返す（副作用なし）。
    """

    def calculate(self, rate_card: RateCard, duration: RentalDuration) -> Money:
        """合計金額を返す"""
        return self.breakdown(rate_card, duration).total

    def breakdown(self, rate_card: RateCard, duration: RentalDuration) -> PriceBreakdown:
        """明細付きで料金を計算する

        Raises:
            MissingRateError: 期間に適用できる料金区分がない場合
        """
        currency = rate_card.currency
        lines: list[PriceLine] = []
        hourly = rate_card.price_for(RateUnit.HOUR)

        if duration.is_sub_day:
            if hourly is None:
                raise MissingRateError("Sub-day rental requires an hourly rate")
            lines.append(
                PriceLine(RateUnit.HOUR, duration.remainder_hours, Money(hourly, currency))
            )
        else:
            if not rate_card.has_daily_tier():
                raise MissingRateError(
                    "Rental of one day or more requires a day, week, month or year rate"
                )

            remaining_days = duration.whole_days
            for unit in _GREEDY_UNITS:
                price = rate_card.price_for(unit)
                if price is None or remaining_days < unit.days:
                    continue
                quantity, remaining_days = divmod(remaining_days, unit.days)
                lines.append(PriceLine(unit, quantity, Money(price, currency)))

            daily = rate_card.price_for(RateUnit.DAY)
            if remaining_days > 0 and daily is not None:
                lines.append(PriceLine(RateUnit.DAY, remaining_days, Money(daily, currency)))

            if duration.remainder_hours > 0 and hourly is not None:
                lines.append(
                    PriceLine(
                        RateUnit.HOUR, duration.remainder_hours, Money(hourly, currency)
                    )
                )

        total = Money.zero(currency)
        for line in lines:
            total = total.add(line.subtotal)

        return PriceBreakdown(duration=duration, lines=tuple(lines), total=total.rounded())
