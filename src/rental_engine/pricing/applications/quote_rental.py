from rental_engine.pricing.domain import (
    DurationDecomposer,
    PriceBreakdown,
    RateCalculator,
    RateCard,
    RentalInterval,
)


class QuoteRentalService:
    """レンタル料金の見積もりユースケース

    期間の分解 → 料金計算 を行うだけで、永続化はしない。
    """

    def __init__(
        self,
        decomposer: DurationDecomposer | None = None,
        calculator: RateCalculator | None = None,
    ) -> None:
        self._decomposer = decomposer or DurationDecomposer()
        self._calculator = calculator or RateCalculator()

    def quote(self, rate_card: RateCard, interval: RentalInterval) -> PriceBreakdown:
        """料金表と期間から見積もりを作成する"""
        duration = self._decomposer.decompose(interval)
        return self._calculator.breakdown(rate_card, duration)
