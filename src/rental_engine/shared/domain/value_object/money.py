from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from ..exception import NegativeAmountError
from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）

    負の金額は持てない。差額が負になりうる計算は Decimal のまま行う。
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise NegativeAmountError(f"Amount cannot be negative: {self.amount}")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def _ensure_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValueError(
                f"Currency mismatch: {self.currency} and {other.currency}"
            )

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        self._ensure_same_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor: int | Decimal) -> Money:
        """数量を掛ける"""
        return Money(amount=self.amount * factor, currency=self.currency)

    def rounded(self) -> Money:
        """通貨の補助単位に四捨五入する"""
        return Money(
            amount=self.amount.quantize(self.currency.exponent, rounding=ROUND_HALF_UP),
            currency=self.currency,
        )

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_less_than(self, other: Money) -> bool:
        self._ensure_same_currency(other)
        return self.amount < other.amount

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        return cls(Decimal("0"), currency)

    @classmethod
    def of(cls, amount: Decimal | int | str, currency_code: str) -> Money:
        """プリミティブ値から Money を生成"""
        return cls(Decimal(str(amount)), Currency(currency_code))
