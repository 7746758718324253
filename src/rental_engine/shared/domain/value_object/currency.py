from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    サポート対象: ILS, USD, EUR, JOD, JPY
    テナントごとに 1 通貨で運用し、通貨換算は行わない。
    """

    # 通貨ごとの補助単位の桁数
    MINOR_UNITS: ClassVar[dict[str, int]] = {
        "ILS": 2,
        "USD": 2,
        "EUR": 2,
        "JOD": 3,
        "JPY": 0,
    }
    DEFAULT: ClassVar[str] = "ILS"

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.upper()
        if normalized not in self.MINOR_UNITS:
            raise ValueError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.MINOR_UNITS))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @property
    def minor_units(self) -> int:
        return self.MINOR_UNITS[self.code]

    @property
    def exponent(self) -> Decimal:
        """quantize 用の指数（例: 2 桁なら Decimal("0.01")）"""
        return Decimal(1).scaleb(-self.minor_units)

    @classmethod
    def default(cls) -> Currency:
        return cls(cls.DEFAULT)

    @classmethod
    def ils(cls) -> Currency:
        """イスラエル・シェケル"""
        return cls("ILS")

    @classmethod
    def usd(cls) -> Currency:
        """米ドル"""
        return cls("USD")
