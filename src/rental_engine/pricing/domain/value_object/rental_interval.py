from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from rental_engine.shared.domain import InvalidIntervalError, IsoDateTime
from rental_engine.shared.domain.value_object import ensure_aware


@dataclass(frozen=True)
class RentalInterval:
    """レンタル期間（開始日時 + 終了日時）

    end_at > start_at でなければならない。丸めて補正することはしない。
    """

    start_at: datetime
    end_at: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_at", ensure_aware(self.start_at))
        object.__setattr__(self, "end_at", ensure_aware(self.end_at))
        if self.end_at <= self.start_at:
            raise InvalidIntervalError(
                f"End must be after start: start={self.start_at.isoformat()}, "
                f"end={self.end_at.isoformat()}"
            )

    @classmethod
    def from_strings(cls, start: str, end: str) -> RentalInterval:
        """ISO 8601 文字列のペアから生成する"""
        return cls(
            start_at=IsoDateTime.from_string(start).value,
            end_at=IsoDateTime.from_string(end).value,
        )

    @property
    def length(self) -> timedelta:
        return self.end_at - self.start_at
