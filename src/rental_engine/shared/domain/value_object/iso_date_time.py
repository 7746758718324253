from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from ..exception import InvalidIntervalError


def ensure_aware(dt: datetime) -> datetime:
    """タイムゾーンなしの日時は UTC とみなす"""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


@dataclass(frozen=True)
class IsoDateTime:
    """日時(ISO 8601形式)"""

    value: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", ensure_aware(self.value))

    @classmethod
    def from_string(cls, s: str) -> IsoDateTime:
        """ISO 8601 形式の文字列から生成"""
        try:
            dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except (TypeError, ValueError) as e:
            raise InvalidIntervalError(f"Invalid ISO 8601 datetime: {s}") from e
        return cls(value=dt)

    def __str__(self) -> str:
        return self.value.isoformat()
