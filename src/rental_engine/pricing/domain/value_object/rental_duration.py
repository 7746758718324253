from dataclasses import dataclass


@dataclass(frozen=True)
class RentalDuration:
    """課金用に分解した期間（日数 + 端数時間）"""

    whole_days: int
    remainder_hours: int

    def __post_init__(self) -> None:
        if self.whole_days < 0:
            raise ValueError("whole_days cannot be negative")
        if not 0 <= self.remainder_hours <= 23:
            raise ValueError(f"remainder_hours out of range: {self.remainder_hours}")

    @property
    def is_sub_day(self) -> bool:
        return self.whole_days == 0

    @property
    def billable_hours(self) -> int:
        return self.whole_days * 24 + self.remainder_hours
