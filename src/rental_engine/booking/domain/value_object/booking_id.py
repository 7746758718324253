from dataclasses import dataclass


@dataclass(frozen=True)
class BookingId:
    """予約ID（ストレージが払い出す正の整数）"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"BookingId must be an integer: {self.value!r}")
        if self.value <= 0:
            raise ValueError("BookingId must be positive")

    def __str__(self) -> str:
        return str(self.value)
