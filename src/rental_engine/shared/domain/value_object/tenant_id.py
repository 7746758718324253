from dataclasses import dataclass


@dataclass(frozen=True)
class TenantId:
    """テナントID（全コンテキスト共通）

    予約・車両・決済はすべて 1 テナントに属する。
    認可済みの値を受け取る前提で、ここでは形式だけを検証する。
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"TenantId must be an integer: {self.value!r}")
        if self.value <= 0:
            raise ValueError("TenantId must be positive")

    def __str__(self) -> str:
        return str(self.value)
