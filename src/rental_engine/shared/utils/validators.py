from decimal import Decimal


def to_decimal(v: object) -> Decimal | None:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    すでに Decimal の場合はそのまま返し、None はそのまま通す。
    それ以外は float の誤差を避けるため str 経由で変換する。
    """
    if v is None or isinstance(v, Decimal):
        return v
    return Decimal(str(v))
