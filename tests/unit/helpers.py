from datetime import datetime, timezone
from decimal import Decimal

from rental_engine.shared.domain import Currency, Money


def ils(amount) -> Money:
    """ILS の Money を生成する"""
    return Money(Decimal(str(amount)), Currency.ils())


def utc(*args) -> datetime:
    """UTC の datetime を生成する"""
    return datetime(*args, tzinfo=timezone.utc)
