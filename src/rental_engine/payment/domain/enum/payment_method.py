from enum import Enum


class PaymentMethod(str, Enum):
    """支払い方法"""

    CASH = "cash"
    CARD = "card"
    BANK_TRANSFER = "bank_transfer"
    ONLINE = "online"
