import json
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from rental_engine.shared.utils import to_decimal


class SubmitPaymentRequest(BaseModel):
    """決済登録リクエストモデル（POST /payments）

    is_deposit と paid_amount は既存クライアントとの互換のために受け付けるが、
    どちらもサーバー側で導出するため値は使わない。
    """

    tenant_id: int = Field(..., gt=0)
    customer_id: int = Field(..., gt=0)
    booking_id: int = Field(..., gt=0)
    amount: Decimal = Field(
        ...,
        gt=0,
        description="今回の支払いの名目金額（0より大きい値）",
    )
    payment_method: Literal["cash", "card", "bank_transfer", "online"] = "cash"
    is_partial: bool = False
    partial_amount: Decimal = Field(default=Decimal("0"), ge=0)
    is_deposit: bool | None = None
    paid_amount: Decimal | None = None
    late_fee: Decimal | None = Field(
        default=None,
        ge=0,
        description="省略時は支払日時点の延滞料を計算する",
    )
    status: Literal["pending"] = "pending"
    split_details: str | None = None
    payment_date: str | None = Field(
        default=None,
        description="支払日時（ISO 8601形式、省略時は現在時刻）",
    )

    @field_validator("amount", "partial_amount", "paid_amount", "late_fee", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        return to_decimal(v)

    @field_validator("split_details", mode="before")
    @classmethod
    def serialize_split_details(cls, v):
        """オブジェクト・配列で送られた分割情報は JSON 文字列として保持する"""
        if isinstance(v, (dict, list)):
            return json.dumps(v)
        return v


class UpdatePaymentStatusRequest(BaseModel):
    """決済ステータス更新リクエストモデル（PUT /payments/{payment_id}）"""

    tenant_id: int = Field(..., gt=0)
    status: Literal["completed", "failed", "refunded"]
