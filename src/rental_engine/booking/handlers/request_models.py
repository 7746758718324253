import os
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from rental_engine.pricing.domain import RateCard
from rental_engine.shared.domain import Currency
from rental_engine.shared.utils import to_decimal


class RateCardRequest(BaseModel):
    """車両の料金表スナップショット（車両マスタは外部管理）"""

    price_per_hour: Decimal | None = Field(default=None, ge=0)
    price_per_day: Decimal | None = Field(default=None, ge=0)
    price_per_week: Decimal | None = Field(default=None, ge=0)
    price_per_month: Decimal | None = Field(default=None, ge=0)
    price_per_year: Decimal | None = Field(default=None, ge=0)
    late_fee_day: Decimal = Field(default=Decimal("0"), ge=0, description="延滞料（日額）")

    @field_validator(
        "price_per_hour",
        "price_per_day",
        "price_per_week",
        "price_per_month",
        "price_per_year",
        "late_fee_day",
        mode="before",
    )
    @classmethod
    def convert_price_to_decimal(cls, v):
        return to_decimal(v)

    def to_rate_card(self, currency_code: str) -> RateCard:
        return RateCard(
            price_per_hour=self.price_per_hour,
            price_per_day=self.price_per_day,
            price_per_week=self.price_per_week,
            price_per_month=self.price_per_month,
            price_per_year=self.price_per_year,
            late_fee_per_day=self.late_fee_day,
            currency=Currency(currency_code),
        )


class BookingRequest(BaseModel):
    """予約の見積もり・作成リクエストモデル"""

    tenant_id: int = Field(..., gt=0)
    vehicle_id: int = Field(..., gt=0)
    branch_id: int | None = Field(default=None, gt=0)
    customer_id: int = Field(..., gt=0)
    start_date: str = Field(
        ...,
        description="開始日時（ISO 8601形式）",
        examples=["2024-01-01T10:00:00Z"],
    )
    end_date: str = Field(
        ...,
        description="終了日時（ISO 8601形式）",
        examples=["2024-01-02T16:00:00Z"],
    )
    rate_card: RateCardRequest
    currency_code: str = Field(
        default_factory=lambda: os.getenv("DEFAULT_CURRENCY", Currency.DEFAULT),
        pattern="^[A-Za-z]{3}$",
        description="通貨コード（ISO 4217）",
        validate_default=True,
    )
    notes: str | None = Field(default=None, max_length=1000)

    @field_validator("currency_code")
    @classmethod
    def check_supported_currency(cls, v: str) -> str:
        """サポート外の通貨は 400 として弾く（環境変数の既定値も含む）"""
        code = v.upper()
        if code not in Currency.MINOR_UNITS:
            raise ValueError(
                f"Unsupported currency: {v}. "
                f"Supported: {', '.join(sorted(Currency.MINOR_UNITS))}"
            )
        return code

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "tenant_id": 1,
                    "vehicle_id": 10,
                    "branch_id": 2,
                    "customer_id": 100,
                    "start_date": "2024-01-01T10:00:00Z",
                    "end_date": "2024-01-02T16:00:00Z",
                    "rate_card": {"price_per_day": 100, "price_per_hour": 20},
                    "currency_code": "ILS",
                }
            ]
        }
    }


class UpdateBookingStatusRequest(BaseModel):
    """予約ステータス更新リクエストモデル"""

    tenant_id: int = Field(..., gt=0)
    status: Literal["confirmed", "completed", "cancelled"]
