import os
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

# ハンドラのモジュール読み込み時に boto3 がリージョンとテーブル名を参照する
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "rental-engine-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "rental-engine")

from rental_engine.booking.domain.entity import Booking  # noqa: E402
from rental_engine.booking.domain.value_object import BookingId  # noqa: E402
from rental_engine.payment.domain.entity import Payment  # noqa: E402
from rental_engine.payment.domain.enum import PaymentMethod  # noqa: E402
from rental_engine.payment.domain.value_object import PaymentId  # noqa: E402
from rental_engine.pricing.domain import RateCard, RentalInterval  # noqa: E402
from rental_engine.shared.domain import (  # noqa: E402
    BookingStatus,
    PaymentStatus,
    TenantId,
)
from tests.unit.helpers import ils, utc  # noqa: E402


@pytest.fixture
def tenant_id():
    """全テスト共通の TenantId フィクスチャ"""
    return TenantId(value=1)


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def rate_card():
    """日額 100 / 時間 20 / 延滞料 20 の料金表"""
    return RateCard(
        price_per_hour=Decimal("20"),
        price_per_day=Decimal("100"),
        late_fee_per_day=Decimal("20"),
    )


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: BookingStatus = BookingStatus.PENDING,
        booking_id: int = 1,
        tenant_id: int = 1,
        customer_id: int = 100,
        vehicle_id: int = 10,
        start_at: datetime = utc(2024, 1, 8, 10),
        end_at: datetime = utc(2024, 1, 10, 10),
        total_amount: Decimal = Decimal("220"),
        late_fee_per_day: Decimal = Decimal("20"),
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            tenant_id=TenantId(value=tenant_id),
            branch_id=2,
            customer_id=customer_id,
            vehicle_id=vehicle_id,
            interval=RentalInterval(start_at=start_at, end_at=end_at),
            total_amount=ils(total_amount),
            late_fee_per_day=ils(late_fee_per_day),
            status=status,
        )

    return _factory


@pytest.fixture
def create_payment():
    """Payment を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: PaymentStatus = PaymentStatus.PENDING,
        payment_id: int = 1,
        booking_id: int = 1,
        tenant_id: int = 1,
        amount: Decimal = Decimal("220"),
        paid_amount: Decimal = Decimal("220"),
        late_fee: Decimal = Decimal("0"),
        is_deposit: bool = False,
    ) -> Payment:
        return Payment(
            id=PaymentId(value=payment_id),
            booking_id=BookingId(value=booking_id),
            tenant_id=TenantId(value=tenant_id),
            customer_id=100,
            amount=ils(amount),
            method=PaymentMethod.CASH,
            paid_amount=ils(paid_amount),
            late_fee=ils(late_fee),
            is_deposit=is_deposit,
            status=status,
        )

    return _factory


@dataclass
class FakeLambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
    aws_request_id: str = "00000000-0000-0000-0000-000000000000"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway HTTP API (v2) イベントを生成する Factory fixture"""

    def _factory(
        body: str | None = None,
        path_parameters: dict | None = None,
        query_string_parameters: dict | None = None,
    ) -> dict:
        event: dict = {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": "/",
            "rawQueryString": "",
            "headers": {"content-type": "application/json"},
            "requestContext": {"http": {"method": "POST", "path": "/"}},
            "isBase64Encoded": False,
        }
        if body is not None:
            event["body"] = body
        if path_parameters is not None:
            event["pathParameters"] = path_parameters
        if query_string_parameters is not None:
            event["queryStringParameters"] = query_string_parameters
        return event

    return _factory
