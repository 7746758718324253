import os
from datetime import datetime
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from rental_engine.booking.domain.entity import Booking
from rental_engine.booking.domain.repository import BookingRepository
from rental_engine.booking.domain.value_object import BookingId
from rental_engine.pricing.domain import RentalInterval
from rental_engine.shared.domain import BookingStatus, Currency, Money, TenantId
from rental_engine.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    PK=TENANT#<tenant_id>, SK=BOOKING#<booking_id>
    GSI1PK=BOOKING#<booking_id>, GSI1SK=BOOKING（予約IDだけで引くため）
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def next_identity(self) -> BookingId:
        """アトミックカウンタで予約IDを払い出す"""
        response = self.table.update_item(
            Key={"PK": "COUNTER", "SK": "BOOKING"},
            UpdateExpression="ADD #value :one",
            ExpressionAttributeNames={"#value": "value"},
            ExpressionAttributeValues={":one": 1},
            ReturnValues="UPDATED_NEW",
        )
        return BookingId(value=int(response["Attributes"]["value"]))

    def save(self, booking: Booking) -> None:
        """予約をDBに保存する"""
        item = {
            "PK": f"TENANT#{booking.tenant_id}",
            "SK": f"BOOKING#{booking.id}",
            "entity_type": "BOOKING",
            "booking_id": booking.id.value,
            "tenant_id": booking.tenant_id.value,
            "branch_id": booking.branch_id,
            "customer_id": booking.customer_id,
            "vehicle_id": booking.vehicle_id,
            "start_date": booking.interval.start_at.isoformat(),
            "end_date": booking.interval.end_at.isoformat(),
            "total_amount": str(booking.total_amount.amount),
            "late_fee_day": str(booking.late_fee_per_day.amount),
            "currency_code": str(booking.currency),
            "status": booking.status.value,
            "notes": booking.notes,
            "created_at": booking.created_at.isoformat(),
            "GSI1PK": f"BOOKING#{booking.id}",
            "GSI1SK": "BOOKING",
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Booking already exists: {booking.id}"
                ) from e
            raise

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        response = self.table.query(
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(f"BOOKING#{booking_id}")
            & Key("GSI1SK").eq("BOOKING"),
        )
        items = response.get("Items", [])
        if not items:
            return None
        return self._to_entity(items[0])

    def update(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        """予約のステータス・期間・金額を更新する"""
        kwargs: dict = {
            "Key": {
                "PK": f"TENANT#{booking.tenant_id}",
                "SK": f"BOOKING#{booking.id}",
            },
            "UpdateExpression": (
                "SET #status = :status, start_date = :start_date, "
                "end_date = :end_date, total_amount = :total_amount"
            ),
            "ExpressionAttributeNames": {"#status": "status"},
            "ExpressionAttributeValues": {
                ":status": booking.status.value,
                ":start_date": booking.interval.start_at.isoformat(),
                ":end_date": booking.interval.end_at.isoformat(),
                ":total_amount": str(booking.total_amount.amount),
            },
        }

        if expected_status is not None:
            kwargs["ConditionExpression"] = Attr("status").eq(expected_status.value)

        try:
            self.table.update_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Booking status conflict: "
                    f"expected {expected_status}, "
                    f"booking_id={booking.id}"
                ) from e
            raise

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        currency = Currency(item["currency_code"])
        branch_id = item.get("branch_id")
        return Booking(
            id=BookingId(value=int(item["booking_id"])),
            tenant_id=TenantId(value=int(item["tenant_id"])),
            branch_id=int(branch_id) if branch_id is not None else None,
            customer_id=int(item["customer_id"]),
            vehicle_id=int(item["vehicle_id"]),
            interval=RentalInterval(
                start_at=datetime.fromisoformat(item["start_date"]),
                end_at=datetime.fromisoformat(item["end_date"]),
            ),
            total_amount=Money(Decimal(item["total_amount"]), currency),
            late_fee_per_day=Money(Decimal(item["late_fee_day"]), currency),
            status=BookingStatus(item["status"]),
            notes=item.get("notes"),
            created_at=datetime.fromisoformat(item["created_at"]),
        )
