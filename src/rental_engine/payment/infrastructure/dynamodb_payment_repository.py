import os
from datetime import datetime
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from rental_engine.booking.domain.value_object import BookingId
from rental_engine.payment.domain.entity import Payment
from rental_engine.payment.domain.enum import PaymentMethod
from rental_engine.payment.domain.repository import PaymentRepository
from rental_engine.payment.domain.value_object import PaymentId
from rental_engine.shared.domain import Currency, Money, PaymentStatus, TenantId
from rental_engine.shared.domain.exception.exceptions import (
    DuplicateResourceException,
    OptimisticLockException,
)


class DynamoDBPaymentRepository(PaymentRepository):
    """DynamoDBを使用したPaymentRepository の具象実装

    PK=PAYMENT#<payment_id>, SK=PAYMENT
    GSI1PK=BOOKING#<booking_id>, GSI1SK=PAYMENT#<payment_id>（予約ごとの支払い履歴）
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def next_identity(self) -> PaymentId:
        """アトミックカウンタで決済IDを払い出す"""
        response = self.table.update_item(
            Key={"PK": "COUNTER", "SK": "PAYMENT"},
            UpdateExpression="ADD #value :one",
            ExpressionAttributeNames={"#value": "value"},
            ExpressionAttributeValues={":one": 1},
            ReturnValues="UPDATED_NEW",
        )
        return PaymentId(value=int(response["Attributes"]["value"]))

    def save(self, payment: Payment) -> None:
        """決済をDBに保存する"""
        item = {
            "PK": f"PAYMENT#{payment.id}",
            "SK": "PAYMENT",
            "entity_type": "PAYMENT",
            "payment_id": payment.id.value,
            "booking_id": payment.booking_id.value,
            "tenant_id": payment.tenant_id.value,
            "customer_id": payment.customer_id,
            "amount": str(payment.amount.amount),
            "currency_code": str(payment.amount.currency),
            "payment_method": payment.method.value,
            "is_partial": payment.is_partial,
            "partial_amount": str(payment.partial_amount.amount),
            "is_deposit": payment.is_deposit,
            "late_fee": str(payment.late_fee.amount),
            "paid_amount": str(payment.paid_amount.amount),
            "status": payment.status.value,
            "split_details": payment.split_details,
            "payment_date": payment.payment_date.isoformat(),
            "created_at": payment.created_at.isoformat(),
            "GSI1PK": f"BOOKING#{payment.booking_id}",
            "GSI1SK": f"PAYMENT#{payment.id}",
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Payment already exists: {payment.id}"
                ) from e
            raise

    def find_by_id(self, payment_id: PaymentId) -> Payment | None:
        """決済IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"PAYMENT#{payment_id}", "SK": "PAYMENT"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_booking_id(self, booking_id: BookingId) -> list[Payment]:
        """予約IDで支払い履歴を検索する"""
        kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq(f"BOOKING#{booking_id}")
            & Key("GSI1SK").begins_with("PAYMENT#"),
        }
        items: list[dict] = []
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            kwargs["ExclusiveStartKey"] = last_key
        return [self._to_entity(item) for item in items]

    def update(
        self, payment: Payment, expected_status: PaymentStatus | None = None
    ) -> None:
        """決済のステータスを更新する"""
        kwargs: dict = {
            "Key": {"PK": f"PAYMENT#{payment.id}", "SK": "PAYMENT"},
            "UpdateExpression": "SET #status = :status",
            "ExpressionAttributeNames": {"#status": "status"},
            "ExpressionAttributeValues": {":status": payment.status.value},
        }

        if expected_status is not None:
            kwargs["ConditionExpression"] = Attr("status").eq(expected_status.value)

        try:
            self.table.update_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Payment status conflict: "
                    f"expected {expected_status}, "
                    f"payment_id={payment.id}"
                ) from e
            raise

    def _to_entity(self, item: dict) -> Payment:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        currency = Currency(item["currency_code"])
        return Payment(
            id=PaymentId(value=int(item["payment_id"])),
            booking_id=BookingId(value=int(item["booking_id"])),
            tenant_id=TenantId(value=int(item["tenant_id"])),
            customer_id=int(item["customer_id"]),
            amount=Money(Decimal(item["amount"]), currency),
            method=PaymentMethod(item["payment_method"]),
            paid_amount=Money(Decimal(item["paid_amount"]), currency),
            late_fee=Money(Decimal(item["late_fee"]), currency),
            is_partial=bool(item["is_partial"]),
            partial_amount=Money(Decimal(item["partial_amount"]), currency),
            is_deposit=bool(item["is_deposit"]),
            status=PaymentStatus(item["status"]),
            split_details=item.get("split_details"),
            payment_date=datetime.fromisoformat(item["payment_date"]),
            created_at=datetime.fromisoformat(item["created_at"]),
        )
