from .dynamodb_payment_repository import (
    DynamoDBPaymentRepository as DynamoDBPaymentRepository,
)
