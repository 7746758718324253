from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from rental_engine.booking.domain.value_object import BookingId
from rental_engine.booking.infrastructure import DynamoDBBookingRepository
from rental_engine.payment.applications import GetBookingBalanceService
from rental_engine.payment.handlers.response_models import to_balance_response
from rental_engine.payment.infrastructure import DynamoDBPaymentRepository
from rental_engine.shared.domain import DomainException, TenantId
from rental_engine.shared.utils import api_response, error_response

logger = Logger()

service = GetBookingBalanceService(
    booking_repository=DynamoDBBookingRepository(),
    payment_repository=DynamoDBPaymentRepository(),
)


def _positive_int(value: str | None) -> int | None:
    if value is None or not value.isdigit() or int(value) == 0:
        return None
    return int(value)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """入金状況取得 Lambda Handler（GET /bookings/{booking_id}/balance）"""
    path_params = event.path_parameters or {}
    query_params = event.query_string_parameters or {}

    booking_id = _positive_int(path_params.get("booking_id"))
    tenant_id = _positive_int(query_params.get("tenant_id"))

    if booking_id is None or tenant_id is None:
        return api_response(
            400, {"message": "booking_id and tenant_id must be positive integers"}
        )

    logger.info("Fetching booking balance", extra={"booking_id": booking_id})

    try:
        summary = service.summarize(TenantId(value=tenant_id), BookingId(value=booking_id))
    except DomainException as e:
        logger.warning("Balance request rejected", extra={"error": type(e).__name__})
        return error_response(e)
    except Exception:
        logger.exception("Failed to fetch booking balance")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, to_balance_response(BookingId(value=booking_id), summary))
