from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from rental_engine.booking.applications import ChangeBookingStatusService
from rental_engine.booking.domain.value_object import BookingId
from rental_engine.booking.handlers.request_models import UpdateBookingStatusRequest
from rental_engine.booking.handlers.response_models import to_response
from rental_engine.booking.infrastructure import DynamoDBBookingRepository
from rental_engine.shared.domain import BookingStatus, DomainException, TenantId
from rental_engine.shared.utils import api_response, error_response

logger = Logger()

repository = DynamoDBBookingRepository()
service = ChangeBookingStatusService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約ステータス更新 Lambda Handler（PUT /bookings/{booking_id}）"""
    path_params = event.path_parameters or {}
    raw_booking_id = path_params.get("booking_id", "")

    if not raw_booking_id.isdigit() or int(raw_booking_id) == 0:
        return api_response(400, {"message": "booking_id must be a positive integer"})

    logger.info("Received booking status update", extra={"booking_id": raw_booking_id})

    try:
        request = UpdateBookingStatusRequest.model_validate_json(event.body or "{}")
        booking = service.change_status(
            TenantId(value=request.tenant_id),
            BookingId(value=int(raw_booking_id)),
            BookingStatus(request.status),
        )
    except (ValidationError, DomainException) as e:
        logger.warning(
            "Booking status update rejected", extra={"error": type(e).__name__}
        )
        return error_response(e)
    except Exception:
        logger.exception("Failed to update booking status")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, to_response(booking))
