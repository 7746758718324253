from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from rental_engine.booking.applications import CreateBookingService
from rental_engine.booking.domain.factory import BookingDetails, BookingFactory
from rental_engine.booking.handlers.request_models import BookingRequest
from rental_engine.booking.handlers.response_models import to_response
from rental_engine.booking.infrastructure import DynamoDBBookingRepository
from rental_engine.shared.domain import DomainException, TenantId
from rental_engine.shared.utils import api_response, error_response

logger = Logger()

repository = DynamoDBBookingRepository()
factory = BookingFactory()
service = CreateBookingService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler（POST /bookings）"""
    logger.info("Received create booking request")

    try:
        request = BookingRequest.model_validate_json(event.body or "{}")
        details: BookingDetails = {
            "customer_id": request.customer_id,
            "vehicle_id": request.vehicle_id,
            "branch_id": request.branch_id,
            "start_date": request.start_date,
            "end_date": request.end_date,
            "notes": request.notes,
        }
        booking = service.create(
            TenantId(value=request.tenant_id),
            details,
            request.rate_card.to_rate_card(request.currency_code),
        )
    except (ValidationError, DomainException) as e:
        logger.warning(
            "Create booking request rejected", extra={"error": type(e).__name__}
        )
        return error_response(e)
    except Exception:
        logger.exception("Failed to create booking")
        return api_response(500, {"message": "Internal server error"})

    return api_response(201, to_response(booking))
