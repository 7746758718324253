from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from rental_engine.booking.handlers.request_models import BookingRequest
from rental_engine.booking.handlers.response_models import to_quote_response
from rental_engine.pricing.applications import QuoteRentalService
from rental_engine.pricing.domain import RentalInterval
from rental_engine.shared.domain import DomainException
from rental_engine.shared.utils import api_response, error_response

logger = Logger()

service = QuoteRentalService()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """料金見積もり Lambda Handler（POST /bookings/quote）

    予約は作成せず、合計金額と明細だけを返す。
    """
    logger.info("Received quote request")

    try:
        request = BookingRequest.model_validate_json(event.body or "{}")
        rate_card = request.rate_card.to_rate_card(request.currency_code)
        interval = RentalInterval.from_strings(request.start_date, request.end_date)
        quote = service.quote(rate_card, interval)
    except (ValidationError, DomainException) as e:
        logger.warning("Quote request rejected", extra={"error": type(e).__name__})
        return error_response(e)
    except Exception:
        logger.exception("Failed to quote rental")
        return api_response(500, {"message": "Internal server error"})

    logger.info(
        "Quote calculated",
        extra={"vehicle_id": request.vehicle_id, "total": str(quote.total)},
    )
    return api_response(200, to_quote_response(quote))
