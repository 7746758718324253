from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from rental_engine.booking.domain.value_object import BookingId
from rental_engine.booking.infrastructure import DynamoDBBookingRepository
from rental_engine.payment.applications import RecordPaymentService
from rental_engine.payment.domain.factory import PaymentDetails, PaymentFactory
from rental_engine.payment.handlers.request_models import SubmitPaymentRequest
from rental_engine.payment.handlers.response_models import to_response
from rental_engine.payment.infrastructure import DynamoDBPaymentRepository
from rental_engine.shared.domain import DomainException, TenantId
from rental_engine.shared.utils import api_response, error_response

logger = Logger()

booking_repository = DynamoDBBookingRepository()
payment_repository = DynamoDBPaymentRepository()
factory = PaymentFactory()
service = RecordPaymentService(
    booking_repository=booking_repository,
    payment_repository=payment_repository,
    factory=factory,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """決済登録 Lambda Handler（POST /payments）

    決済は PENDING で登録する。予約の確定は別の明示的な操作で行う。
    """
    logger.info("Received submit payment request")

    try:
        request = SubmitPaymentRequest.model_validate_json(event.body or "{}")
        if request.is_deposit is not None or request.paid_amount is not None:
            logger.debug("Ignoring client supplied is_deposit / paid_amount")

        payment_details: PaymentDetails = {
            "amount": request.amount,
            "payment_method": request.payment_method,
            "is_partial": request.is_partial,
            "partial_amount": request.partial_amount,
            "late_fee": request.late_fee,
            "split_details": request.split_details,
            "payment_date": request.payment_date,
        }
        payment = service.record(
            tenant_id=TenantId(value=request.tenant_id),
            customer_id=request.customer_id,
            booking_id=BookingId(value=request.booking_id),
            payment_details=payment_details,
        )
    except (ValidationError, DomainException) as e:
        logger.warning("Payment request rejected", extra={"error": type(e).__name__})
        return error_response(e)
    except Exception:
        logger.exception("Failed to record payment")
        return api_response(500, {"message": "Internal server error"})

    return api_response(201, to_response(payment))
