from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from rental_engine.payment.applications import ChangePaymentStatusService
from rental_engine.payment.domain.value_object import PaymentId
from rental_engine.payment.handlers.request_models import UpdatePaymentStatusRequest
from rental_engine.payment.handlers.response_models import to_response
from rental_engine.payment.infrastructure import DynamoDBPaymentRepository
from rental_engine.shared.domain import DomainException, PaymentStatus, TenantId
from rental_engine.shared.utils import api_response, error_response

logger = Logger()

repository = DynamoDBPaymentRepository()
service = ChangePaymentStatusService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """決済ステータス更新 Lambda Handler（PUT /payments/{payment_id}）"""
    path_params = event.path_parameters or {}
    raw_payment_id = path_params.get("payment_id", "")

    if not raw_payment_id.isdigit() or int(raw_payment_id) == 0:
        return api_response(400, {"message": "payment_id must be a positive integer"})

    logger.info("Received payment status update", extra={"payment_id": raw_payment_id})

    try:
        request = UpdatePaymentStatusRequest.model_validate_json(event.body or "{}")
        payment = service.change_status(
            TenantId(value=request.tenant_id),
            PaymentId(value=int(raw_payment_id)),
            PaymentStatus(request.status),
        )
    except (ValidationError, DomainException) as e:
        logger.warning(
            "Payment status update rejected", extra={"error": type(e).__name__}
        )
        return error_response(e)
    except Exception:
        logger.exception("Failed to update payment status")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, to_response(payment))
