import json
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from rental_engine.payment.applications import (
    ChangePaymentStatusService,
    GetBookingBalanceService,
    RecordPaymentService,
)
from rental_engine.payment.domain import PaymentFactory
from rental_engine.payment.domain.value_object import PaymentId
from rental_engine.payment.handlers import balance, submit, update_status
from rental_engine.payment.handlers.request_models import SubmitPaymentRequest
from rental_engine.shared.domain import PaymentStatus


def _payment_body(**overrides) -> str:
    body = {
        "tenant_id": 1,
        "customer_id": 100,
        "booking_id": 1,
        "amount": 220,
        "payment_method": "card",
        "is_partial": True,
        "partial_amount": "100",
        "payment_date": "2024-01-13T10:00:00Z",
    }
    body.update(overrides)
    return json.dumps(body)


class TestSubmitPaymentRequest:
    def test_defaults(self):
        request = SubmitPaymentRequest.model_validate(
            {"tenant_id": 1, "customer_id": 1, "booking_id": 1, "amount": "10.5"}
        )

        assert request.amount == Decimal("10.5")
        assert request.payment_method == "cash"
        assert request.status == "pending"
        assert request.late_fee is None

    def test_split_details_object_is_serialized(self):
        request = SubmitPaymentRequest.model_validate_json(
            _payment_body(split_details={"card": 120, "cash": 100})
        )

        assert json.loads(request.split_details) == {"card": 120, "cash": 100}

    @pytest.mark.parametrize(
        "overrides",
        [
            {"amount": 0},
            {"amount": -5},
            {"payment_method": "cheque"},
            {"status": "completed"},
            {"partial_amount": -1},
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(ValidationError):
            SubmitPaymentRequest.model_validate_json(_payment_body(**overrides))


class TestSubmitHandler:
    @pytest.fixture
    def repositories(self, monkeypatch):
        booking_repository = MagicMock()
        payment_repository = MagicMock()
        payment_repository.next_identity.return_value = PaymentId(value=7)
        monkeypatch.setattr(
            submit,
            "service",
            RecordPaymentService(
                booking_repository=booking_repository,
                payment_repository=payment_repository,
                factory=PaymentFactory(),
            ),
        )
        return booking_repository, payment_repository

    def test_submit_returns_201_with_derived_amounts(
        self, repositories, create_booking, api_event, lambda_context
    ):
        booking_repository, payment_repository = repositories
        booking_repository.find_for_tenant.return_value = create_booking()
        body = _payment_body(is_deposit=False, paid_amount=999)

        response = submit.lambda_handler(api_event(body=body), lambda_context)

        assert response["statusCode"] == 201
        data = json.loads(response["body"])["data"]
        assert data["payment_id"] == 7
        assert data["late_fee"] == 60.0
        assert data["paid_amount"] == 160.0
        assert data["is_deposit"] is True
        assert data["status"] == "pending"
        payment_repository.save.assert_called_once()

    def test_booking_not_found_returns_404(
        self, repositories, api_event, lambda_context
    ):
        booking_repository, payment_repository = repositories
        booking_repository.find_for_tenant.return_value = None

        response = submit.lambda_handler(api_event(body=_payment_body()), lambda_context)

        assert response["statusCode"] == 404
        payment_repository.save.assert_not_called()

    def test_invalid_body_returns_400(self, repositories, api_event, lambda_context):
        response = submit.lambda_handler(
            api_event(body=_payment_body(amount=0)), lambda_context
        )

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["error"] == "ValidationError"


class TestUpdatePaymentStatusHandler:
    @pytest.fixture
    def repository(self, monkeypatch):
        repository = MagicMock()
        monkeypatch.setattr(
            update_status, "service", ChangePaymentStatusService(repository=repository)
        )
        return repository

    def test_complete_returns_200(self, repository, create_payment, api_event, lambda_context):
        repository.find_by_id.return_value = create_payment()
        event = api_event(
            body=json.dumps({"tenant_id": 1, "status": "completed"}),
            path_parameters={"payment_id": "1"},
        )

        response = update_status.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["data"]["status"] == "completed"

    def test_refund_refunded_payment_returns_409(
        self, repository, create_payment, api_event, lambda_context
    ):
        repository.find_by_id.return_value = create_payment(status=PaymentStatus.REFUNDED)
        event = api_event(
            body=json.dumps({"tenant_id": 1, "status": "refunded"}),
            path_parameters={"payment_id": "1"},
        )

        response = update_status.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 409
        repository.update.assert_not_called()

    def test_invalid_path_returns_400(self, repository, api_event, lambda_context):
        event = api_event(
            body=json.dumps({"tenant_id": 1, "status": "completed"}),
            path_parameters={"payment_id": "x1"},
        )

        response = update_status.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400


class TestBalanceHandler:
    @pytest.fixture
    def repositories(self, monkeypatch):
        booking_repository = MagicMock()
        payment_repository = MagicMock()
        monkeypatch.setattr(
            balance,
            "service",
            GetBookingBalanceService(
                booking_repository=booking_repository,
                payment_repository=payment_repository,
            ),
        )
        return booking_repository, payment_repository

    def test_balance_returns_summary(
        self, repositories, create_booking, create_payment, api_event, lambda_context
    ):
        booking_repository, payment_repository = repositories
        booking_repository.find_for_tenant.return_value = create_booking()
        payment_repository.find_by_booking_id.return_value = [
            create_payment(status=PaymentStatus.COMPLETED, paid_amount=Decimal("250"))
        ]
        event = api_event(
            path_parameters={"booking_id": "1"},
            query_string_parameters={"tenant_id": "1"},
        )

        response = balance.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 200
        data = json.loads(response["body"])["data"]
        assert data["booking_id"] == 1
        assert data["total_due"] == 220.0
        assert data["outstanding"] == 0.0
        assert data["overpaid"] == 30.0
        assert data["completed_payments"] == 1
        assert data["is_settled"] is True

    def test_missing_tenant_returns_400(self, repositories, api_event, lambda_context):
        event = api_event(path_parameters={"booking_id": "1"})

        response = balance.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400

    def test_booking_not_found_returns_404(self, repositories, api_event, lambda_context):
        booking_repository, _ = repositories
        booking_repository.find_for_tenant.return_value = None
        event = api_event(
            path_parameters={"booking_id": "1"},
            query_string_parameters={"tenant_id": "2"},
        )

        response = balance.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 404
