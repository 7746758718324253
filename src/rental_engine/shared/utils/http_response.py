import json

from pydantic import ValidationError

from rental_engine.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    IllegalTransitionError,
    OptimisticLockException,
    ResourceNotFoundException,
)


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


# 先にマッチしたものを採用するため、サブクラスを上に置く
_STATUS_BY_EXCEPTION: list[tuple[type[Exception], int]] = [
    (ResourceNotFoundException, 404),
    (IllegalTransitionError, 409),
    (OptimisticLockException, 409),
    (DuplicateResourceException, 409),
    (BusinessRuleViolationException, 422),
    (DomainException, 400),
]


def error_response(error: Exception) -> dict:
    """ドメイン例外・バリデーション例外をエラーレスポンスに変換する"""
    if isinstance(error, ValidationError):
        return api_response(
            400,
            {
                "error": "ValidationError",
                "details": error.errors(include_url=False, include_context=False),
            },
        )

    for exception_type, status_code in _STATUS_BY_EXCEPTION:
        if isinstance(error, exception_type):
            return api_response(
                status_code,
                {"error": type(error).__name__, "message": str(error)},
            )

    return api_response(500, {"message": "Internal server error"})
