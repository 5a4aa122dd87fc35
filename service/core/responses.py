"""
API Gateway proxy response builders.
"""

import json
from datetime import UTC, datetime
from decimal import Decimal
from http import HTTPStatus
from typing import Any

from aws_lambda_powertools import Logger

from service.models.item import ErrorBody

logger = Logger()

JSON_HEADERS = {"Content-Type": "application/json"}


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def success_response(status: HTTPStatus | int, body: Any) -> dict[str, Any]:
    logger.debug("Success response", extra={"status_code": int(status)})
    return {
        "statusCode": int(status),
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(body, default=_json_default),
    }


def error_response(status: HTTPStatus | int, message: str) -> dict[str, Any]:
    logger.debug("Error response", extra={"status_code": int(status), "error": message})
    error_body = ErrorBody(
        error=message,
        status_code=int(status),
        timestamp=datetime.now(UTC).isoformat(),
    )
    return {
        "statusCode": int(status),
        "headers": dict(JSON_HEADERS),
        "body": error_body.model_dump_json(by_alias=True),
    }
