"""
Create request validation and identifier assignment.

Validation failures are returned as ``ValidationResult`` values, never raised.
"""

import json
import math
import uuid
from datetime import UTC, datetime

from aws_lambda_powertools import Logger

from service.models.item import Item, ValidationResult

logger = Logger()

BODY_REQUIRED = "Request body is required"
INVALID_JSON = "Invalid JSON format"
BODY_EMPTY = "Request body cannot be empty"
INVALID_ID = "ID must be a non-empty string"


def _reject_constant(name: str) -> None:
    raise ValueError(f"Unsupported JSON constant: {name}")


def _parse_finite_float(value: str) -> float:
    number = float(value)
    # literals such as 1e400 overflow to inf
    if not math.isfinite(number):
        raise ValueError(f"Number out of range: {value}")
    return number


def is_blank(value: str) -> bool:
    """True when value holds only whitespace, counting U+FEFF as whitespace."""
    return not value.replace("\ufeff", "").strip()


def validate_request_body(raw_body: str | None) -> ValidationResult:
    """
    Parse and check a create request body.

    Rules are applied in order and the first failure wins.

    Args:
        raw_body: Raw request body, or None when the request had none

    Returns:
        ValidationResult carrying the parsed item or the failure reason
    """
    if not raw_body:
        return ValidationResult.fail(BODY_REQUIRED)

    try:
        parsed = json.loads(raw_body, parse_constant=_reject_constant, parse_float=_parse_finite_float)
    except ValueError as e:
        logger.info("Request body is not valid JSON", extra={"error": str(e)})
        return ValidationResult.fail(INVALID_JSON)

    # Arrays and scalars carry no attributes to store
    if not isinstance(parsed, dict) or not parsed:
        return ValidationResult.fail(BODY_EMPTY)

    return ValidationResult.ok(Item(attributes=parsed))


def assign_identity(item: Item) -> ValidationResult:
    """
    Decide the effective id of a new item and stamp its creation time.

    A caller supplied id is checked but stored as given; otherwise a UUID4 is
    generated. ``createdAt`` is always overwritten.
    """
    if item.has_id():
        item_id = item.item_id
        if not isinstance(item_id, str) or is_blank(item_id):
            return ValidationResult.fail(INVALID_ID)
        logger.debug("Using caller supplied id", extra={"id": item_id})
    else:
        item.item_id = str(uuid.uuid4())
        logger.debug("Generated id", extra={"id": item.item_id})

    item.created_at = datetime.now(UTC).isoformat()
    return ValidationResult.ok(item)
