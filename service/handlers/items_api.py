"""
Items API Lambda handler.

Serves POST /items and GET /items/{id} behind API Gateway, backed by the
DynamoDB items table.
"""

import os
from functools import cache
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from service.core.router import OperationRouter
from service.dal.dynamodb import ItemDynamoDBDataAccess

logger = Logger()
tracer = Tracer()
metrics = Metrics()

TABLE_NAME_ENV_VAR = "TABLE_NAME"
DEFAULT_TABLE_NAME = "Items"


def get_table_name() -> str:
    return os.environ.get(TABLE_NAME_ENV_VAR) or DEFAULT_TABLE_NAME


@cache
def get_router() -> OperationRouter:
    """Build the router once per execution environment and reuse it across invocations."""
    table_name = get_table_name()
    logger.info("Initialising items table access", extra={"table_name": table_name})
    return OperationRouter(ItemDynamoDBDataAccess(table_name))


@logger.inject_lambda_context
@tracer.capture_lambda_handler(capture_response=False)
@metrics.log_metrics(capture_cold_start_metric=True)
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Lambda handler for the items API.

    Args:
        event: API Gateway proxy event
        context: Lambda context

    Returns:
        Response dict with statusCode, headers and body
    """
    logger.info(
        "Processing items request",
        extra={"method": event.get("httpMethod"), "path": event.get("path")},
    )

    response = get_router().handle_event(event)

    status_code = response["statusCode"]
    metrics.add_metric(name=f"Responses{status_code // 100}xx", unit=MetricUnit.Count, value=1)
    logger.info("Request completed", extra={"status_code": status_code})
    return response
