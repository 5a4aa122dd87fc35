"""
Method based dispatch for the items API.

The router is the single recovery boundary: anything the create and fetch
paths do not handle themselves becomes a 500 response here.
"""

import base64
import binascii
from http import HTTPStatus
from typing import Any

from aws_lambda_powertools import Logger

from service.core.items import ItemOperations
from service.core.responses import error_response
from service.core.validation import INVALID_JSON
from service.dal.interface import IItemDataAccess

logger = Logger()

METHOD_NOT_ALLOWED = "Method not allowed"
INTERNAL_SERVER_ERROR = "Internal server error"


class OperationRouter:
    def __init__(self, data_access: IItemDataAccess) -> None:
        self.operations = ItemOperations(data_access)

    def route(
        self,
        method: str | None,
        body: str | None = None,
        path_parameters: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        try:
            if method == "POST":
                logger.info("Routing to create item")
                return self.operations.create_item(body)

            if method == "GET":
                logger.info("Routing to get item")
                return self.operations.get_item(path_parameters)

            logger.warning("Method not allowed", extra={"method": method})
            return error_response(HTTPStatus.METHOD_NOT_ALLOWED, METHOD_NOT_ALLOWED)

        except Exception:
            logger.exception("Unexpected error handling request", extra={"method": method})
            return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR)

    def handle_event(self, event: dict[str, Any]) -> dict[str, Any]:
        """
        Route an API Gateway proxy event.

        Args:
            event: API Gateway (REST) proxy event

        Returns:
            API Gateway proxy response
        """
        method = event.get("httpMethod")
        body = event.get("body")
        if body and event.get("isBase64Encoded"):
            try:
                body = base64.b64decode(body, validate=True).decode("utf-8")
            except (binascii.Error, UnicodeDecodeError):
                logger.info("Request body is not valid base64 encoded UTF-8")
                if method == "POST":
                    return error_response(HTTPStatus.BAD_REQUEST, INVALID_JSON)
                body = None

        return self.route(
            method=method,
            body=body,
            path_parameters=event.get("pathParameters"),
        )
