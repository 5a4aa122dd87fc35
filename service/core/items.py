"""
Create and fetch paths for items.
"""

from http import HTTPStatus
from typing import Any

from aws_lambda_powertools import Logger, Tracer

from service.core.error_classifier import is_transient_backend_error
from service.core.responses import error_response, success_response
from service.core.validation import assign_identity, is_blank, validate_request_body
from service.dal.interface import IItemDataAccess

logger = Logger()
tracer = Tracer()

MAX_ID_LENGTH = 255

DATABASE_UNAVAILABLE = "Database service unavailable"
PATH_PARAMETERS_REQUIRED = "Path parameters are required"
ID_PARAMETER_REQUIRED = "ID parameter is required"
ID_PARAMETER_TOO_LONG = "ID parameter is too long"
ITEM_NOT_FOUND = "Item not found"


class ItemOperations:
    """Validates requests and maps storage results onto responses."""

    def __init__(self, data_access: IItemDataAccess) -> None:
        self.data_access = data_access

    @tracer.capture_method
    def create_item(self, raw_body: str | None) -> dict[str, Any]:
        """
        Create an item from a raw JSON request body.

        Args:
            raw_body: Request body as received

        Returns:
            201 with the stored item, 400 for invalid input, 503 when the
            database is unavailable

        Raises:
            Exception: any storage failure that is not a transient backend error
        """
        validation = validate_request_body(raw_body)
        if not validation.valid:
            logger.info("Create request rejected", extra={"reason": validation.reason})
            return error_response(HTTPStatus.BAD_REQUEST, validation.reason)

        identity = assign_identity(validation.data)
        if not identity.valid:
            logger.info("Create request rejected", extra={"reason": identity.reason})
            return error_response(HTTPStatus.BAD_REQUEST, identity.reason)

        item = identity.data
        try:
            self.data_access.put_item(item.attributes)
        except Exception as e:
            if is_transient_backend_error(e):
                logger.error("Database unavailable while creating item", extra={"id": item.item_id})
                return error_response(HTTPStatus.SERVICE_UNAVAILABLE, DATABASE_UNAVAILABLE)
            raise

        logger.info("Item created successfully", extra={"id": item.item_id})
        return success_response(HTTPStatus.CREATED, item.attributes)

    @tracer.capture_method
    def get_item(self, path_parameters: dict[str, Any] | None) -> dict[str, Any]:
        """
        Fetch an item by the ``id`` path parameter.

        Args:
            path_parameters: Path parameters of the request, None when absent

        Returns:
            200 with the stored item, 400 for a missing or oversized id, 404
            when no item exists, 503 when the database is unavailable
        """
        if path_parameters is None:
            return error_response(HTTPStatus.BAD_REQUEST, PATH_PARAMETERS_REQUIRED)

        item_id = path_parameters.get("id")
        if not isinstance(item_id, str) or is_blank(item_id):
            return error_response(HTTPStatus.BAD_REQUEST, ID_PARAMETER_REQUIRED)

        if len(item_id) > MAX_ID_LENGTH:
            logger.info("ID parameter too long", extra={"length": len(item_id)})
            return error_response(HTTPStatus.BAD_REQUEST, ID_PARAMETER_TOO_LONG)

        try:
            item = self.data_access.get_item(item_id)
        except Exception as e:
            if is_transient_backend_error(e):
                logger.error("Database unavailable while getting item", extra={"id": item_id})
                return error_response(HTTPStatus.SERVICE_UNAVAILABLE, DATABASE_UNAVAILABLE)
            raise

        if item is None:
            logger.info("Item not found", extra={"id": item_id})
            return error_response(HTTPStatus.NOT_FOUND, ITEM_NOT_FOUND)

        logger.info("Item retrieved successfully", extra={"id": item_id})
        return success_response(HTTPStatus.OK, item)
