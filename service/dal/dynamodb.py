"""
DynamoDB data access for items.
"""

from decimal import Decimal
from typing import Any

import boto3
from aws_lambda_powertools import Logger, Tracer
from botocore.exceptions import ClientError

from service.dal.errors import StorageError
from service.dal.interface import IItemDataAccess

logger = Logger()
tracer = Tracer()


def to_dynamodb(value: Any) -> Any:
    """Convert floats to Decimal, the only number type boto3 accepts on write."""
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {k: to_dynamodb(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_dynamodb(v) for v in value]
    return value


def from_dynamodb(value: Any) -> Any:
    """Convert Decimals read back from DynamoDB into plain ints and floats."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {k: from_dynamodb(v) for k, v in value.items()}
    if isinstance(value, list):
        return [from_dynamodb(v) for v in value]
    if isinstance(value, set):
        return [from_dynamodb(v) for v in sorted(value, key=str)]
    return value


class ItemDynamoDBDataAccess(IItemDataAccess):
    """Items table keyed by a single ``id`` partition key."""

    def __init__(self, table_name: str) -> None:
        self.table_name = table_name
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(table_name)

    @tracer.capture_method
    def get_item(self, item_id: str) -> dict[str, Any] | None:
        """
        Get an item by id.

        Args:
            item_id: Partition key value

        Returns:
            Item data or None if not found

        Raises:
            StorageError: if DynamoDB rejects the request
        """
        try:
            response = self.table.get_item(Key={"id": item_id})
        except ClientError as e:
            raise self._storage_error(e, item_id) from e

        item: dict[str, Any] | None = response.get("Item")
        if item is None:
            logger.debug("Item not found in DynamoDB", extra={"id": item_id})
            return None

        logger.debug("Retrieved item from DynamoDB", extra={"id": item_id})
        return from_dynamodb(item)

    @tracer.capture_method
    def put_item(self, item: dict[str, Any]) -> None:
        """
        Put an item into the table, replacing any item with the same id.

        Args:
            item: Item to store (must include id)

        Raises:
            StorageError: if DynamoDB rejects the request
        """
        try:
            self.table.put_item(Item=to_dynamodb(item))
        except ClientError as e:
            raise self._storage_error(e, item.get("id")) from e
        logger.debug("Stored item in DynamoDB", extra={"id": item.get("id")})

    def _storage_error(self, error: ClientError, item_id: Any) -> StorageError:
        code = error.response.get("Error", {}).get("Code", "Unknown")
        message = error.response.get("Error", {}).get("Message", "")
        logger.error(
            f"DynamoDB request failed: {code}",
            extra={"table_name": self.table_name, "id": item_id, "error_code": code},
        )
        return StorageError.from_dynamodb_code(code, message)
