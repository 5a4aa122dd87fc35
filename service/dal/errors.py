"""
Errors raised by item data access implementations.
"""

from enum import Enum


class StorageErrorKind(str, Enum):
    """Closed set of failure reasons at the storage boundary."""

    UNAVAILABLE = "unavailable"
    THROUGHPUT_EXCEEDED = "throughput_exceeded"
    NOT_CONFIGURED = "not_configured"
    OTHER = "other"


# DynamoDB error codes mapped onto storage error kinds
DYNAMODB_ERROR_KINDS = {
    "ServiceUnavailable": StorageErrorKind.UNAVAILABLE,
    "ProvisionedThroughputExceededException": StorageErrorKind.THROUGHPUT_EXCEEDED,
    "ResourceNotFoundException": StorageErrorKind.NOT_CONFIGURED,
}


class StorageError(Exception):
    def __init__(self, kind: StorageErrorKind, code: str, message: str = "") -> None:
        super().__init__(message or code)
        self.kind = kind
        self.code = code

    @classmethod
    def from_dynamodb_code(cls, code: str, message: str = "") -> "StorageError":
        kind = DYNAMODB_ERROR_KINDS.get(code, StorageErrorKind.OTHER)
        return cls(kind=kind, code=code, message=message)
