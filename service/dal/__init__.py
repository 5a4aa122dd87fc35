"""
Data access layer for service.
"""

from service.dal.dynamodb import ItemDynamoDBDataAccess
from service.dal.errors import StorageError, StorageErrorKind
from service.dal.in_memory import ItemDataAccessInMemory
from service.dal.interface import IItemDataAccess

__all__ = [
    "IItemDataAccess",
    "ItemDataAccessInMemory",
    "ItemDynamoDBDataAccess",
    "StorageError",
    "StorageErrorKind",
]
