"""
Item models for request/response validation.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

ID_FIELD = "id"
CREATED_AT_FIELD = "createdAt"


@dataclass
class Item:
    """A stored item: free-form JSON attributes keyed by ``id``."""

    attributes: dict[str, Any]

    def has_id(self) -> bool:
        return ID_FIELD in self.attributes

    @property
    def item_id(self) -> Any:
        return self.attributes.get(ID_FIELD)

    @item_id.setter
    def item_id(self, value: str) -> None:
        self.attributes[ID_FIELD] = value

    @property
    def created_at(self) -> str | None:
        return self.attributes.get(CREATED_AT_FIELD)

    @created_at.setter
    def created_at(self, value: str) -> None:
        self.attributes[CREATED_AT_FIELD] = value


@dataclass
class ValidationResult:
    """Outcome of validating a create request: either an item or a reason."""

    valid: bool
    data: Item | None = None
    reason: str | None = None

    @classmethod
    def ok(cls, data: Item) -> "ValidationResult":
        return cls(valid=True, data=data)

    @classmethod
    def fail(cls, reason: str) -> "ValidationResult":
        return cls(valid=False, reason=reason)


class ErrorBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    error: str = Field(..., description="Human readable error message")
    status_code: int = Field(..., alias="statusCode", description="Echo of the HTTP status")
    timestamp: str = Field(..., description="ISO-8601 instant the response was built")
