from abc import ABC, abstractmethod
from typing import Any


class IItemDataAccess(ABC):
    @abstractmethod
    def put_item(self, item: dict[str, Any]) -> None:
        pass

    @abstractmethod
    def get_item(self, item_id: str) -> dict[str, Any] | None:
        pass
