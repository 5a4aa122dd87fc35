import copy
from typing import Any

from service.dal.interface import IItemDataAccess


class ItemDataAccessInMemory(IItemDataAccess):
    def __init__(self):
        self._items: dict[str, dict[str, Any]] = {}

    def get_item(self, item_id: str) -> dict[str, Any] | None:
        item = self._items.get(item_id)
        return copy.deepcopy(item) if item is not None else None

    def put_item(self, item: dict[str, Any]):
        if "id" not in item:
            raise ValueError("Item must include an id")
        self._items[item["id"]] = copy.deepcopy(item)

    def __len__(self) -> int:
        return len(self._items)
