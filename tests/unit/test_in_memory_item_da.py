import pytest

from service.dal.in_memory import ItemDataAccessInMemory


@pytest.fixture
def item_data_access():
    return ItemDataAccessInMemory()


@pytest.fixture
def sample_item():
    return {"id": "item-1", "createdAt": "2024-01-01T00:00:00+00:00", "name": "x", "price": 1}


class TestItemDataAccessInMemory:
    def test_put_and_get_item(self, item_data_access, sample_item):
        item_data_access.put_item(sample_item)
        retrieved = item_data_access.get_item("item-1")
        assert retrieved == sample_item

    def test_get_item_not_found(self, item_data_access):
        assert item_data_access.get_item("nonexistent") is None

    def test_put_overwrites_existing_item(self, item_data_access, sample_item):
        item_data_access.put_item(sample_item)
        item_data_access.put_item({"id": "item-1", "name": "y"})

        assert item_data_access.get_item("item-1") == {"id": "item-1", "name": "y"}
        assert len(item_data_access) == 1

    def test_stored_item_is_isolated_from_caller(self, item_data_access, sample_item):
        item_data_access.put_item(sample_item)
        sample_item["name"] = "mutated"

        retrieved = item_data_access.get_item("item-1")
        retrieved["price"] = 99

        assert item_data_access.get_item("item-1")["name"] == "x"
        assert item_data_access.get_item("item-1")["price"] == 1

    def test_put_item_without_id(self, item_data_access):
        with pytest.raises(ValueError, match="Item must include an id"):
            item_data_access.put_item({"name": "x"})
