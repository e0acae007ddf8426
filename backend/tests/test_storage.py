from grocery_api.seed import FIRST_NEW_ID
from grocery_api.storage import ItemStore


def test_seeded_store_lists_catalog_in_order(store):
    names = [item.name for item in store.list()]
    assert names == ["Tomatos", "Cucumbers", "Bread", "Grapes"]


def test_create_assigns_increasing_ids_past_seed(store):
    first = store.create("Onion", 2)
    second = store.create("Garlic", 1.5)
    assert first.id == FIRST_NEW_ID
    assert second.id > first.id
    assert all(item.id < first.id for item in store.list()[:4])


def test_ids_are_not_reused_after_delete(store):
    created = store.create("Onion", 2)
    assert store.delete(created.id)
    again = store.create("Onion", 2)
    assert again.id > created.id


def test_create_then_get_returns_trimmed_fields(store):
    created = store.create("  Onion ", 2, "  A bulb  ")
    fetched = store.get(created.id)
    assert fetched is not None
    assert (fetched.name, fetched.price, fetched.description) == ("Onion", 2, "A bulb")


def test_create_without_description_defaults_to_empty(store):
    assert store.create("Salt", 0).description == ""


def test_get_missing_returns_none(store):
    assert store.get(999) is None


def test_update_leaves_unspecified_fields(store):
    before = store.get(1)
    name, description = before.name, before.description
    updated = store.update(1, {"price": 7})
    assert updated.price == 7
    assert updated.name == name
    assert updated.description == description
    assert updated.id == 1


def test_update_trims_strings_and_accepts_blank_name(store):
    updated = store.update(2, {"name": "   ", "description": " crunchy "})
    assert updated.name == ""
    assert updated.description == "crunchy"


def test_update_missing_returns_none(store):
    assert store.update(999, {"price": 1}) is None


def test_delete_twice(store):
    assert store.delete(1) is True
    assert store.delete(1) is False
    assert store.get(1) is None


def test_search_is_case_insensitive_substring(store):
    assert [item.name for item in store.search("GRA")] == ["Grapes"]
    assert [item.name for item in store.search("e")] == ["Cucumbers", "Bread", "Grapes"]


def test_search_accepts_regex(store):
    assert [item.name for item in store.search("^(bread|grapes)$")] == ["Bread", "Grapes"]


def test_search_empty_or_malformed_pattern_returns_nothing(store):
    assert store.search("") == []
    assert store.search("(tom") == []
    assert store.search("[") == []
    assert store.search("zzz") == []


def test_empty_store_starts_at_requested_id():
    empty = ItemStore(next_id=10)
    assert empty.list() == []
    assert empty.create("Tea", 3).id == 10


def test_search_oversized_repeat_returns_nothing(store):
    assert store.search("a{99999999999}") == []


def test_search_deeply_nested_groups_returns_nothing(store):
    assert store.search("(" * 5000 + ")" * 5000) == []
