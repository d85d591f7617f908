"""Wardrobe item model, in-memory store and tool wrapper tests."""

from __future__ import annotations

import sys
import threading
from pathlib import Path
from typing import Dict

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models import taxonomy
from models.errors import InvalidColorFormat
from models.wardrobe_item import WardrobeItem, from_raw_metadata
from tools import wardrobe_store
from tools.sample_data import DEMO_USER_ID, demo_wardrobe
from tools.wardrobe_store import InMemoryWardrobeStore
from tools.wardrobe_tools import WardrobeTools


@pytest.fixture()
def sample_metadata() -> Dict[str, object]:
    return {
        "item_id": "item-1",
        "user_id": "user-123",
        "name": "Navy Blazer",
        "category": "Outerwear",
        "style": "Formal",
        "colors": ["1E3A8A", "#FFFFFF", "#1e3a8a"],
        "season": ["Fall", "winter", "fall"],
        "subcategory": "Blazer",
        "fabric": "Wool",
        "image_url": "https://example.com/blazer.jpg",
        "created_at": "2024-01-02T10:00:00",
    }


def test_taxonomy_coercion() -> None:
    assert taxonomy.coerce_enum(taxonomy.ItemCategory, "Top") is taxonomy.ItemCategory.TOP
    assert taxonomy.coerce_enum(taxonomy.Season, "all_year") is taxonomy.Season.ALL_YEAR
    assert taxonomy.Season.ALL_YEAR.label == "All Year"
    with pytest.raises(ValueError, match="Allowed"):
        taxonomy.coerce_enum(taxonomy.ItemCategory, "hat")


@pytest.mark.parametrize("label", ["SplitComplementary", "split_complementary", "Split Complementary", "split-complementary"])
def test_coerce_enum_accepts_label_spellings(label: str) -> None:
    assert taxonomy.coerce_enum(taxonomy.ColorHarmony, label) is taxonomy.ColorHarmony.SPLIT_COMPLEMENTARY


def test_coerce_enum_splits_camel_case_labels() -> None:
    assert taxonomy.coerce_enum(taxonomy.Season, "AllYear") is taxonomy.Season.ALL_YEAR
    assert taxonomy.coerce_enum(taxonomy.Gender, "PreferNotToSay") is taxonomy.Gender.PREFER_NOT_TO_SAY


def test_from_raw_metadata_normalises(sample_metadata: Dict[str, object]) -> None:
    item = from_raw_metadata(sample_metadata)
    assert item.category is taxonomy.ItemCategory.OUTERWEAR
    assert item.style is taxonomy.ItemStyle.FORMAL
    assert item.colors == ["#1e3a8a", "#ffffff"]
    assert item.seasons == [taxonomy.Season.FALL, taxonomy.Season.WINTER]
    assert item.created_at.year == 2024
    assert item.is_in_season(taxonomy.Season.WINTER)
    assert not item.is_in_season(taxonomy.Season.SUMMER)


def test_from_raw_metadata_reports_missing_fields() -> None:
    with pytest.raises(ValueError, match="name"):
        from_raw_metadata({"item_id": "x", "user_id": "u", "category": "top", "style": "casual"})


def test_item_rejects_bad_colors(sample_metadata: Dict[str, object]) -> None:
    with pytest.raises(InvalidColorFormat):
        from_raw_metadata({**sample_metadata, "colors": ["navy"]})


def test_all_year_items_are_always_in_season() -> None:
    item = WardrobeItem(item_id="tee", user_id="u", name="Tee", category="top", style="casual", seasons=["all-year"])
    assert all(item.is_in_season(season) for season in taxonomy.Season)


@pytest.fixture()
def store() -> InMemoryWardrobeStore:
    return InMemoryWardrobeStore()


def test_store_round_trip_and_user_scoping(store: InMemoryWardrobeStore, sample_metadata: Dict[str, object]) -> None:
    mine = from_raw_metadata(sample_metadata)
    theirs = from_raw_metadata({**sample_metadata, "user_id": "other", "item_id": "item-2"})
    store.create_item(mine)
    store.create_item(theirs)

    assert store.get_item("user-123", "item-1") == mine
    assert store.get_item("other", "item-1") is None
    assert store.list_items_for_user("user-123") == [mine]
    assert store.list_items_for_user("other") == [theirs]


def test_update_and_delete_item(store: InMemoryWardrobeStore, sample_metadata: Dict[str, object]) -> None:
    item = store.create_item(from_raw_metadata(sample_metadata))

    updated = store.update_item(item.user_id, item.item_id, {"colors": ["#000000"], "item_id": "ignored"})
    assert updated is not None
    assert updated.item_id == "item-1"
    assert updated.colors == ["#000000"]
    assert updated.updated_at >= item.updated_at
    assert store.update_item(item.user_id, "missing", {"name": "x"}) is None

    with pytest.raises(ValueError):
        store.update_item(item.user_id, item.item_id, {"category": "hat"})

    assert store.delete_item(item.user_id, item.item_id) is True
    assert store.delete_item(item.user_id, item.item_id) is False
    assert store.get_item(item.user_id, item.item_id) is None


def test_search_items(store: InMemoryWardrobeStore) -> None:
    for item in demo_wardrobe():
        store.create_item(item)

    tops = store.search_items(DEMO_USER_ID, {"category": "top"})
    assert {item.item_id for item in tops} == {"white-shirt", "black-tee"}

    white = store.search_items(DEMO_USER_ID, {"colors": ["#FFFFFF"]})
    assert {item.item_id for item in white} == {"white-shirt", "white-sneakers"}

    summer_casual = store.search_items(DEMO_USER_ID, {"style": "casual", "seasons": ["summer"]})
    assert {item.item_id for item in summer_casual} == {"black-tee", "white-sneakers"}

    favourites = store.search_items(DEMO_USER_ID, {"is_favorite": True, "category": "footwear"})
    assert favourites == []
    assert store.search_items(DEMO_USER_ID, {"category": "spaceship"}) == []


def test_wardrobe_tools_return_dicts(store: InMemoryWardrobeStore, sample_metadata: Dict[str, object]) -> None:
    tools = WardrobeTools(store)
    raw = {key: value for key, value in sample_metadata.items() if key != "user_id"}

    created = tools.add_wardrobe_item(user_id="user-123", item_data=raw)
    assert created["item_id"] == "item-1"
    assert created["colors"] == ["#1e3a8a", "#ffffff"]

    assert tools.get_wardrobe_item(user_id="user-123", item_id="item-1")["name"] == "Navy Blazer"
    assert tools.get_wardrobe_item(user_id="user-123", item_id="nope") is None
    assert len(tools.list_wardrobe_items(user_id="user-123")) == 1
    assert tools.search_wardrobe_items(user_id="user-123", filters={"style": "formal"})[0]["item_id"] == "item-1"

    renamed = tools.update_wardrobe_item(user_id="user-123", item_id="item-1", updated_fields={"name": "Blazer"})
    assert renamed["name"] == "Blazer"
    assert tools.delete_wardrobe_item(user_id="user-123", item_id="item-1") is True
    assert tools.list_wardrobe_items(user_id="user-123") == []


def test_wardrobe_tools_propagate_errors(store: InMemoryWardrobeStore) -> None:
    tools = WardrobeTools(store)
    with pytest.raises(ValueError):
        tools.add_wardrobe_item(user_id="user-123", item_data={"item_id": "x"})


def test_update_holds_lock_across_read_and_write(
    store: InMemoryWardrobeStore, sample_metadata: Dict[str, object], monkeypatch: pytest.MonkeyPatch
) -> None:
    item = store.create_item(from_raw_metadata(sample_metadata))
    deleter = threading.Thread(target=store.delete_item, args=(item.user_id, item.item_id))

    def build_under_lock(**values: object) -> WardrobeItem:
        assert store._lock.locked()
        deleter.start()
        deleter.join(timeout=0.05)
        # The delete waits for the update to finish.
        assert deleter.is_alive()
        return WardrobeItem(**values)

    monkeypatch.setattr(wardrobe_store, "WardrobeItem", build_under_lock)
    updated = store.update_item(item.user_id, item.item_id, {"name": "Wool Blazer"})
    deleter.join()

    assert updated is not None and updated.name == "Wool Blazer"
    assert store.get_item(item.user_id, item.item_id) is None
