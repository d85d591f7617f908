"""Tool wrappers for wardrobe storage."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from models.wardrobe_item import from_raw_metadata
from tools.observability import instrument_tool
from tools.wardrobe_store import InMemoryWardrobeStore, WardrobeStore


class WardrobeTools:
    """Thin wrapper exposing WardrobeStore operations as plain-dict tools."""

    def __init__(self, store: Optional[WardrobeStore] = None) -> None:
        self.store = store or InMemoryWardrobeStore()

    @instrument_tool("add_wardrobe_item")
    def add_wardrobe_item(self, user_id: str, item_data: Dict[str, Any]) -> Dict[str, Any]:
        item = from_raw_metadata({**item_data, "user_id": user_id})
        stored = self.store.create_item(item)
        return asdict(stored)

    @instrument_tool("get_wardrobe_item")
    def get_wardrobe_item(self, user_id: str, item_id: str) -> Optional[Dict[str, Any]]:
        item = self.store.get_item(user_id, item_id)
        return asdict(item) if item else None

    @instrument_tool("list_wardrobe_items")
    def list_wardrobe_items(self, user_id: str) -> List[Dict[str, Any]]:
        return [asdict(item) for item in self.store.list_items_for_user(user_id)]

    @instrument_tool("update_wardrobe_item")
    def update_wardrobe_item(
        self, user_id: str, item_id: str, updated_fields: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        item = self.store.update_item(user_id, item_id, updated_fields)
        return asdict(item) if item else None

    @instrument_tool("delete_wardrobe_item")
    def delete_wardrobe_item(self, user_id: str, item_id: str) -> bool:
        return self.store.delete_item(user_id, item_id)

    @instrument_tool("search_wardrobe_items")
    def search_wardrobe_items(self, user_id: str, filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        return [asdict(item) for item in self.store.search_items(user_id, filters or {})]


__all__ = ["WardrobeTools"]
