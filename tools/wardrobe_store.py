"""Wardrobe storage abstractions and an in-memory implementation."""
from __future__ import annotations

import threading
from dataclasses import asdict
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from models.color_theory import normalize_hex
from models.taxonomy import ItemCategory, ItemStyle, Season, coerce_enum, normalise_seasons
from models.wardrobe_item import WardrobeItem


class WardrobeStore:
    """Persistence interface for wardrobe items."""

    def create_item(self, item: WardrobeItem) -> WardrobeItem:
        raise NotImplementedError

    def get_item(self, user_id: str, item_id: str) -> Optional[WardrobeItem]:
        raise NotImplementedError

    def list_items_for_user(self, user_id: str) -> List[WardrobeItem]:
        raise NotImplementedError

    def update_item(self, user_id: str, item_id: str, updated_fields: Dict[str, object]) -> Optional[WardrobeItem]:
        raise NotImplementedError

    def delete_item(self, user_id: str, item_id: str) -> bool:
        raise NotImplementedError

    def search_items(self, user_id: str, filters: Dict[str, object]) -> List[WardrobeItem]:
        raise NotImplementedError


class InMemoryWardrobeStore(WardrobeStore):
    """Process-local store keyed by ``(user_id, item_id)``; insertion ordered."""

    def __init__(self) -> None:
        self._items: Dict[Tuple[str, str], WardrobeItem] = {}
        self._lock = threading.Lock()

    def create_item(self, item: WardrobeItem) -> WardrobeItem:
        with self._lock:
            self._items[(item.user_id, item.item_id)] = item
        return item

    def get_item(self, user_id: str, item_id: str) -> Optional[WardrobeItem]:
        with self._lock:
            return self._items.get((user_id, item_id))

    def list_items_for_user(self, user_id: str) -> List[WardrobeItem]:
        with self._lock:
            return [item for (owner, _), item in self._items.items() if owner == user_id]

    def update_item(self, user_id: str, item_id: str, updated_fields: Dict[str, object]) -> Optional[WardrobeItem]:
        key = (user_id, item_id)
        with self._lock:
            current = self._items.get(key)
            if current is None:
                return None

            values = asdict(current)
            for field_name, value in updated_fields.items():
                if field_name in {"user_id", "item_id", "created_at"}:
                    continue
                if field_name in values:
                    values[field_name] = value
            values["updated_at"] = datetime.now()

            updated = WardrobeItem(**values)
            self._items[key] = updated
        return updated

    def delete_item(self, user_id: str, item_id: str) -> bool:
        with self._lock:
            return self._items.pop((user_id, item_id), None) is not None

    def search_items(self, user_id: str, filters: Dict[str, object]) -> List[WardrobeItem]:
        """Filter a user's items by category, style, colors, seasons or favourite flag.

        Unknown category or style values match nothing rather than raising.
        """

        items = self.list_items_for_user(user_id)
        filters = filters or {}
        category = style = None
        try:
            if filters.get("category"):
                category = coerce_enum(ItemCategory, filters["category"])
            if filters.get("style"):
                style = coerce_enum(ItemStyle, filters["style"])
        except ValueError:
            return []

        colors = {normalize_hex(str(c)) for c in (filters.get("colors") or [])}
        seasons = set(normalise_seasons(filters.get("seasons") or []))
        favorite = filters.get("is_favorite")

        def matches(item: WardrobeItem) -> bool:
            if category and item.category is not category:
                return False
            if style and item.style is not style:
                return False
            if colors and not colors.intersection(item.colors):
                return False
            if seasons and not any(item.is_in_season(season) for season in seasons):
                return False
            if favorite is not None and item.is_favorite != bool(favorite):
                return False
            return True

        return [item for item in items if matches(item)]


__all__ = ["WardrobeStore", "InMemoryWardrobeStore"]
