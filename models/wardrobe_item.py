"""Wardrobe item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from models.color_theory import normalize_hex
from models.taxonomy import ItemCategory, ItemStyle, Season, coerce_enum, normalise_seasons


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


def _normalise_colors(values: Iterable[str]) -> List[str]:
    """Canonicalise hex colors, keeping the first occurrence of each."""

    normalised = []
    for value in values:
        key = normalize_hex(str(value))
        if key not in normalised:
            normalised.append(key)
    return normalised


@dataclass
class WardrobeItem:
    """Represents an item in the user's wardrobe.

    ``colors`` are canonical ``#rrggbb`` strings and the first one is the
    item's primary color.
    """

    item_id: str
    user_id: str
    name: str
    category: ItemCategory
    style: ItemStyle
    colors: List[str] = field(default_factory=list)
    seasons: List[Season] = field(default_factory=list)
    subcategory: Optional[str] = None
    fabric: Optional[str] = None
    image_url: Optional[str] = None
    is_favorite: bool = False
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        self.category = coerce_enum(ItemCategory, self.category)
        self.style = coerce_enum(ItemStyle, self.style)
        self.colors = _normalise_colors(_ensure_list(self.colors))
        self.seasons = normalise_seasons(_ensure_list(self.seasons))
        self.is_favorite = bool(self.is_favorite)

    def is_in_season(self, season: Season) -> bool:
        """True when the item is tagged for ``season`` or for all year."""

        return season in self.seasons or Season.ALL_YEAR in self.seasons


def from_raw_metadata(metadata: Dict[str, Any]) -> WardrobeItem:
    """Factory to build a :class:`WardrobeItem` from loose metadata."""

    required_fields = ["item_id", "user_id", "name", "category", "style"]
    missing = [name for name in required_fields if not metadata.get(name)]
    if missing:
        raise ValueError(f"Missing required fields for WardrobeItem: {missing}")

    optional: Dict[str, Any] = {}
    for key in ("created_at", "updated_at"):
        if metadata.get(key):
            value = metadata[key]
            optional[key] = datetime.fromisoformat(value) if isinstance(value, str) else value

    return WardrobeItem(
        item_id=str(metadata["item_id"]),
        user_id=str(metadata["user_id"]),
        name=str(metadata["name"]),
        category=metadata["category"],
        style=metadata["style"],
        colors=_ensure_list(metadata.get("colors")),
        seasons=_ensure_list(metadata.get("seasons", metadata.get("season"))),
        subcategory=metadata.get("subcategory"),
        fabric=metadata.get("fabric"),
        image_url=metadata.get("image_url"),
        is_favorite=bool(metadata.get("is_favorite", False)),
        **optional,
    )


__all__ = ["WardrobeItem", "from_raw_metadata"]
