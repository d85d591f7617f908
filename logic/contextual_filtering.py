"""Deterministic wardrobe filters for season, style, occasion and weather."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List

from models.taxonomy import ItemCategory, ItemStyle, Season, coerce_enum
from models.wardrobe_item import WardrobeItem

_OCCASION_STYLES: Dict[str, List[ItemStyle]] = {
    "work": [ItemStyle.FORMAL, ItemStyle.BUSINESS],
    "business": [ItemStyle.FORMAL, ItemStyle.BUSINESS],
    "office": [ItemStyle.FORMAL, ItemStyle.BUSINESS],
    "casual": [ItemStyle.CASUAL, ItemStyle.STREETWEAR],
    "everyday": [ItemStyle.CASUAL, ItemStyle.STREETWEAR],
    "weekend": [ItemStyle.CASUAL, ItemStyle.STREETWEAR],
    "party": [ItemStyle.GLAM, ItemStyle.FORMAL],
    "evening": [ItemStyle.GLAM, ItemStyle.FORMAL],
}


@dataclass(frozen=True)
class FilteringResult:
    """Captures the outcome of a single filtering step."""

    items: List[WardrobeItem]
    removed: Dict[str, str]
    debug: Dict[str, object]


def season_for_month(month: int) -> Season:
    """Map a calendar month (1-12) to its northern-hemisphere season."""

    if not 1 <= month <= 12:
        raise ValueError(f"month must be within 1..12, got {month}")
    if 3 <= month <= 5:
        return Season.SPRING
    if 6 <= month <= 8:
        return Season.SUMMER
    if 9 <= month <= 11:
        return Season.FALL
    return Season.WINTER


def current_season(today: date) -> Season:
    return season_for_month(today.month)


def season_for_temperature(temperature: float) -> Season:
    """Pick the item season suited to a temperature in degrees Celsius."""

    if temperature > 25:
        return Season.SUMMER
    if temperature > 15:
        return Season.SPRING
    if temperature > 5:
        return Season.FALL
    return Season.WINTER


def styles_for_occasion(occasion: str) -> List[ItemStyle]:
    return list(_OCCASION_STYLES.get(occasion.strip().lower(), [ItemStyle.CASUAL]))


def group_by_category(items: Iterable[WardrobeItem]) -> Dict[ItemCategory, List[WardrobeItem]]:
    """Bucket items by category preserving wardrobe order."""

    grouped: Dict[ItemCategory, List[WardrobeItem]] = {category: [] for category in ItemCategory}
    for item in items:
        grouped[item.category].append(item)
    return grouped


def filter_by_season(items: List[WardrobeItem], season: Season | str) -> FilteringResult:
    """Keep items tagged for ``season`` or for all year."""

    season = coerce_enum(Season, season)
    removed: Dict[str, str] = {}
    kept: List[WardrobeItem] = []
    for item in items:
        if item.is_in_season(season):
            kept.append(item)
        else:
            removed[item.item_id] = f"not tagged for {season.value}"

    debug = {
        "input_count": len(items),
        "kept_count": len(kept),
        "removed_count": len(removed),
        "season": season.value,
    }
    return FilteringResult(items=kept, removed=removed, debug=debug)


def filter_by_style(items: List[WardrobeItem], styles: Iterable[ItemStyle | str]) -> FilteringResult:
    """Keep items whose style is one of ``styles``."""

    allowed = [coerce_enum(ItemStyle, style) for style in styles]
    removed: Dict[str, str] = {}
    kept: List[WardrobeItem] = []
    for item in items:
        if item.style in allowed:
            kept.append(item)
        else:
            removed[item.item_id] = f"style {item.style.value} not requested"

    debug = {
        "input_count": len(items),
        "kept_count": len(kept),
        "removed_count": len(removed),
        "styles": [style.value for style in allowed],
    }
    return FilteringResult(items=kept, removed=removed, debug=debug)


def filter_by_occasion(items: List[WardrobeItem], occasion: str) -> FilteringResult:
    """Keep items whose style suits ``occasion``."""

    result = filter_by_style(items, styles_for_occasion(occasion))
    return FilteringResult(
        items=result.items, removed=result.removed, debug={**result.debug, "occasion": occasion}
    )


__all__ = [
    "FilteringResult",
    "season_for_month",
    "current_season",
    "season_for_temperature",
    "styles_for_occasion",
    "group_by_category",
    "filter_by_season",
    "filter_by_style",
    "filter_by_occasion",
]
