"""Greedy outfit assembly around a seed item."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Sequence

from logic.contextual_filtering import group_by_category
from logic.outfit_scoring import get_item_matches
from models.color_theory import DEFAULT_MATCH_DISTANCE, generate_color_matches
from models.outfit import WeatherConditions
from models.taxonomy import ColorHarmony, ItemCategory, Season
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

CORE_CATEGORIES = (ItemCategory.TOP, ItemCategory.BOTTOM, ItemCategory.FOOTWEAR, ItemCategory.OUTERWEAR)
DEFAULT_ACCESSORY_THRESHOLD = 0.7


@dataclass(frozen=True)
class GapFillResult:
    """One outfit variation around a fixed seed and the slots it left empty."""

    variation: int
    items: List[WardrobeItem]
    missing_categories: List[ItemCategory]


def generate_outfit_from_item(
    seed: WardrobeItem,
    wardrobe_items: Sequence[WardrobeItem],
    accessory_threshold: float = DEFAULT_ACCESSORY_THRESHOLD,
) -> List[WardrobeItem]:
    """Complete an outfit around ``seed`` with the best match per category.

    Slots are filled in top, bottom, footwear, outerwear order, skipping the
    seed's own category; a dress seed also skips top and bottom. The best
    accessory is appended last when its score exceeds ``accessory_threshold``.
    """

    outfit = [seed]
    matches = get_item_matches(seed, wardrobe_items)

    desired = [category for category in CORE_CATEGORIES if category != seed.category]
    if seed.category is ItemCategory.DRESS:
        desired = [category for category in desired if category not in (ItemCategory.TOP, ItemCategory.BOTTOM)]

    for category in desired:
        best = next((match for match in matches if match.item.category is category), None)
        if best is not None:
            outfit.append(best.item)

    accessory = next((match for match in matches if match.item.category is ItemCategory.ACCESSORY), None)
    if accessory is not None and accessory.score > accessory_threshold:
        outfit.append(accessory.item)

    logger.info(
        "Built outfit around %s -> %s", seed.item_id, [item.item_id for item in outfit]
    )
    return outfit


def fill_outfit_gaps(
    seed: WardrobeItem,
    wardrobe_items: Sequence[WardrobeItem],
    season: Season,
    count: int = 3,
    max_distance: float = DEFAULT_MATCH_DISTANCE,
) -> List[GapFillResult]:
    """Build up to ``count`` alternative outfits that keep ``seed`` fixed.

    Every other category is a slot. Candidates must be in season; within a
    category, items carrying a complementary match for the seed's primary
    color come first. Variation ``i`` takes the ``i``-th candidate of each
    category and records the categories it could not fill.
    """

    needed = [category for category in ItemCategory if category != seed.category]
    candidates = [
        item
        for item in wardrobe_items
        if item.item_id != seed.item_id and item.category in needed and item.is_in_season(season)
    ]
    color_matches: List[str] = []
    if seed.colors:
        color_matches = generate_color_matches(
            seed.colors[0],
            [color for item in candidates for color in item.colors],
            ColorHarmony.COMPLEMENTARY,
            max_distance,
        )

    grouped = group_by_category(candidates)
    for category in needed:
        grouped[category].sort(key=lambda item: not any(color in color_matches for color in item.colors))

    variations: List[GapFillResult] = []
    for index in range(count):
        items = [seed]
        missing: List[ItemCategory] = []
        for category in needed:
            bucket = grouped[category]
            if len(bucket) > index:
                items.append(bucket[index])
            else:
                missing.append(category)
        if len(items) > 1:
            variations.append(GapFillResult(variation=index, items=items, missing_categories=missing))
    logger.info("Gap filling around %s produced %s variations", seed.item_id, len(variations))
    return variations


def assemble_random_outfit(
    wardrobe_items: Sequence[WardrobeItem], weather: WeatherConditions, rng: random.Random
) -> List[WardrobeItem]:
    """Pick one random item per slot, adding outerwear when cold or rainy.

    Returns an empty list when fewer than two slots could be filled.
    """

    grouped = group_by_category(wardrobe_items)
    slots = [ItemCategory.TOP, ItemCategory.BOTTOM, ItemCategory.FOOTWEAR]
    if weather.temperature < 15 or weather.conditions.lower() == "rainy":
        slots.append(ItemCategory.OUTERWEAR)
    slots.append(ItemCategory.ACCESSORY)

    selected = [rng.choice(grouped[category]) for category in slots if grouped[category]]
    if len(selected) < 2:
        logger.info("Not enough items for a %s outfit", weather.conditions)
        return []
    return selected


__all__ = [
    "CORE_CATEGORIES",
    "DEFAULT_ACCESSORY_THRESHOLD",
    "GapFillResult",
    "generate_outfit_from_item",
    "fill_outfit_gaps",
    "assemble_random_outfit",
]
