"""Deterministic color-compatibility scoring for outfits and item pairs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from models.color_theory import are_colors_complementary
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItemMatch:
    item: WardrobeItem
    score: float


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def _any_colors_match(first: WardrobeItem, second: WardrobeItem) -> bool:
    return any(are_colors_complementary(c1, c2) for c1 in first.colors for c2 in second.colors)


def calculate_outfit_match_score(items: Sequence[WardrobeItem]) -> float:
    """Share of cross-category item pairs with at least one complementary color pair.

    Same-category pairs are not counted. Fewer than two items, or no
    cross-category pair at all, scores 1.0.
    """

    if len(items) < 2:
        return 1.0

    total_pairs = 0
    matching_pairs = 0
    for index, first in enumerate(items):
        for second in items[index + 1:]:
            if first.category == second.category:
                continue
            total_pairs += 1
            if _any_colors_match(first, second):
                matching_pairs += 1

    score = matching_pairs / total_pairs if total_pairs else 1.0
    logger.debug("outfit match %s/%s pairs -> %.2f", matching_pairs, total_pairs, score)
    return _clamp(score)


def get_item_matches(item: WardrobeItem, wardrobe_items: Iterable[WardrobeItem]) -> List[ItemMatch]:
    """Rank other-category wardrobe items by color compatibility with ``item``.

    Each score is the fraction of complementary color pairs between the two
    items, 0 when either has no colors. Ties keep wardrobe order.
    """

    matches: List[ItemMatch] = []
    for candidate in wardrobe_items:
        if candidate.item_id == item.item_id or candidate.category == item.category:
            continue
        comparisons = len(item.colors) * len(candidate.colors)
        matching = sum(
            1 for c1 in item.colors for c2 in candidate.colors if are_colors_complementary(c1, c2)
        )
        matches.append(ItemMatch(item=candidate, score=matching / comparisons if comparisons else 0.0))

    matches.sort(key=lambda match: match.score, reverse=True)
    return matches


__all__ = ["ItemMatch", "calculate_outfit_match_score", "get_item_matches"]
