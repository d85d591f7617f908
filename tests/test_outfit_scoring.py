"""Outfit compatibility scoring and item matching tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.outfit_scoring import calculate_outfit_match_score, get_item_matches
from models.wardrobe_item import WardrobeItem


def _item(item_id: str, category: str, colors: List[str]) -> WardrobeItem:
    return WardrobeItem(
        item_id=item_id,
        user_id="user-1",
        name=item_id.replace("-", " ").title(),
        category=category,
        style="casual",
        colors=colors,
        seasons=["all-year"],
    )


def test_trivial_outfits_score_one() -> None:
    assert calculate_outfit_match_score([]) == 1.0
    assert calculate_outfit_match_score([_item("shirt", "top", ["#3b82f6"])]) == 1.0


def test_same_category_pairs_are_vacuous() -> None:
    outfit = [_item("blue-top", "top", ["#3b82f6"]), _item("green-top", "top", ["#10b981"])]
    assert calculate_outfit_match_score(outfit) == 1.0


def test_white_shirt_navy_chinos_brown_oxfords_score_one() -> None:
    outfit = [
        _item("white-shirt", "top", ["#ffffff"]),
        _item("navy-chinos", "bottom", ["#1f2937"]),
        _item("brown-oxfords", "footwear", ["#92400e"]),
    ]
    assert calculate_outfit_match_score(outfit) == 1.0


def test_partial_matches_score_fractionally() -> None:
    outfit = [
        _item("blue-top", "top", ["#3b82f6"]),
        _item("orange-skirt", "bottom", ["#f97316"]),
        _item("green-shoes", "footwear", ["#10b981"]),
    ]
    assert calculate_outfit_match_score(outfit) == 1 / 3


def test_same_category_pairs_are_not_counted() -> None:
    outfit = [
        _item("blue-top", "top", ["#3b82f6"]),
        _item("green-top", "top", ["#10b981"]),
        _item("orange-skirt", "bottom", ["#f97316"]),
    ]
    # blue/orange matches, green/orange does not; the two tops are skipped.
    assert calculate_outfit_match_score(outfit) == 0.5


def test_items_without_colors_never_match() -> None:
    outfit = [_item("plain-top", "top", []), _item("plain-skirt", "bottom", [])]
    assert calculate_outfit_match_score(outfit) == 0.0


def test_item_matches_exclude_self_and_same_category() -> None:
    seed = _item("blue-top", "top", ["#3b82f6"])
    wardrobe = [
        seed,
        _item("other-top", "top", ["#ffffff"]),
        _item("green-skirt", "bottom", ["#10b981"]),
        _item("orange-skirt", "bottom", ["#f97316"]),
    ]
    matches = get_item_matches(seed, wardrobe)
    assert [match.item.item_id for match in matches] == ["orange-skirt", "green-skirt"]
    assert [match.score for match in matches] == [1.0, 0.0]


def test_item_match_score_is_fraction_of_color_pairs() -> None:
    seed = _item("two-tone-top", "top", ["#3b82f6", "#10b981"])
    matches = get_item_matches(
        seed, [_item("orange-skirt", "bottom", ["#f97316"]), _item("plain-shoes", "footwear", [])]
    )
    assert matches[0].item.item_id == "orange-skirt"
    assert matches[0].score == 0.5
    assert matches[1].score == 0.0


def test_item_match_ties_keep_wardrobe_order() -> None:
    seed = _item("white-top", "top", ["#ffffff"])
    wardrobe = [
        _item("first-skirt", "bottom", ["#10b981"]),
        _item("second-skirt", "bottom", ["#f97316"]),
        _item("shoes", "footwear", ["#8b5cf6"]),
    ]
    assert [match.item.item_id for match in get_item_matches(seed, wardrobe)] == [
        "first-skirt",
        "second-skirt",
        "shoes",
    ]
