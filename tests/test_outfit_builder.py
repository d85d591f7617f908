"""Outfit assembly, gap filling and contextual filter tests."""

from __future__ import annotations

import random
import sys
from datetime import date
from pathlib import Path
from typing import List, Sequence

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.contextual_filtering import (
    current_season,
    filter_by_occasion,
    filter_by_season,
    filter_by_style,
    season_for_month,
    season_for_temperature,
    styles_for_occasion,
)
from logic.outfit_builder import assemble_random_outfit, fill_outfit_gaps, generate_outfit_from_item
from models.outfit import WeatherConditions
from models.taxonomy import ItemCategory, ItemStyle, Season
from models.wardrobe_item import WardrobeItem


def _item(
    item_id: str,
    category: str,
    colors: List[str],
    style: str = "casual",
    seasons: Sequence[str] = ("all-year",),
) -> WardrobeItem:
    return WardrobeItem(
        item_id=item_id,
        user_id="user-1",
        name=item_id.replace("-", " ").title(),
        category=category,
        style=style,
        colors=colors,
        seasons=list(seasons),
    )


@pytest.fixture()
def wardrobe() -> List[WardrobeItem]:
    return [
        _item("white-shirt", "top", ["#ffffff"], "formal"),
        _item("black-tee", "top", ["#000000"]),
        _item("navy-chinos", "bottom", ["#1f2937"], "business"),
        _item("blue-jeans", "bottom", ["#3b82f6"]),
        _item("brown-oxfords", "footwear", ["#92400e"], "formal"),
        _item("white-sneakers", "footwear", ["#ffffff"]),
        _item("navy-blazer", "outerwear", ["#1e3a8a"], "formal"),
        _item("silver-watch", "accessory", ["#6b7280"]),
        _item("red-dress", "dress", ["#f43f5e"], "glam"),
    ]


def test_outfit_from_item_orders_slots(wardrobe: List[WardrobeItem]) -> None:
    outfit = generate_outfit_from_item(wardrobe[0], wardrobe)
    assert [item.category for item in outfit] == [
        ItemCategory.TOP,
        ItemCategory.BOTTOM,
        ItemCategory.FOOTWEAR,
        ItemCategory.OUTERWEAR,
        ItemCategory.ACCESSORY,
    ]
    assert outfit[0] is wardrobe[0]
    assert [item.item_id for item in outfit[1:3]] == ["navy-chinos", "brown-oxfords"]


def test_outfit_from_item_has_one_item_per_category(wardrobe: List[WardrobeItem]) -> None:
    for seed in wardrobe:
        outfit = generate_outfit_from_item(seed, wardrobe)
        categories = [item.category for item in outfit]
        assert len(categories) == len(set(categories))


def test_dress_seed_never_adds_top_or_bottom(wardrobe: List[WardrobeItem]) -> None:
    outfit = generate_outfit_from_item(wardrobe[-1], wardrobe)
    categories = {item.category for item in outfit}
    assert ItemCategory.TOP not in categories
    assert ItemCategory.BOTTOM not in categories
    assert ItemCategory.FOOTWEAR in categories


def test_accessory_requires_score_above_threshold() -> None:
    seed = _item("blue-top", "top", ["#3b82f6"])
    wardrobe = [
        seed,
        _item("green-scarf", "accessory", ["#10b981"]),
        _item("orange-skirt", "bottom", ["#f97316"]),
    ]
    assert [item.item_id for item in generate_outfit_from_item(seed, wardrobe)] == ["blue-top", "orange-skirt"]

    wardrobe.append(_item("black-belt", "accessory", ["#000000"]))
    outfit = generate_outfit_from_item(seed, wardrobe)
    assert outfit[-1].item_id == "black-belt"
    assert generate_outfit_from_item(seed, wardrobe, accessory_threshold=1.0)[-1].item_id == "orange-skirt"


def test_lonely_seed_returns_only_itself() -> None:
    seed = _item("blue-top", "top", ["#3b82f6"])
    assert generate_outfit_from_item(seed, [seed]) == [seed]


def test_gap_filling_prefers_complementary_colors() -> None:
    seed = _item("blue-top", "top", ["#3b82f6"])
    wardrobe = [
        seed,
        _item("navy-skirt", "bottom", ["#1f2937"]),
        _item("orange-skirt", "bottom", ["#f97316"]),
        _item("white-sneakers", "footwear", ["#ffffff"]),
    ]
    variations = fill_outfit_gaps(seed, wardrobe, Season.WINTER, count=3)
    assert [variation.variation for variation in variations] == [0, 1]
    assert [item.item_id for item in variations[0].items] == ["blue-top", "orange-skirt", "white-sneakers"]
    assert [item.item_id for item in variations[1].items] == ["blue-top", "navy-skirt"]
    assert ItemCategory.FOOTWEAR in variations[1].missing_categories
    assert ItemCategory.TOP not in variations[0].missing_categories


def test_gap_filling_skips_out_of_season_items() -> None:
    seed = _item("blue-top", "top", ["#3b82f6"])
    wardrobe = [seed, _item("linen-shorts", "bottom", ["#f97316"], seasons=["summer"])]
    assert fill_outfit_gaps(seed, wardrobe, Season.WINTER) == []
    assert len(fill_outfit_gaps(seed, wardrobe, Season.SUMMER)) == 1


def test_random_outfit_adds_outerwear_when_cold_or_rainy(wardrobe: List[WardrobeItem]) -> None:
    rng = random.Random(3)
    warm = assemble_random_outfit(wardrobe, WeatherConditions(temperature=22, conditions="Sunny"), rng)
    assert ItemCategory.OUTERWEAR not in {item.category for item in warm}
    assert [item.category for item in warm] == [
        ItemCategory.TOP,
        ItemCategory.BOTTOM,
        ItemCategory.FOOTWEAR,
        ItemCategory.ACCESSORY,
    ]

    rainy = assemble_random_outfit(wardrobe, WeatherConditions(temperature=22, conditions="rainy"), rng)
    assert ItemCategory.OUTERWEAR in {item.category for item in rainy}
    cold = assemble_random_outfit(wardrobe, WeatherConditions(temperature=3, conditions="cloudy"), rng)
    assert ItemCategory.OUTERWEAR in {item.category for item in cold}


def test_random_outfit_needs_two_slots() -> None:
    lonely = [_item("blue-top", "top", ["#3b82f6"])]
    weather = WeatherConditions(temperature=20, conditions="sunny")
    assert assemble_random_outfit(lonely, weather, random.Random(1)) == []


@pytest.mark.parametrize(
    "month, expected",
    [(1, Season.WINTER), (3, Season.SPRING), (5, Season.SPRING), (6, Season.SUMMER), (9, Season.FALL), (12, Season.WINTER)],
)
def test_season_for_month(month: int, expected: Season) -> None:
    assert season_for_month(month) is expected


def test_season_for_month_rejects_out_of_range() -> None:
    with pytest.raises(ValueError):
        season_for_month(13)
    assert current_season(date(2024, 11, 30)) is Season.FALL


@pytest.mark.parametrize(
    "temperature, expected",
    [(30, Season.SUMMER), (25, Season.SPRING), (16, Season.SPRING), (15, Season.FALL), (5, Season.WINTER), (-3, Season.WINTER)],
)
def test_season_for_temperature(temperature: float, expected: Season) -> None:
    assert season_for_temperature(temperature) is expected


def test_season_filter_keeps_all_year_items() -> None:
    items = [
        _item("summer-top", "top", [], seasons=["summer"]),
        _item("wool-coat", "outerwear", [], seasons=["winter"]),
        _item("basic-tee", "top", [], seasons=["all-year"]),
    ]
    result = filter_by_season(items, "winter")
    assert [item.item_id for item in result.items] == ["wool-coat", "basic-tee"]
    assert result.removed == {"summer-top": "not tagged for winter"}
    assert result.debug["kept_count"] == 2


def test_style_and_occasion_filters(wardrobe: List[WardrobeItem]) -> None:
    formal = filter_by_style(wardrobe, [ItemStyle.FORMAL])
    assert {item.item_id for item in formal.items} == {"white-shirt", "brown-oxfords", "navy-blazer"}

    work = filter_by_occasion(wardrobe, "Work")
    assert {item.style for item in work.items} <= {ItemStyle.FORMAL, ItemStyle.BUSINESS}
    assert work.debug["occasion"] == "Work"
    assert styles_for_occasion("picnic") == [ItemStyle.CASUAL]
