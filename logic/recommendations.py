"""Recommendation generators turning a wardrobe into ranked outfit suggestions.

Every function here is a pure function of its arguments: the reference date
and the random source are passed in rather than read from the environment.
Failures raise :class:`InsufficientWardrobe` before any result is built.
"""
from __future__ import annotations

import logging
import random
import uuid
from datetime import date
from typing import Dict, List, Optional, Sequence

from logic.contextual_filtering import (
    current_season,
    filter_by_occasion,
    filter_by_season,
    filter_by_style,
    group_by_category,
    season_for_temperature,
)
from logic.outfit_builder import (
    DEFAULT_ACCESSORY_THRESHOLD,
    assemble_random_outfit,
    fill_outfit_gaps,
    generate_outfit_from_item,
)
from logic.outfit_scoring import calculate_outfit_match_score
from models.color_theory import DEFAULT_MATCH_DISTANCE
from models.errors import InsufficientWardrobe
from models.outfit import MissingItem, OutfitRecommendation, WeatherConditions
from models.taxonomy import ItemCategory, ItemStyle, Season, coerce_enum
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

DEFAULT_MATCH_THRESHOLD = 0.7
DEFAULT_MIN_ITEMS = 3
GAP_BASE_CONFIDENCE = 0.8
GAP_CONFIDENCE_STEP = 0.1
WEATHER_CONFIDENCE = 0.8
_REQUIRED_BUCKETS = (ItemCategory.TOP, ItemCategory.BOTTOM, ItemCategory.FOOTWEAR)


def _new_id(prefix: str = "rec") -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def _occasion_for(style: ItemStyle) -> str:
    return "Work" if style is ItemStyle.FORMAL else "Casual"


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")


def _core_buckets(items: Sequence[WardrobeItem], context: str) -> Dict[ItemCategory, List[WardrobeItem]]:
    grouped = group_by_category(items)
    missing = [category.value for category in _REQUIRED_BUCKETS if not grouped[category]]
    if missing:
        raise InsufficientWardrobe(
            f"Need at least one top, bottom, and footwear item{context}; missing: {', '.join(missing)}"
        )
    return grouped


def _recommend(
    items: List[WardrobeItem], name: str, occasion: Optional[str], prefix: str = "rec"
) -> OutfitRecommendation:
    return OutfitRecommendation(
        recommendation_id=_new_id(prefix),
        name=name,
        items=items,
        occasion=occasion,
        confidence=calculate_outfit_match_score(items),
    )


def generate_recommendations(
    wardrobe_items: Sequence[WardrobeItem],
    today: date,
    count: int = 3,
    rng: Optional[random.Random] = None,
    match_threshold: float = DEFAULT_MATCH_THRESHOLD,
    accessory_threshold: float = DEFAULT_ACCESSORY_THRESHOLD,
) -> List[OutfitRecommendation]:
    """Build ``count`` seasonal outfits, best color matches first.

    Tops then bottoms are tried as seeds (at most ``2 * count`` of them) and
    kept when the outfit has three or more items and scores above
    ``match_threshold``. Remaining slots are padded with random
    top/bottom/footwear combinations.
    """

    _check_count(count)
    rng = rng or random.Random()
    if len(wardrobe_items) < 2:
        raise InsufficientWardrobe("Not enough items in wardrobe to generate recommendations")

    season = current_season(today)
    seasonal = filter_by_season(list(wardrobe_items), season).items
    if len(seasonal) < 2:
        raise InsufficientWardrobe(f"Not enough items for {season.label} season")

    grouped = _core_buckets(seasonal, "")
    tops, bottoms, footwear = grouped[ItemCategory.TOP], grouped[ItemCategory.BOTTOM], grouped[ItemCategory.FOOTWEAR]

    recommendations: List[OutfitRecommendation] = []
    for seed in (tops + bottoms)[: count * 2]:
        if len(recommendations) >= count:
            break
        outfit = generate_outfit_from_item(seed, seasonal, accessory_threshold)
        if len(outfit) < 3:
            continue
        score = calculate_outfit_match_score(outfit)
        if score > match_threshold:
            recommendations.append(
                OutfitRecommendation(
                    recommendation_id=_new_id(),
                    name=f"{seed.style.value.title()} Outfit",
                    items=outfit,
                    occasion=_occasion_for(seed.style),
                    confidence=score,
                )
            )

    matched = len(recommendations)
    while len(recommendations) < count:
        top = rng.choice(tops)
        recommendations.append(
            _recommend([top, rng.choice(bottoms), rng.choice(footwear)], f"{top.style.value.title()} Outfit",
                       _occasion_for(top.style))
        )

    logger.info(
        "Generated %s recommendations for %s (%s matched, %s padded)",
        len(recommendations),
        season.value,
        matched,
        len(recommendations) - matched,
    )
    return recommendations


def recommendation_for_item(
    seed: WardrobeItem,
    wardrobe_items: Sequence[WardrobeItem],
    accessory_threshold: float = DEFAULT_ACCESSORY_THRESHOLD,
) -> OutfitRecommendation:
    """Complete a single outfit around ``seed``."""

    outfit = generate_outfit_from_item(seed, wardrobe_items, accessory_threshold)
    return _recommend(outfit, f"{seed.name} Outfit", _occasion_for(seed.style))


def recommendations_for_occasion(
    wardrobe_items: Sequence[WardrobeItem], occasion: str, count: int = 3, min_items: int = DEFAULT_MIN_ITEMS
) -> List[OutfitRecommendation]:
    """Pair tops with bottoms and footwear whose style suits ``occasion``."""

    _check_count(count)
    filtered = filter_by_occasion(list(wardrobe_items), occasion)
    if len(filtered.items) < min_items:
        raise InsufficientWardrobe(f"Not enough items for {occasion} occasion")
    grouped = _core_buckets(filtered.items, f" for {occasion} occasion")
    tops, bottoms, footwear = grouped[ItemCategory.TOP], grouped[ItemCategory.BOTTOM], grouped[ItemCategory.FOOTWEAR]

    return [
        _recommend(
            [tops[index], bottoms[index % len(bottoms)], footwear[index % len(footwear)]],
            f"{occasion} Outfit {index + 1}",
            occasion,
        )
        for index in range(min(count, len(tops)))
    ]


def recommendations_for_season(
    wardrobe_items: Sequence[WardrobeItem],
    season: Season | str,
    count: int = 3,
    min_items: int = DEFAULT_MIN_ITEMS,
) -> List[OutfitRecommendation]:
    """Pair in-season tops, bottoms and footwear by index."""

    _check_count(count)
    season = coerce_enum(Season, season)
    filtered = filter_by_season(list(wardrobe_items), season)
    if len(filtered.items) < min_items:
        raise InsufficientWardrobe(f"Not enough items for {season.label} season")
    grouped = _core_buckets(filtered.items, f" for {season.label} season")
    tops, bottoms, footwear = grouped[ItemCategory.TOP], grouped[ItemCategory.BOTTOM], grouped[ItemCategory.FOOTWEAR]

    limit = min(count, len(tops), len(bottoms), len(footwear))
    return [
        _recommend(
            [tops[index], bottoms[index], footwear[index]],
            f"{season.label} Outfit {index + 1}",
            f"{season.label} day",
        )
        for index in range(limit)
    ]


def recommendations_for_style(
    wardrobe_items: Sequence[WardrobeItem],
    style: ItemStyle | str,
    count: int = 3,
    min_items: int = DEFAULT_MIN_ITEMS,
) -> List[OutfitRecommendation]:
    """Pair tops, bottoms and footwear of one style, wrapping shorter buckets."""

    _check_count(count)
    style = coerce_enum(ItemStyle, style)
    filtered = filter_by_style(list(wardrobe_items), [style])
    if len(filtered.items) < min_items:
        raise InsufficientWardrobe(f"Not enough items for {style.value} style")
    grouped = _core_buckets(filtered.items, f" for {style.value} style")
    tops, bottoms, footwear = grouped[ItemCategory.TOP], grouped[ItemCategory.BOTTOM], grouped[ItemCategory.FOOTWEAR]

    return [
        _recommend(
            [tops[index % len(tops)], bottoms[index % len(bottoms)], footwear[index % len(footwear)]],
            f"{style.value.title()} Outfit {index + 1}",
            _occasion_for(style),
        )
        for index in range(count)
    ]


def gap_recommendations(
    seed: WardrobeItem,
    wardrobe_items: Sequence[WardrobeItem],
    today: date,
    count: int = 3,
    max_distance: float = DEFAULT_MATCH_DISTANCE,
) -> List[OutfitRecommendation]:
    """Suggest alternative outfits around a fixed seed, listing unfilled slots.

    Confidence starts at 0.8 and drops by 0.1 per successive variation.
    """

    _check_count(count)
    variations = fill_outfit_gaps(seed, wardrobe_items, current_season(today), count, max_distance)
    recommendations = []
    for variation in variations:
        confidence = max(0.0, round(GAP_BASE_CONFIDENCE - GAP_CONFIDENCE_STEP * variation.variation, 2))
        recommendations.append(
            OutfitRecommendation(
                recommendation_id=f"gap-rec-{variation.variation}",
                name=f"Outfit with {seed.name}",
                items=variation.items,
                occasion=seed.style.value,
                confidence=confidence,
                missing_items=[
                    MissingItem(category=category, description=f"Add a {category.value} to complete this outfit")
                    for category in variation.missing_categories
                ],
            )
        )
    return recommendations


def weather_recommendations(
    wardrobe_items: Sequence[WardrobeItem], weather: WeatherConditions, rng: Optional[random.Random] = None
) -> List[OutfitRecommendation]:
    """Random outfits from items suited to the temperature.

    Rainy, cold (below 10°C) and hot (above 25°C) conditions each add a
    themed outfit before the general one; empty outfits are skipped.
    """

    rng = rng or random.Random()
    season = season_for_temperature(weather.temperature)
    seasonal = filter_by_season(list(wardrobe_items), season).items
    conditions = weather.conditions.lower()

    themes = []
    if conditions == "rainy":
        themes.append(("Rainy Day Outfit", "Rainy day"))
    if weather.temperature < 10:
        themes.append(("Cold Weather Ensemble", "Cold day"))
    if weather.temperature > 25:
        themes.append(("Hot Weather Outfit", "Hot day"))
    themes.append((f"{conditions.capitalize()} Day Outfit", "Everyday"))

    recommendations = []
    for name, occasion in themes:
        outfit = assemble_random_outfit(seasonal, weather, rng)
        if not outfit:
            continue
        recommendations.append(
            OutfitRecommendation(
                recommendation_id=_new_id("weather"),
                name=name,
                items=outfit,
                occasion=occasion,
                confidence=WEATHER_CONFIDENCE,
                weather_conditions=weather.conditions,
                temperature=weather.temperature,
            )
        )
    logger.info(
        "Weather recommendations for %s°C %s targeting %s -> %s",
        weather.temperature,
        conditions,
        season.value,
        len(recommendations),
    )
    return recommendations


__all__ = [
    "DEFAULT_MATCH_THRESHOLD",
    "DEFAULT_MIN_ITEMS",
    "generate_recommendations",
    "recommendation_for_item",
    "recommendations_for_occasion",
    "recommendations_for_season",
    "recommendations_for_style",
    "gap_recommendations",
    "weather_recommendations",
]
