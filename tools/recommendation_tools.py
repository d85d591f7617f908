"""Tool wrappers binding a wardrobe store to the recommendation engine.

The pure functions in :mod:`logic.recommendations` take the wardrobe, the
reference date and the random source as arguments. This wrapper supplies
them from the store, an injectable clock and a seeded ``random.Random`` and
returns plain dictionaries ready for JSON encoding.
"""

from __future__ import annotations

import random
from dataclasses import asdict
from datetime import date
from functools import partial
from typing import Any, Callable, Dict, List, Mapping, Optional

from logic.recommendations import (
    gap_recommendations,
    generate_recommendations,
    recommendation_for_item,
    recommendations_for_occasion,
    recommendations_for_season,
    recommendations_for_style,
    weather_recommendations,
)
from logic.validation import (
    ColorProfileRequest,
    HarmonyRequest,
    StyleProfileRequest,
    validation_failure,
)
from models.body_types import get_style_recommendations
from models.color_theory import generate_color_matches, get_color_harmony
from models.errors import WardrobeItemNotFound
from models.outfit import OutfitRecommendation, WeatherConditions
from models.palettes import (
    determine_color_season,
    get_color_palette_for_season,
    get_recommended_color_palette,
)
from models.wardrobe_item import WardrobeItem
from stylist_app.config import StylistConfig
from tools.observability import instrument_tool
from tools.wardrobe_store import InMemoryWardrobeStore, WardrobeStore


def _serialise(recommendations: List[OutfitRecommendation]) -> List[Dict[str, Any]]:
    return [asdict(recommendation) for recommendation in recommendations]


class RecommendationTools:
    """Expose outfit, palette and body-type recommendations as tools."""

    def __init__(
        self,
        store: Optional[WardrobeStore] = None,
        config: Optional[StylistConfig] = None,
        clock: Callable[[], date] = date.today,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.store = store or InMemoryWardrobeStore()
        self.config = config or StylistConfig()
        self.clock = clock
        self.rng = rng or random.Random(self.config.random_seed)

    def _wardrobe(self, user_id: str) -> List[WardrobeItem]:
        return self.store.list_items_for_user(user_id)

    def _seed(self, user_id: str, item_id: str) -> WardrobeItem:
        item = self.store.get_item(user_id, item_id)
        if item is None:
            raise WardrobeItemNotFound(f"Wardrobe item '{item_id}' not found")
        return item

    def _count(self, count: Optional[int]) -> int:
        return self.config.default_recommendation_count if count is None else count

    @instrument_tool("generate_recommendations")
    def generate(self, user_id: str, count: Optional[int] = None) -> List[Dict[str, Any]]:
        recommendations = generate_recommendations(
            self._wardrobe(user_id),
            today=self.clock(),
            count=self._count(count),
            rng=self.rng,
            match_threshold=self.config.match_threshold,
            accessory_threshold=self.config.accessory_threshold,
        )
        return _serialise(recommendations)

    @instrument_tool("recommend_for_item")
    def for_item(self, user_id: str, item_id: str) -> Dict[str, Any]:
        seed = self._seed(user_id, item_id)
        recommendation = recommendation_for_item(
            seed, self._wardrobe(user_id), accessory_threshold=self.config.accessory_threshold
        )
        return asdict(recommendation)

    @instrument_tool("recommend_for_occasion")
    def for_occasion(self, user_id: str, occasion: str, count: Optional[int] = None) -> List[Dict[str, Any]]:
        return _serialise(
            recommendations_for_occasion(
                self._wardrobe(user_id), occasion, self._count(count), self.config.min_filtered_items
            )
        )

    @instrument_tool("recommend_for_season")
    def for_season(self, user_id: str, season: str, count: Optional[int] = None) -> List[Dict[str, Any]]:
        return _serialise(
            recommendations_for_season(
                self._wardrobe(user_id), season, self._count(count), self.config.min_filtered_items
            )
        )

    @instrument_tool("recommend_for_style")
    def for_style(self, user_id: str, style: str, count: Optional[int] = None) -> List[Dict[str, Any]]:
        return _serialise(
            recommendations_for_style(
                self._wardrobe(user_id), style, self._count(count), self.config.min_filtered_items
            )
        )

    @instrument_tool("recommend_for_weather")
    def for_weather(self, user_id: str, temperature: float, conditions: str) -> List[Dict[str, Any]]:
        weather = WeatherConditions(temperature=temperature, conditions=conditions)
        return _serialise(weather_recommendations(self._wardrobe(user_id), weather, self.rng))

    @instrument_tool("fill_outfit_gaps")
    def fill_gaps(self, user_id: str, item_id: str, count: Optional[int] = None) -> List[Dict[str, Any]]:
        seed = self._seed(user_id, item_id)
        return _serialise(
            gap_recommendations(
                seed,
                self._wardrobe(user_id),
                today=self.clock(),
                count=self._count(count),
                max_distance=self.config.color_match_distance,
            )
        )

    @instrument_tool(
        "color_profile",
        input_model=ColorProfileRequest,
        on_validation_error=partial(validation_failure, "Invalid color profile payload"),
    )
    def color_profile(self, skin_tone: str, hair_color: str, eye_color: str) -> Dict[str, Any]:
        season = determine_color_season(skin_tone, hair_color, eye_color)
        return {
            "color_season": season.value,
            "palette": asdict(get_color_palette_for_season(season)),
            "recommended_colors": get_recommended_color_palette(skin_tone, hair_color, eye_color),
        }

    @instrument_tool(
        "style_profile",
        input_model=StyleProfileRequest,
        on_validation_error=partial(validation_failure, "Invalid style profile payload"),
    )
    def style_profile(
        self,
        gender: str,
        height_cm: float,
        weight_kg: float,
        measurements: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        return asdict(get_style_recommendations(gender, height_cm, weight_kg, measurements))

    @instrument_tool(
        "color_harmony",
        input_model=HarmonyRequest,
        on_validation_error=partial(validation_failure, "Invalid color harmony payload"),
    )
    def color_harmony(
        self,
        base_color: str,
        harmony: str = "complementary",
        candidate_colors: Optional[List[str]] = None,
        max_distance: Optional[float] = None,
    ) -> Dict[str, Any]:
        distance = self.config.color_match_distance if max_distance is None else max_distance
        return {
            "base_color": base_color,
            "harmony": harmony,
            "colors": get_color_harmony(base_color, harmony),
            "matches": generate_color_matches(base_color, candidate_colors or [], harmony, distance),
        }


__all__ = ["RecommendationTools"]
