"""Seasonal color analysis and palette lookups."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

from models.taxonomy import ColorSeason, EyeColor, HairColor, SkinTone, coerce_enum

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColorPalette:
    """Primary, neutral and accent colors that flatter a color season."""

    season: ColorSeason
    primary_colors: List[str]
    neutral_colors: List[str]
    accent_colors: List[str]


_SEASON_PALETTES: Dict[ColorSeason, ColorPalette] = {
    ColorSeason.SPRING: ColorPalette(
        season=ColorSeason.SPRING,
        primary_colors=["#ff9e2c", "#4dbd74", "#f2545b", "#ffcf40", "#93d2c2"],
        neutral_colors=["#e8d9a9", "#e6e6fa", "#f5f5dc", "#fffff0"],
        accent_colors=["#e34234", "#ff8c69", "#00bfff", "#3cb371"],
    ),
    ColorSeason.SUMMER: ColorPalette(
        season=ColorSeason.SUMMER,
        primary_colors=["#7eb0d5", "#8fbbb9", "#9a8fb8", "#d189b9", "#c0a9bd"],
        neutral_colors=["#f0f0f0", "#d6e2e9", "#e6e6e6", "#f5f5f5"],
        accent_colors=["#cf71af", "#8673a1", "#a6bcde", "#5da9a7"],
    ),
    ColorSeason.AUTUMN: ColorPalette(
        season=ColorSeason.AUTUMN,
        primary_colors=["#a65c32", "#9b7653", "#806b3c", "#665d4e", "#8b5a2b"],
        neutral_colors=["#f5deb3", "#d3c4a2", "#d2b48c", "#c4b298"],
        accent_colors=["#d2691e", "#cd5c5c", "#556b2f", "#8b4513"],
    ),
    ColorSeason.WINTER: ColorPalette(
        season=ColorSeason.WINTER,
        primary_colors=["#0000ff", "#800080", "#ff0000", "#006400", "#000080"],
        neutral_colors=["#ffffff", "#000000", "#808080", "#f0f8ff"],
        accent_colors=["#ff00ff", "#00ffff", "#ffff00", "#ff1493"],
    ),
}

# Flat palettes keyed by "{skin}-{hair}-{eye}", used at sign-up.
COLOR_PALETTE_RECOMMENDATIONS: Dict[str, List[str]] = {
    "medium-brown-brown": ["#3b82f6", "#10b981", "#f59e0b", "#6b7280", "#1f2937"],
    "fair-blonde-blue": ["#3b82f6", "#06b6d4", "#8b5cf6", "#f43f5e", "#0f172a"],
    "olive-black-brown": ["#f97316", "#0891b2", "#a16207", "#84cc16", "#7c2d12"],
    "default": ["#3b82f6", "#10b981", "#f59e0b", "#6b7280", "#1f2937"],
}


def determine_color_season(
    skin_tone: SkinTone | str, hair_color: HairColor | str, eye_color: EyeColor | str
) -> ColorSeason:
    """Classify natural coloring into a color season.

    Rules are checked Winter, Spring, Summer, Autumn and the first match wins;
    when none match the skin tone alone decides.
    """

    skin = coerce_enum(SkinTone, skin_tone)
    hair = coerce_enum(HairColor, hair_color)
    eyes = coerce_enum(EyeColor, eye_color)

    # High contrast, cool undertones.
    if (skin is SkinTone.FAIR and hair in {HairColor.BLACK, HairColor.BROWN}) or (
        skin is SkinTone.DARK and eyes in {EyeColor.BLACK, EyeColor.BROWN}
    ):
        return ColorSeason.WINTER
    # Warm, clear, light.
    if (
        skin in {SkinTone.FAIR, SkinTone.LIGHT}
        and hair in {HairColor.BLONDE, HairColor.RED}
        and eyes in {EyeColor.BLUE, EyeColor.GREEN}
    ):
        return ColorSeason.SPRING
    # Cool, soft, muted.
    if (
        skin in {SkinTone.LIGHT, SkinTone.MEDIUM}
        and hair in {HairColor.BLONDE, HairColor.BROWN}
        and eyes in {EyeColor.BLUE, EyeColor.GRAY}
    ):
        return ColorSeason.SUMMER
    # Warm, rich, golden.
    if (
        skin in {SkinTone.MEDIUM, SkinTone.OLIVE, SkinTone.BROWN}
        and hair in {HairColor.BROWN, HairColor.RED}
        and eyes in {EyeColor.BROWN, EyeColor.HAZEL, EyeColor.AMBER}
    ):
        return ColorSeason.AUTUMN

    if skin in {SkinTone.FAIR, SkinTone.LIGHT}:
        return ColorSeason.SUMMER
    if skin in {SkinTone.BROWN, SkinTone.DARK}:
        return ColorSeason.WINTER
    return ColorSeason.AUTUMN


def get_color_palette_for_season(season: ColorSeason | str | None) -> ColorPalette:
    """Return the static :class:`ColorPalette` for ``season``.

    Defaults to the autumn palette when an unsupported season is provided.
    """

    try:
        key = coerce_enum(ColorSeason, season)
    except ValueError:
        logger.info("Unknown color season '%s', defaulting to autumn palette", season)
        key = ColorSeason.AUTUMN
    palette = _SEASON_PALETTES[key]
    return ColorPalette(
        season=palette.season,
        primary_colors=list(palette.primary_colors),
        neutral_colors=list(palette.neutral_colors),
        accent_colors=list(palette.accent_colors),
    )


def get_recommended_color_palette(
    skin_tone: SkinTone | str, hair_color: HairColor | str, eye_color: EyeColor | str
) -> List[str]:
    """Return the flat five-color palette for an exact attribute combination."""

    parts = []
    for value in (skin_tone, hair_color, eye_color):
        parts.append(value.value if isinstance(value, Enum) else str(value).strip().lower())
    key = "-".join(parts)
    if key not in COLOR_PALETTE_RECOMMENDATIONS:
        logger.debug("No curated palette for %s, using default", key)
    return list(COLOR_PALETTE_RECOMMENDATIONS.get(key, COLOR_PALETTE_RECOMMENDATIONS["default"]))


__all__ = [
    "ColorPalette",
    "COLOR_PALETTE_RECOMMENDATIONS",
    "determine_color_season",
    "get_color_palette_for_season",
    "get_recommended_color_palette",
]
