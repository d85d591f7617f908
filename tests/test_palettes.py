"""Color season classification and palette lookup tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.color_theory import normalize_hex
from models.palettes import (
    COLOR_PALETTE_RECOMMENDATIONS,
    determine_color_season,
    get_color_palette_for_season,
    get_recommended_color_palette,
)
from models.taxonomy import ColorSeason, EyeColor, HairColor, SkinTone


@pytest.mark.parametrize(
    "skin, hair, eyes, expected",
    [
        (SkinTone.FAIR, HairColor.BLONDE, EyeColor.BLUE, ColorSeason.SPRING),
        (SkinTone.DARK, HairColor.BLACK, EyeColor.BROWN, ColorSeason.WINTER),
        (SkinTone.FAIR, HairColor.BROWN, EyeColor.GREEN, ColorSeason.WINTER),
        (SkinTone.LIGHT, HairColor.BROWN, EyeColor.GRAY, ColorSeason.SUMMER),
        (SkinTone.OLIVE, HairColor.RED, EyeColor.HAZEL, ColorSeason.AUTUMN),
    ],
)
def test_attribute_cascade(skin, hair, eyes, expected) -> None:
    assert determine_color_season(skin, hair, eyes) is expected


@pytest.mark.parametrize(
    "skin, expected",
    [
        (SkinTone.FAIR, ColorSeason.SUMMER),
        (SkinTone.LIGHT, ColorSeason.SUMMER),
        (SkinTone.MEDIUM, ColorSeason.AUTUMN),
        (SkinTone.OLIVE, ColorSeason.AUTUMN),
        (SkinTone.BROWN, ColorSeason.WINTER),
        (SkinTone.DARK, ColorSeason.WINTER),
    ],
)
def test_skin_tone_fallback(skin, expected) -> None:
    """Gray hair and amber eyes match no rule, leaving skin tone to decide."""

    assert determine_color_season(skin, HairColor.GRAY, EyeColor.AMBER) is expected


def test_cascade_accepts_string_labels() -> None:
    assert determine_color_season("Fair", "blonde", "BLUE") is ColorSeason.SPRING
    with pytest.raises(ValueError):
        determine_color_season("green", "blonde", "blue")


@pytest.mark.parametrize("season", list(ColorSeason))
def test_palettes_match_their_season_and_shape(season: ColorSeason) -> None:
    palette = get_color_palette_for_season(season)
    assert palette.season is season
    assert 4 <= len(palette.primary_colors) <= 5
    assert len(palette.neutral_colors) == 4
    assert len(palette.accent_colors) == 4
    for color in palette.primary_colors + palette.neutral_colors + palette.accent_colors:
        assert normalize_hex(color) == color


def test_unknown_season_defaults_to_autumn() -> None:
    assert get_color_palette_for_season("monsoon").season is ColorSeason.AUTUMN
    assert get_color_palette_for_season(None).season is ColorSeason.AUTUMN


def test_palette_lookups_return_copies() -> None:
    palette = get_color_palette_for_season(ColorSeason.WINTER)
    palette.primary_colors.append("#123456")
    assert "#123456" not in get_color_palette_for_season(ColorSeason.WINTER).primary_colors


def test_recommended_palette_exact_keys_and_default() -> None:
    assert get_recommended_color_palette(SkinTone.MEDIUM, HairColor.BROWN, EyeColor.BROWN) == [
        "#3b82f6",
        "#10b981",
        "#f59e0b",
        "#6b7280",
        "#1f2937",
    ]
    assert get_recommended_color_palette("fair", "blonde", "blue") == COLOR_PALETTE_RECOMMENDATIONS[
        "fair-blonde-blue"
    ]
    assert get_recommended_color_palette("dark", "red", "green") == COLOR_PALETTE_RECOMMENDATIONS["default"]


def test_recommended_palette_is_a_copy() -> None:
    colors = get_recommended_color_palette("olive", "black", "brown")
    colors.clear()
    assert len(COLOR_PALETTE_RECOMMENDATIONS["olive-black-brown"]) == 5
