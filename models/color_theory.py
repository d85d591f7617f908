"""Hex/HSL conversion and curated color harmony helpers for outfit matching."""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Sequence, Tuple

from models.errors import InvalidColorFormat
from models.taxonomy import ColorHarmony, coerce_enum

logger = logging.getLogger(__name__)

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")

MAX_COLOR_DISTANCE = math.sqrt(3 * 255**2)
DEFAULT_MATCH_DISTANCE = 150.0

# Whites, blacks and grays pair with anything.
_NEUTRAL_COLORS = {
    "#ffffff",
    "#f8fafc",
    "#f1f5f9",
    "#e2e8f0",
    "#000000",
    "#1f2937",
    "#6b7280",
}

_COLOR_FAMILIES: List[Sequence[str]] = [
    ("#3b82f6", "#06b6d4", "#0284c7", "#0ea5e9"),  # blue
    ("#10b981", "#84cc16", "#22c55e", "#16a34a"),  # green
    ("#f97316", "#f59e0b", "#eab308", "#facc15"),  # orange / yellow
    ("#8b5cf6", "#a855f7", "#d946ef", "#ec4899"),  # purple / pink
    ("#7c2d12", "#92400e", "#a16207", "#b45309"),  # brown
]

_COMPLEMENTARY_PAIRS = {
    ("#3b82f6", "#f97316"),  # blue & orange
    ("#10b981", "#f43f5e"),  # green & red
    ("#8b5cf6", "#f59e0b"),  # purple & yellow
    ("#06b6d4", "#f97316"),  # cyan & orange
    ("#84cc16", "#8b5cf6"),  # lime & purple
}

# Hue offsets in degrees for the rotation-based harmonies.
_HUE_ROTATIONS: Dict[ColorHarmony, Tuple[int, ...]] = {
    ColorHarmony.ANALOGOUS: (30, -30),
    ColorHarmony.COMPLEMENTARY: (180,),
    ColorHarmony.TRIADIC: (120, 240),
    ColorHarmony.SPLIT_COMPLEMENTARY: (150, 210),
}


@dataclass(frozen=True)
class HSL:
    """Hue in degrees, saturation and lightness in percent."""

    h: int
    s: int
    l: int  # noqa: E741

    def __post_init__(self) -> None:
        if not 0 <= self.h <= 360:
            raise ValueError(f"Hue must be within 0..360, got {self.h}")
        if not 0 <= self.s <= 100 or not 0 <= self.l <= 100:
            raise ValueError(f"Saturation and lightness must be within 0..100, got s={self.s} l={self.l}")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp_percent(value: int) -> int:
    return max(0, min(100, value))


def normalize_hex(color: str) -> str:
    """Return ``color`` as a lowercase ``#rrggbb`` string.

    Raises :class:`InvalidColorFormat` unless the input is exactly six hex
    digits, optionally prefixed with ``#``.
    """

    match = _HEX_PATTERN.match(str(color).strip()) if color is not None else None
    if not match:
        raise InvalidColorFormat(f"Invalid hex color '{color}': expected 6 hex digits")
    return f"#{match.group(1).lower()}"


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    digits = normalize_hex(color)[1:]
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def hex_to_hsl(color: str) -> HSL:
    """Convert an sRGB hex color to integer HSL.

    Grays (``r == g == b``) have zero hue and saturation.
    """

    r, g, b = (channel / 255 for channel in hex_to_rgb(color))
    high, low = max(r, g, b), min(r, g, b)
    lightness = (high + low) / 2
    hue = 0.0
    saturation = 0.0

    if high != low:
        delta = high - low
        saturation = delta / (2 - high - low) if lightness > 0.5 else delta / (high + low)
        if high == r:
            hue = (g - b) / delta + (6 if g < b else 0)
        elif high == g:
            hue = (b - r) / delta + 2
        else:
            hue = (r - g) / delta + 4
        hue /= 6

    return HSL(
        h=_round_half_up(hue * 360) % 360,
        s=_round_half_up(saturation * 100),
        l=_round_half_up(lightness * 100),
    )


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_hex(hsl: HSL) -> str:
    """Convert integer HSL back to a lowercase ``#rrggbb`` string."""

    hue = hsl.h / 360
    saturation = hsl.s / 100
    lightness = hsl.l / 100

    if saturation == 0:
        r = g = b = lightness
    else:
        q = lightness * (1 + saturation) if lightness < 0.5 else lightness + saturation - lightness * saturation
        p = 2 * lightness - q
        r = _hue_to_rgb(p, q, hue + 1 / 3)
        g = _hue_to_rgb(p, q, hue)
        b = _hue_to_rgb(p, q, hue - 1 / 3)

    return "#" + "".join(f"{_round_half_up(channel * 255):02x}" for channel in (r, g, b))


def color_distance(color1: str, color2: str) -> float:
    """Euclidean distance between two colors in raw RGB space."""

    r1, g1, b1 = hex_to_rgb(color1)
    r2, g2, b2 = hex_to_rgb(color2)
    return math.sqrt((r2 - r1) ** 2 + (g2 - g1) ** 2 + (b2 - b1) ** 2)


def _lookup_key(color: str) -> str:
    key = str(color).strip().lower()
    return key if key.startswith("#") else f"#{key}"


def are_colors_complementary(color1: str, color2: str) -> bool:
    """Return True when two colors pair well according to the curated tables.

    A neutral on either side always matches; otherwise both colors must share
    a color family or form one of the classic complementary pairs.
    """

    c1, c2 = _lookup_key(color1), _lookup_key(color2)
    if c1 in _NEUTRAL_COLORS or c2 in _NEUTRAL_COLORS:
        return True
    if any(c1 in family and c2 in family for family in _COLOR_FAMILIES):
        return True
    result = (c1, c2) in _COMPLEMENTARY_PAIRS or (c2, c1) in _COMPLEMENTARY_PAIRS
    logger.debug("complementary check (%s, %s) -> %s", c1, c2, result)
    return result


def get_complementary_color(color: str) -> str:
    """Return the RGB inversion of ``color``."""

    return "#" + "".join(f"{255 - channel:02x}" for channel in hex_to_rgb(color))


def get_color_harmony(base_color: str, harmony: ColorHarmony | str) -> List[str]:
    """Derive the harmony target colors for ``base_color``.

    The base color is always returned first, unchanged.
    """

    harmony = coerce_enum(ColorHarmony, harmony)
    base = hex_to_hsl(base_color)

    if harmony is ColorHarmony.MONOCHROMATIC:
        variants = [
            replace(base, s=_clamp_percent(base.s - 30)),
            replace(base, l=_clamp_percent(base.l + 20)),
            replace(base, l=_clamp_percent(base.l - 20)),
        ]
    else:
        variants = [replace(base, h=(base.h + offset) % 360) for offset in _HUE_ROTATIONS[harmony]]

    colors = [base_color] + [hsl_to_hex(variant) for variant in variants]
    logger.debug("%s harmony for %s -> %s", harmony.value, base_color, colors)
    return colors


def generate_color_matches(
    base_color: str,
    candidate_colors: Iterable[str],
    harmony: ColorHarmony | str = ColorHarmony.COMPLEMENTARY,
    max_distance: float = DEFAULT_MATCH_DISTANCE,
) -> List[str]:
    """Pick, for each harmony target, the closest candidate within ``max_distance``.

    Results follow harmony-target order and may repeat a candidate when two
    targets share the same nearest color.
    """

    candidates = list(candidate_colors)
    base_key = normalize_hex(base_color)
    matches: List[str] = []
    for target in get_color_harmony(base_color, harmony):
        if normalize_hex(target) == base_key:
            continue
        closest = None
        closest_distance = math.inf
        for candidate in candidates:
            distance = color_distance(target, candidate)
            if distance < closest_distance:
                closest, closest_distance = candidate, distance
        if closest is not None and closest_distance < max_distance:
            matches.append(closest)
    logger.debug("color matches for %s (%s) -> %s", base_color, harmony, matches)
    return matches


__all__ = [
    "HSL",
    "MAX_COLOR_DISTANCE",
    "DEFAULT_MATCH_DISTANCE",
    "normalize_hex",
    "hex_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "color_distance",
    "are_colors_complementary",
    "get_complementary_color",
    "get_color_harmony",
    "generate_color_matches",
]
