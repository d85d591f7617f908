"""Canonical taxonomy definitions for wardrobe items and personal coloring.

This module centralises the closed label sets used across the engine:
categories, styles and season tags for wardrobe items, the physical
attributes used for color analysis, and the color seasons and harmonies.
Helper functions keep coercion of free-form labels consistent.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, List, Type, TypeVar

E = TypeVar("E", bound=Enum)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class ItemCategory(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    FOOTWEAR = "footwear"
    OUTERWEAR = "outerwear"
    ACCESSORY = "accessory"
    DRESS = "dress"
    UNDERWEAR = "underwear"
    LOUNGEWEAR = "loungewear"
    SPORTSWEAR = "sportswear"
    FORMAL = "formal"


class ItemStyle(str, Enum):
    CASUAL = "casual"
    FORMAL = "formal"
    BUSINESS = "business"
    SPORTY = "sporty"
    STREETWEAR = "streetwear"
    VINTAGE = "vintage"
    BOHO = "boho"
    PREPPY = "preppy"
    MINIMAL = "minimal"
    GLAM = "glam"


class Season(str, Enum):
    """Calendar season tag carried by wardrobe items."""

    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"
    ALL_YEAR = "all-year"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").title()


class SkinTone(str, Enum):
    FAIR = "fair"
    LIGHT = "light"
    MEDIUM = "medium"
    OLIVE = "olive"
    BROWN = "brown"
    DARK = "dark"


class HairColor(str, Enum):
    BLACK = "black"
    BROWN = "brown"
    BLONDE = "blonde"
    RED = "red"
    GRAY = "gray"


class EyeColor(str, Enum):
    BROWN = "brown"
    BLUE = "blue"
    GREEN = "green"
    HAZEL = "hazel"
    GRAY = "gray"
    AMBER = "amber"
    BLACK = "black"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    NON_BINARY = "non-binary"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer-not-to-say"


class ColorSeason(str, Enum):
    """Seasonal color archetype describing a person's natural coloring."""

    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"


class ColorHarmony(str, Enum):
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    MONOCHROMATIC = "monochromatic"
    SPLIT_COMPLEMENTARY = "split-complementary"


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy value.

    ``SplitComplementary``, ``split_complementary`` and ``Split Complementary``
    all become ``split-complementary``.
    """

    return _CAMEL_BOUNDARY.sub("-", value.strip()).lower().replace("_", "-").replace(" ", "-")


def coerce_enum(enum_cls: Type[E], value: object) -> E:
    """Coerce an enum member or a free-form label into ``enum_cls``.

    Raises a :class:`ValueError` if the label is not part of the taxonomy.
    """

    if isinstance(value, enum_cls):
        return value
    key = _normalize_key(str(value.value if isinstance(value, Enum) else value))
    try:
        return enum_cls(key)
    except ValueError:
        allowed = [member.value for member in enum_cls]
        raise ValueError(f"Unsupported {enum_cls.__name__} '{value}'. Allowed: {allowed}") from None


def normalise_seasons(values: Iterable[object]) -> List[Season]:
    """Coerce and deduplicate season tags preserving their order."""

    normalised: List[Season] = []
    for value in values:
        season = coerce_enum(Season, value)
        if season not in normalised:
            normalised.append(season)
    return normalised


__all__ = [
    "ItemCategory",
    "ItemStyle",
    "Season",
    "SkinTone",
    "HairColor",
    "EyeColor",
    "Gender",
    "ColorSeason",
    "ColorHarmony",
    "coerce_enum",
    "normalise_seasons",
]
