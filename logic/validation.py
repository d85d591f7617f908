"""Pydantic schemas and helpers for validating tool and HTTP payloads."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from models.body_types import BodyMeasurements
from models.color_theory import normalize_hex
from models.taxonomy import (
    ColorHarmony,
    EyeColor,
    Gender,
    HairColor,
    ItemCategory,
    ItemStyle,
    Season,
    SkinTone,
    coerce_enum,
)


class WardrobeItemInput(BaseModel):
    """Input contract for adding a wardrobe item."""

    model_config = ConfigDict(extra="forbid")

    item_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    category: ItemCategory
    style: ItemStyle
    colors: List[str] = Field(default_factory=list)
    seasons: List[Season] = Field(default_factory=list)
    subcategory: Optional[str] = None
    fabric: Optional[str] = None
    image_url: Optional[str] = None
    is_favorite: bool = False

    @field_validator("colors")
    @classmethod
    def _validate_colors(cls, colors: List[str]) -> List[str]:
        return [normalize_hex(color) for color in colors]


class ColorProfileRequest(BaseModel):
    """Natural coloring used to pick a color season and palette."""

    skin_tone: SkinTone
    hair_color: HairColor
    eye_color: EyeColor


class StyleProfileRequest(BaseModel):
    """Body data used to classify a body type."""

    gender: Gender
    height_cm: float = Field(gt=0, allow_inf_nan=False)
    weight_kg: float = Field(gt=0, allow_inf_nan=False)
    measurements: Optional[BodyMeasurements] = None


class HarmonyRequest(BaseModel):
    base_color: str
    harmony: ColorHarmony = ColorHarmony.COMPLEMENTARY
    candidate_colors: List[str] = Field(default_factory=list)
    max_distance: Optional[float] = Field(default=None, ge=0)

    @field_validator("harmony", mode="before")
    @classmethod
    def _coerce_harmony(cls, value: Any) -> Any:
        try:
            return coerce_enum(ColorHarmony, value)
        except ValueError:
            return value


class RecommendationRequest(BaseModel):
    """Shared envelope for recommendation calls against a stored wardrobe."""

    user_id: str = Field(min_length=1)
    count: Optional[int] = Field(default=None, ge=0, le=20)


class ItemRecommendationRequest(BaseModel):
    user_id: str = Field(min_length=1)
    item_id: str = Field(min_length=1)


class OccasionRecommendationRequest(RecommendationRequest):
    occasion: str = Field(min_length=1)


class SeasonRecommendationRequest(RecommendationRequest):
    season: Season


class StyleRecommendationRequest(RecommendationRequest):
    style: ItemStyle


class WeatherRecommendationRequest(BaseModel):
    user_id: str = Field(min_length=1)
    temperature: float = Field(ge=-60, le=60, allow_inf_nan=False)
    conditions: str = Field(min_length=1)


class GapRecommendationRequest(ItemRecommendationRequest):
    count: Optional[int] = Field(default=None, ge=0, le=20)


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = exc.errors(include_url=False, include_context=False, include_input=False)
    return ValidationResult(message=message, details=details).model_dump()


__all__ = [
    "WardrobeItemInput",
    "ColorProfileRequest",
    "StyleProfileRequest",
    "HarmonyRequest",
    "RecommendationRequest",
    "ItemRecommendationRequest",
    "OccasionRecommendationRequest",
    "SeasonRecommendationRequest",
    "StyleRecommendationRequest",
    "WeatherRecommendationRequest",
    "GapRecommendationRequest",
    "ValidationResult",
    "validation_failure",
]
