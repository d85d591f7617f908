"""Body-type classification and the style guidance attached to each type."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from models.errors import InvalidMeasurements
from models.taxonomy import Gender, coerce_enum

logger = logging.getLogger(__name__)

CURVE_THRESHOLD_CM = 9
HOURGLASS_BALANCE_CM = 5
V_SHAPE_THRESHOLD_CM = 20
ATHLETIC_THRESHOLD_CM = 10
BMI_UNDERWEIGHT = 18.5
BMI_OVERWEIGHT = 25


class BodyMeasurements(BaseModel):
    """Body measurements in centimetres. Zero or missing means not measured."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    bust: Optional[float] = Field(default=None, ge=0)
    waist: Optional[float] = Field(default=None, ge=0)
    hips: Optional[float] = Field(default=None, ge=0)
    shoulders: Optional[float] = Field(default=None, ge=0)
    inseam: Optional[float] = Field(default=None, ge=0)


@dataclass(frozen=True)
class StyleRecommendation:
    body_type: str
    recommended_styles: List[str] = field(default_factory=list)
    avoid_styles: List[str] = field(default_factory=list)
    accent_features: List[str] = field(default_factory=list)


def _guide(body_type: str, recommended: List[str], avoid: List[str], accents: List[str]) -> StyleRecommendation:
    return StyleRecommendation(
        body_type=body_type, recommended_styles=recommended, avoid_styles=avoid, accent_features=accents
    )


_FEMALE_GUIDES: Dict[str, StyleRecommendation] = {
    "Hourglass": _guide(
        "Hourglass",
        ["Wrap dresses", "Belted garments", "High-waisted pants", "Fitted jackets", "V-neck tops"],
        ["Boxy cuts", "Shapeless garments", "Drop waists", "Overly baggy clothing"],
        ["Defined waist", "Balanced proportions"],
    ),
    "Pear": _guide(
        "Pear",
        ["A-line skirts", "Boot-cut jeans", "Statement tops", "Structured shoulders", "V-necks"],
        ["Skinny jeans", "Pencil skirts", "Tapered pants", "Large pockets on hips"],
        ["Upper body", "Shoulders"],
    ),
    "Inverted Triangle": _guide(
        "Inverted Triangle",
        ["Full skirts", "Wide-leg pants", "Layered bottoms", "V-neck tops", "Empire waists"],
        ["Boat necks", "Overly detailed tops", "Peplum tops", "Shoulder pads"],
        ["Lower body", "Waist"],
    ),
    "Rectangle": _guide(
        "Rectangle",
        ["Belted garments", "Peplum tops", "Layered clothing", "Cinched waists", "Wrap dresses"],
        ["Shapeless garments", "Straight cuts", "Overly loose clothing"],
        ["Create waist definition", "Add curves"],
    ),
    "Apple": _guide(
        "Apple",
        ["Empire waists", "A-line dresses", "Vertical patterns", "V-necks", "Flared bottoms"],
        ["Clingy fabrics", "Belts at natural waist", "Overly tight tops", "Pleated pants"],
        ["Legs", "Bust", "Arms"],
    ),
}

_FEMALE_DEFAULT = _guide(
    "Average",
    ["Balanced proportions", "Well-fitted clothing", "Classical cuts", "Layered outfits"],
    ["Extremely oversized", "Extremely fitted"],
    ["Overall balanced look"],
)

_MALE_GUIDES: Dict[str, StyleRecommendation] = {
    "V-Shape": _guide(
        "V-Shape",
        ["Fitted shirts", "Structured jackets", "Straight-leg pants", "Layered tops", "Well-tailored suits"],
        ["Overly slim pants", "Oversized tops", "Excessively tight shirts"],
        ["Broad shoulders", "Chest"],
    ),
    "Athletic": _guide(
        "Athletic",
        ["Tailored clothing", "Structured garments", "Fitted shirts", "Classic cuts", "Slim-fit jeans"],
        ["Extremely loose clothing", "Shapeless garments"],
        ["Overall proportioned physique"],
    ),
    "Rectangle": _guide(
        "Rectangle",
        ["Layered looks", "Structured shoulders", "Textured fabrics", "Horizontal patterns", "Pocket details"],
        ["Vertical stripes", "Monochromatic looks", "Overly fitted shirts"],
        ["Create visual interest", "Add dimension"],
    ),
    "Oval": _guide(
        "Oval",
        ["Structured jackets", "Vertical patterns", "Dark colors", "V-neck tops", "Well-fitted (not tight) clothing"],
        ["Tight-fitting clothes", "Horizontal stripes", "Bulky layers", "Low-rise pants"],
        ["Create vertical lines", "Elongate silhouette"],
    ),
}

_MALE_DEFAULT = _guide(
    "Average",
    ["Well-fitted clothing", "Classic cuts", "Balanced proportions"],
    ["Extremely oversized", "Extremely fitted"],
    ["Overall balanced look"],
)


def parse_measurements(measurements: Mapping[str, object] | BodyMeasurements | None) -> BodyMeasurements:
    """Validate raw measurements, raising :class:`InvalidMeasurements` on bad input."""

    if isinstance(measurements, BodyMeasurements):
        return measurements
    try:
        return BodyMeasurements.model_validate(dict(measurements or {}))
    except (ValidationError, TypeError, ValueError) as exc:
        raise InvalidMeasurements(f"Invalid body measurements: {exc}") from exc


def _positive(name: str, value: object) -> float:
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise InvalidMeasurements(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(number) or number <= 0:
        raise InvalidMeasurements(f"{name} must be a positive number, got {value!r}")
    return number


def _bmi_label(bmi: float, middle: str) -> str:
    if bmi < BMI_UNDERWEIGHT:
        return "Slim"
    if bmi < BMI_OVERWEIGHT:
        return middle
    return "Full"


def _female_body_type(m: BodyMeasurements, bmi: float) -> str:
    if not (m.bust and m.waist and m.hips):
        return _bmi_label(bmi, "Average")
    bust_to_waist = m.bust - m.waist
    hips_to_waist = m.hips - m.waist
    if bust_to_waist < CURVE_THRESHOLD_CM and hips_to_waist < CURVE_THRESHOLD_CM:
        return "Rectangle"
    if hips_to_waist < CURVE_THRESHOLD_CM:
        return "Inverted Triangle"
    if bust_to_waist < CURVE_THRESHOLD_CM:
        return "Pear"
    if abs(m.bust - m.hips) < HOURGLASS_BALANCE_CM:
        return "Hourglass"
    return "Apple" if m.bust > m.hips else "Pear"


def _male_body_type(m: BodyMeasurements, bmi: float) -> str:
    if not (m.shoulders and m.waist):
        return _bmi_label(bmi, "Athletic")
    shoulder_to_waist = m.shoulders - m.waist
    if shoulder_to_waist >= V_SHAPE_THRESHOLD_CM:
        return "V-Shape"
    if shoulder_to_waist >= ATHLETIC_THRESHOLD_CM:
        return "Athletic"
    if m.waist > m.shoulders:
        return "Oval"
    return "Rectangle"


def classify_body_type(
    gender: Gender | str,
    height_cm: float,
    weight_kg: float,
    measurements: Mapping[str, object] | BodyMeasurements | None = None,
) -> str:
    """Return a body-type label from measurements, falling back to BMI bands."""

    gender = coerce_enum(Gender, gender)
    height = _positive("height_cm", height_cm)
    weight = _positive("weight_kg", weight_kg)
    parsed = parse_measurements(measurements)
    bmi = weight / (height / 100) ** 2
    if gender is Gender.FEMALE:
        return _female_body_type(parsed, bmi)
    return _male_body_type(parsed, bmi)


def get_style_recommendations(
    gender: Gender | str,
    height_cm: float,
    weight_kg: float,
    measurements: Mapping[str, object] | BodyMeasurements | None = None,
) -> StyleRecommendation:
    """Return the style guidance for the classified body type."""

    body_type = classify_body_type(gender, height_cm, weight_kg, measurements)
    if coerce_enum(Gender, gender) is Gender.FEMALE:
        guide = _FEMALE_GUIDES.get(body_type, _FEMALE_DEFAULT)
    else:
        guide = _MALE_GUIDES.get(body_type, _MALE_DEFAULT)
    logger.info("Classified body type %s -> guidance %s", body_type, guide.body_type)
    return StyleRecommendation(
        body_type=guide.body_type,
        recommended_styles=list(guide.recommended_styles),
        avoid_styles=list(guide.avoid_styles),
        accent_features=list(guide.accent_features),
    )


__all__ = [
    "BodyMeasurements",
    "StyleRecommendation",
    "parse_measurements",
    "classify_body_type",
    "get_style_recommendations",
]
