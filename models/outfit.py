"""Outfit recommendation schemas."""

from dataclasses import dataclass, field
from typing import List, Optional

from models.taxonomy import ItemCategory
from models.wardrobe_item import WardrobeItem


@dataclass
class MissingItem:
    """Placeholder for a slot the wardrobe could not fill."""

    category: ItemCategory
    description: str
    subcategory: Optional[str] = None
    colors: List[str] = field(default_factory=list)


@dataclass
class WeatherConditions:
    temperature: float
    conditions: str


@dataclass
class OutfitRecommendation:
    """A transient, ranked outfit suggestion built from wardrobe items."""

    recommendation_id: str
    name: str
    items: List[WardrobeItem]
    confidence: float
    occasion: Optional[str] = None
    missing_items: List[MissingItem] = field(default_factory=list)
    weather_conditions: Optional[str] = None
    temperature: Optional[float] = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1], got {self.confidence}")
