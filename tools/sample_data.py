"""Demo wardrobe used by the local entrypoint and tests."""

from __future__ import annotations

from typing import Any, Dict, List

from models.wardrobe_item import WardrobeItem, from_raw_metadata

DEMO_USER_ID = "demo-user"

_DEMO_ITEMS: List[Dict[str, Any]] = [
    {
        "item_id": "white-shirt",
        "name": "White Button-Up Shirt",
        "category": "top",
        "subcategory": "Button-Up",
        "fabric": "Cotton",
        "style": "formal",
        "colors": ["#ffffff"],
        "is_favorite": True,
        "seasons": ["spring", "summer", "fall", "winter"],
    },
    {
        "item_id": "navy-chinos",
        "name": "Navy Blue Chinos",
        "category": "bottom",
        "subcategory": "Pants",
        "fabric": "Cotton",
        "style": "business",
        "colors": ["#1f2937"],
        "is_favorite": True,
        "seasons": ["spring", "fall", "winter"],
    },
    {
        "item_id": "brown-oxfords",
        "name": "Brown Leather Shoes",
        "category": "footwear",
        "subcategory": "Oxfords",
        "fabric": "Leather",
        "style": "formal",
        "colors": ["#92400e"],
        "seasons": ["fall", "winter"],
    },
    {
        "item_id": "black-tee",
        "name": "Black T-Shirt",
        "category": "top",
        "subcategory": "T-Shirt",
        "fabric": "Cotton",
        "style": "casual",
        "colors": ["#000000"],
        "is_favorite": True,
        "seasons": ["spring", "summer", "fall"],
    },
    {
        "item_id": "blue-jeans",
        "name": "Blue Jeans",
        "category": "bottom",
        "subcategory": "Jeans",
        "fabric": "Denim",
        "style": "casual",
        "colors": ["#3b82f6"],
        "is_favorite": True,
        "seasons": ["spring", "fall", "winter"],
    },
    {
        "item_id": "white-sneakers",
        "name": "White Sneakers",
        "category": "footwear",
        "subcategory": "Sneakers",
        "fabric": "Canvas",
        "style": "casual",
        "colors": ["#ffffff"],
        "seasons": ["spring", "summer"],
    },
    {
        "item_id": "navy-blazer",
        "name": "Navy Blue Blazer",
        "category": "outerwear",
        "subcategory": "Blazer",
        "fabric": "Wool",
        "style": "formal",
        "colors": ["#1e3a8a"],
        "is_favorite": True,
        "seasons": ["fall", "winter"],
    },
]


def demo_wardrobe(user_id: str = DEMO_USER_ID) -> List[WardrobeItem]:
    """Return fresh copies of the demo wardrobe owned by ``user_id``."""

    return [from_raw_metadata({**raw, "user_id": user_id}) for raw in _DEMO_ITEMS]


__all__ = ["DEMO_USER_ID", "demo_wardrobe"]
