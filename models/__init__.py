"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.wardrobe_item import WardrobeItem, from_raw_metadata

__all__ = ["WardrobeItem", "from_raw_metadata"]
