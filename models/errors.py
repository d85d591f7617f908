"""Error taxonomy shared by the color, classification and outfit modules."""


class WardrobeStylistError(Exception):
    """Base class for domain errors raised by the stylist engine."""


class InvalidColorFormat(WardrobeStylistError, ValueError):
    """Raised when a color string is not six hex digits with an optional ``#``."""


class InsufficientWardrobe(WardrobeStylistError, ValueError):
    """Raised when a wardrobe cannot supply the items a recommendation needs."""


class InvalidMeasurements(WardrobeStylistError, ValueError):
    """Raised when body measurements are negative, non-numeric or unknown."""


class WardrobeItemNotFound(WardrobeStylistError, LookupError):
    """Raised when a seed item id is not in the user's wardrobe."""


__all__ = [
    "WardrobeStylistError",
    "InvalidColorFormat",
    "InsufficientWardrobe",
    "InvalidMeasurements",
    "WardrobeItemNotFound",
]
