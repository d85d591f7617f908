"""Simple entrypoint to run the Wardrobe Stylist against the demo wardrobe."""

import json

from models.errors import InsufficientWardrobe
from stylist_app.app import WardrobeStylistApp
from tools.sample_data import DEMO_USER_ID, demo_wardrobe


def main() -> None:
    app = WardrobeStylistApp()
    app.load_wardrobe(demo_wardrobe())
    try:
        result = app.daily_outfits(DEMO_USER_ID)
    except InsufficientWardrobe as exc:
        print(json.dumps({"status": "insufficient_wardrobe", "message": str(exc)}))
        return
    for outfit in result["outfits"]:
        names = ", ".join(item["name"] for item in outfit["items"])
        print(json.dumps({"name": outfit["name"], "confidence": outfit["confidence"], "items": names}))


if __name__ == "__main__":
    main()
