"""Wardrobe Stylist app bootstrap."""

from __future__ import annotations

import logging
import random
from datetime import date
from typing import Callable, Iterable

from stylist_app.config import StylistConfig
from stylist_app.logging_config import configure_logging, correlation_context, get_logger, log_event
from models.wardrobe_item import WardrobeItem
from tools.recommendation_tools import RecommendationTools
from tools.wardrobe_store import InMemoryWardrobeStore, WardrobeStore
from tools.wardrobe_tools import WardrobeTools


LOGGER = get_logger(__name__)


class WardrobeStylistApp:
    """Wires together configuration, logging, the wardrobe store and tools."""

    def __init__(
        self,
        config: StylistConfig | None = None,
        store: WardrobeStore | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.config = config or StylistConfig.from_env()
        configure_logging(self.config.log_level)

        self.wardrobe_store = store or InMemoryWardrobeStore()
        self.wardrobe_tools = WardrobeTools(self.wardrobe_store)
        self.recommendation_tools = RecommendationTools(
            store=self.wardrobe_store,
            config=self.config,
            clock=clock,
            rng=random.Random(self.config.random_seed),
        )
        log_event(
            LOGGER,
            logging.INFO,
            "app_initialised",
            environment=self.config.environment or "local",
            store=type(self.wardrobe_store).__name__,
        )

    def load_wardrobe(self, items: Iterable[WardrobeItem]) -> int:
        """Bulk insert ``items`` into the store and return how many were added."""

        count = 0
        for item in items:
            self.wardrobe_store.create_item(item)
            count += 1
        return count

    def daily_outfits(self, user_id: str, count: int | None = None) -> dict:
        """Recommend outfits for today with a scoped correlation id."""

        with correlation_context() as correlation_id:
            log_event(
                LOGGER,
                logging.INFO,
                "app_call_started",
                method="daily_outfits",
                user_id=user_id,
                correlation_id=correlation_id,
            )
            outfits = self.recommendation_tools.generate(user_id=user_id, count=count)
            log_event(
                LOGGER,
                logging.INFO,
                "app_call_completed",
                method="daily_outfits",
                correlation_id=correlation_id,
                outfit_count=len(outfits),
            )
            return {"status": "ok", "outfits": outfits}


__all__ = ["WardrobeStylistApp"]
