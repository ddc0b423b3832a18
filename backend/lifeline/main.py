"""Lifeline entry point: wires settings, seed data and the timeline service."""

import logging

from lifeline.config import Settings, configure_logging
from lifeline.events.projector import FeedProjector
from lifeline.events.store import EventStore
from lifeline.feed.service import TimelineService
from lifeline.seed import load_seed

logger = logging.getLogger(__name__)


def create_timeline(settings: Settings | None = None) -> TimelineService:
    """Build a fresh session: seeded store, projector and empty filters."""
    settings = settings or Settings()
    seed = load_seed(settings.seed_path)

    store = EventStore(seed.categories, seed.events)
    service = TimelineService(store, FeedProjector())

    logger.info(
        "Timeline ready with %d events across %d categories",
        len(store), len(seed.categories),
    )
    return service


def bootstrap() -> TimelineService:
    """Read settings from the environment, configure logging, build the timeline."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    return create_timeline(settings)
