"""Timeline events: in-memory event store and feed projection."""

from lifeline.events.projector import FeedProjector
from lifeline.events.store import EventNotFoundError, EventStore, EventValidationError

__all__ = ["EventNotFoundError", "EventStore", "EventValidationError", "FeedProjector"]
