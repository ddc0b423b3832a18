"""In-memory event store: the authoritative collection for one session."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any
from uuid import uuid4

from pydantic import ValidationError

from lifeline.feed.schemas import CreateEventRequest, PatchEventRequest
from lifeline.models import UNKNOWN_CATEGORY, Category, Event

logger = logging.getLogger(__name__)


class EventStore:
    """Owns the session's events and the static category taxonomy.

    Events keep insertion order. Every mutation either succeeds completely
    or raises and leaves the store untouched.
    """

    def __init__(
        self,
        categories: Iterable[Category] = (),
        events: Iterable[Event] = (),
    ) -> None:
        self._categories: dict[str, Category] = {}
        for category in categories:
            if category.id in self._categories:
                raise EventValidationError(f"Duplicate category id: {category.id}")
            self._categories[category.id] = category

        self._events: dict[str, Event] = {}
        for event in events:
            if event.id in self._events:
                raise EventValidationError(f"Duplicate event id: {event.id}")
            self._events[event.id] = event

    def __len__(self) -> int:
        return len(self._events)

    # -- Reads --

    def list_events(self) -> list[Event]:
        """Snapshot of all events in insertion order."""
        return list(self._events.values())

    def list_categories(self) -> list[Category]:
        return list(self._categories.values())

    def get_event(self, event_id: str) -> Event:
        try:
            return self._events[event_id]
        except KeyError:
            raise EventNotFoundError(event_id) from None

    def resolve_category(self, category_id: str) -> Category:
        """Look up a category, falling back to UNKNOWN_CATEGORY for dangling ids."""
        return self._categories.get(category_id, UNKNOWN_CATEGORY)

    # -- Mutations --

    def add_event(self, data: CreateEventRequest | Mapping[str, Any]) -> Event:
        """Create an event with a fresh id and append it.

        Raises EventValidationError if the title is empty, the date is not a
        calendar date, or any field is malformed.
        """
        try:
            request = (
                data
                if isinstance(data, CreateEventRequest)
                else CreateEventRequest.model_validate(data)
            )
            event = Event(id=str(uuid4()), **request.model_dump())
        except ValidationError as e:
            raise EventValidationError(_describe(e)) from e

        self._warn_if_dangling(event)
        self._events[event.id] = event
        logger.info("Added event %s (%s) on %s", event.id, event.title, event.date)
        return event

    def update_event(
        self, event_id: str, data: PatchEventRequest | Mapping[str, Any]
    ) -> Event:
        """Apply the fields present in ``data`` to an existing event.

        The event keeps its id and its position in insertion order.
        """
        current = self.get_event(event_id)
        try:
            request = (
                data
                if isinstance(data, PatchEventRequest)
                else PatchEventRequest.model_validate(data)
            )
            changes = {name: getattr(request, name) for name in request.model_fields_set}
            # model_copy(update=...) skips validators
            updated = Event.model_validate({**current.model_dump(), **changes})
        except ValidationError as e:
            raise EventValidationError(_describe(e)) from e

        if updated == current:
            return current

        if updated.category_id != current.category_id:
            self._warn_if_dangling(updated)
        self._events[event_id] = updated
        logger.info("Updated event %s: %s", event_id, ", ".join(sorted(changes)))
        return updated

    def remove_event(self, event_id: str) -> None:
        if event_id not in self._events:
            raise EventNotFoundError(event_id)
        del self._events[event_id]
        logger.info("Removed event %s", event_id)

    def _warn_if_dangling(self, event: Event) -> None:
        if event.category_id not in self._categories:
            logger.warning(
                "Event %s references unknown category %r", event.id, event.category_id
            )


def _describe(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one readable line."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(loc) for loc in detail["loc"]) or "event"
        parts.append(f"{location}: {detail['msg']}")
    return "; ".join(parts)


class EventNotFoundError(Exception):
    def __init__(self, event_id: str) -> None:
        self.event_id = event_id
        super().__init__(f"Event not found: {event_id}")


class EventValidationError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid event: {message}")
