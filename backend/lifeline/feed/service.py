"""Timeline service: coordinates EventStore, FeedProjector and FilterState."""

from collections.abc import Mapping
from typing import Any

from lifeline.events.projector import FeedProjector
from lifeline.events.store import EventStore
from lifeline.feed.schemas import CreateEventRequest, EventCard, PatchEventRequest
from lifeline.feed.state import FilterState
from lifeline.models import Category, Event
from lifeline.utils.dates import format_display_date


class TimelineService:
    """One session's timeline: the store, the current filters, and the feed.

    Nothing is cached. Every read of the feed re-runs the projection over the
    current store contents and filter state, so callers simply re-render
    after any mutation.
    """

    def __init__(
        self,
        store: EventStore,
        projector: FeedProjector | None = None,
        filter_state: FilterState | None = None,
    ) -> None:
        self._store = store
        self._projector = projector or FeedProjector()
        self.filter_state = filter_state if filter_state is not None else FilterState()

    # -- Feed --

    def visible_events(self) -> list[Event]:
        return self._projector.project(self._store.list_events(), self.filter_state)

    def cards(self) -> list[EventCard]:
        """The visible feed as display-ready cards."""
        return [self._card_for(event) for event in self.visible_events()]

    def list_categories(self) -> list[Category]:
        return self._store.list_categories()

    # -- Filter state --

    def search(self, query: str) -> list[Event]:
        self.filter_state.set_query(query)
        return self.visible_events()

    def toggle_category(self, category_id: str) -> list[Event]:
        self.filter_state.toggle_category(category_id)
        return self.visible_events()

    def clear_filters(self) -> list[Event]:
        self.filter_state.clear()
        return self.visible_events()

    # -- Mutations --

    def add_event(self, data: CreateEventRequest | Mapping[str, Any]) -> Event:
        return self._store.add_event(data)

    def update_event(
        self, event_id: str, data: PatchEventRequest | Mapping[str, Any]
    ) -> Event:
        return self._store.update_event(event_id, data)

    def remove_event(self, event_id: str) -> None:
        self._store.remove_event(event_id)

    def _card_for(self, event: Event) -> EventCard:
        category = self._store.resolve_category(event.category_id)
        return EventCard(
            event_id=event.id,
            title=event.title,
            description=event.description,
            date=event.date,
            display_date=format_display_date(event.date),
            category_id=event.category_id,
            category_name=category.name,
            color_token=category.color_token,
            media=list(event.media),
            privacy=event.privacy,
            privacy_label=event.privacy_label,
        )
