"""Feed projector: projects store contents and filter state into the visible feed.

The read side of the timeline. Filters are independent predicates applied in
any order; the date sort always runs last.
"""

from collections.abc import Callable, Iterable

from lifeline.feed.state import FilterState
from lifeline.models import Event


class FeedProjector:
    """Computes the visible, date-ordered event list. Holds no state."""

    def __init__(self) -> None:
        self._filters: list[Callable[[Event, FilterState], bool]] = [
            self._matches_query,
            self._matches_categories,
        ]

    def project(self, events: Iterable[Event], filter_state: FilterState) -> list[Event]:
        """Filter, then stable-sort ascending by date.

        Events sharing a date keep their relative input order. Never raises;
        an empty input or an all-excluding filter yields an empty list.
        """
        visible = [
            event
            for event in events
            if all(matches(event, filter_state) for matches in self._filters)
        ]
        # sorted() is stable, which is what keeps same-day events in input order
        return sorted(visible, key=lambda event: event.date)

    @staticmethod
    def _matches_query(event: Event, filter_state: FilterState) -> bool:
        if not filter_state.has_query:
            return True
        needle = filter_state.query.casefold()
        return needle in event.title.casefold() or needle in event.description.casefold()

    @staticmethod
    def _matches_categories(event: Event, filter_state: FilterState) -> bool:
        if not filter_state.selected_category_ids:
            return True
        return event.category_id in filter_state.selected_category_ids
