"""Shared test helpers."""

from datetime import date
from typing import Any
from uuid import uuid4

from lifeline.feed.state import FilterState
from lifeline.models import Category, Event


def make_event(
    event_id: str | None = None,
    title: str = "Test Event",
    description: str = "",
    event_date: date | str = "2025-01-01",
    category_id: str = "personal",
    **overrides: Any,
) -> Event:
    """Create an Event for testing."""
    return Event(
        id=event_id or str(uuid4()),
        title=title,
        description=description,
        date=event_date,
        category_id=category_id,
        **overrides,
    )


def make_category(category_id: str = "personal", name: str | None = None) -> Category:
    return Category(
        id=category_id,
        name=name or category_id.title(),
        color_token="bg-blue-500",
    )


def make_filter(query: str = "", categories: set[str] | None = None) -> FilterState:
    """Create a FilterState with the given query and selected category ids."""
    return FilterState(query=query, selected_category_ids=set(categories or ()))


def new_event_data(**overrides: Any) -> dict[str, Any]:
    """Valid add_event payload, with any field overridden."""
    data: dict[str, Any] = {
        "title": "Moved House",
        "description": "New apartment downtown",
        "date": "2025-02-01",
        "category_id": "personal",
        "media": [],
        "privacy": "private",
    }
    data.update(overrides)
    return data


def titles(events: list[Event]) -> list[str]:
    return [e.title for e in events]
