"""Shared pytest fixtures for Lifeline tests."""

import pytest

from lifeline.events.projector import FeedProjector
from lifeline.events.store import EventStore
from lifeline.feed.service import TimelineService
from lifeline.feed.state import FilterState
from lifeline.seed import load_seed


@pytest.fixture
def seed():
    """The packaged seed data (five categories, six sample events)."""
    return load_seed()


@pytest.fixture
def event_store(seed):
    """EventStore seeded with the sample taxonomy and events."""
    return EventStore(seed.categories, seed.events)


@pytest.fixture
def empty_store(seed):
    """EventStore with the sample taxonomy and no events."""
    return EventStore(seed.categories)


@pytest.fixture
def projector():
    return FeedProjector()


@pytest.fixture
def filter_state():
    return FilterState()


@pytest.fixture
def timeline(event_store):
    """TimelineService over the seeded store with empty filters."""
    return TimelineService(event_store)
