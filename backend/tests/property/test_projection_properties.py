"""Property test: FeedProjector invariants.

Uses hypothesis to generate random event sets and filter states and checks
that projection never fabricates, duplicates, or misorders events.
"""

from datetime import date

from hypothesis import given, settings, strategies as st

from lifeline.events.projector import FeedProjector
from lifeline.feed.state import FilterState
from lifeline.models import Event

CATEGORY_IDS = ["personal", "work", "education", "travel", "health", "ghost"]
WORDS = ["job", "Trip", "doctor", "ROME", "party", "course", ""]

projector = FeedProjector()


@st.composite
def events_strategy(draw):
    """Lists of events with unique ids and a narrow date range to force ties."""
    count = draw(st.integers(min_value=0, max_value=25))
    events = []
    for i in range(count):
        events.append(Event(
            id=f"e{i}",
            title=draw(st.sampled_from(WORDS[:-1])) + f" {i}",
            description=draw(st.sampled_from(WORDS)),
            date=draw(st.dates(min_value=date(2025, 1, 1), max_value=date(2025, 1, 10))),
            category_id=draw(st.sampled_from(CATEGORY_IDS)),
        ))
    return events


filter_strategy = st.builds(
    FilterState,
    query=st.sampled_from(["", " ", "job", "o", "rome", "PARTY", "zzz"]),
    selected_category_ids=st.sets(st.sampled_from(CATEGORY_IDS), max_size=3),
)


@given(events=events_strategy(), filter_state=filter_strategy)
@settings(max_examples=200)
def test_output_is_subset_without_duplicates(events, filter_state):
    result = projector.project(events, filter_state)
    ids = [e.id for e in result]
    assert len(ids) == len(set(ids))
    assert set(ids) <= {e.id for e in events}


@given(events=events_strategy(), filter_state=filter_strategy)
@settings(max_examples=200)
def test_output_sorted_and_stable(events, filter_state):
    """Non-decreasing dates; same-day events keep their input order."""
    result = projector.project(events, filter_state)
    position = {e.id: i for i, e in enumerate(events)}
    for earlier, later in zip(result, result[1:]):
        assert earlier.date <= later.date
        if earlier.date == later.date:
            assert position[earlier.id] < position[later.id]


@given(events=events_strategy())
def test_identity_filter_keeps_every_event(events):
    result = projector.project(events, FilterState())
    assert sorted(e.id for e in result) == sorted(e.id for e in events)


@given(events=events_strategy(), filter_state=filter_strategy)
def test_projection_is_idempotent(events, filter_state):
    once = projector.project(events, filter_state)
    assert projector.project(once, filter_state) == once


@given(events=events_strategy(), filter_state=filter_strategy)
def test_every_survivor_satisfies_the_filters(events, filter_state):
    for event in projector.project(events, filter_state):
        if filter_state.query.strip():
            needle = filter_state.query.casefold()
            assert needle in event.title.casefold() or needle in event.description.casefold()
        if filter_state.selected_category_ids:
            assert event.category_id in filter_state.selected_category_ids
