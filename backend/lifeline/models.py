"""Canonical data structures for Lifeline.

Defined once here, referenced everywhere else. Categories form the static
taxonomy; Events are immutable value objects owned by the EventStore.
"""

import datetime as dt
from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from lifeline.utils.dates import parse_event_date

Privacy = Literal["private", "friends", "public"]

# Calendar date only; strings must be ISO YYYY-MM-DD.
EventDate = Annotated[dt.date, BeforeValidator(parse_event_date)]

PRIVACY_LABELS: dict[str, str] = {
    "private": "Private",
    "friends": "Friends",
    "public": "Public",
}

# ---------------------------------------------------------------------------
# Category taxonomy
# ---------------------------------------------------------------------------


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    color_token: str  # opaque styling reference, never interpreted


UNKNOWN_CATEGORY = Category(id="unknown", name="Unknown", color_token="bg-gray-500")


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class Event(BaseModel):
    """A single dated entry in the timeline."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    title: str
    description: str = ""
    date: EventDate
    category_id: str
    media: tuple[str, ...] = ()
    privacy: Privacy = "private"

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be empty")
        return value

    @property
    def privacy_label(self) -> str:
        return PRIVACY_LABELS[self.privacy]
