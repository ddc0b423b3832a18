"""Request and response schemas for timeline event operations."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from lifeline.models import EventDate, Privacy

# -- Requests --


class CreateEventRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str
    description: str = ""
    date: EventDate
    category_id: str
    media: list[str] = Field(default_factory=list)
    privacy: Privacy = "private"


class PatchEventRequest(BaseModel):
    """Fields to update on an event. Only fields present in the request are changed."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    description: str | None = None
    date: EventDate | None = None
    category_id: str | None = None
    privacy: Privacy | None = None


# -- Responses --


class EventCard(BaseModel):
    """Display-ready view of one event with its category resolved."""

    event_id: str
    title: str
    description: str
    date: dt.date
    display_date: str
    category_id: str
    category_name: str
    color_token: str
    media: list[str] = Field(default_factory=list)
    privacy: Privacy
    privacy_label: str
