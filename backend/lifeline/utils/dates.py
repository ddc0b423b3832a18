"""Calendar-date parsing and display helpers.

Events carry dates without time-of-day semantics, so everything here
normalizes to `datetime.date`.
"""

from datetime import date, datetime

_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def parse_event_date(raw: object) -> date:
    """Coerce a date, datetime, or ISO ``YYYY-MM-DD`` string to a date.

    Datetimes are reduced to their calendar date. Raises ValueError for
    anything else, including strings that are not real calendar dates
    (e.g. ``"2025-02-30"``).
    """
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            raise ValueError(f"not a valid calendar date: {raw!r}") from None
    raise ValueError(f"expected a date or ISO date string, got {type(raw).__name__}")


def format_display_date(value: date) -> str:
    """Format a date the way timeline cards show it: ``Jan 15, 2025``.

    Month names are fixed en-US abbreviations, independent of locale.
    """
    return f"{_MONTH_ABBR[value.month - 1]} {value.day}, {value.year}"
