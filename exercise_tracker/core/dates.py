"""Date Rendering — ISO day strings in, human-readable day strings out.

Invariants:
    - Stored dates are plain YYYY-MM-DD strings (lexicographic order == chronological order)
    - "Today" is always the UTC calendar day
    - Unparseable dates render as "Invalid Date", never raise

Design Decisions:
    - Dates kept as strings end to end: range filters compare strings, so whatever the
      caller sent is stored as-is and only interpreted at render time
"""

from datetime import date, datetime, timezone

EPOCH_DAY = "1970-01-01"
INVALID_DATE = "Invalid Date"

_DISPLAY_FORMAT = "%a %b %d %Y"


def today_iso() -> str:
    """Current UTC date as YYYY-MM-DD."""
    return datetime.now(timezone.utc).date().isoformat()


def epoch_iso() -> str:
    return EPOCH_DAY


def parse_day(value: str | None) -> date | None:
    """Parse an ISO day (or ISO datetime) string into a date, None if unparseable."""
    if not value:
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    # datetimes with an offset resolve to their UTC day
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()


def to_date_string(value: str | None) -> str:
    """Render a stored day as e.g. 'Mon Jan 01 2024'."""
    day = parse_day(value)
    if day is None:
        return INVALID_DATE
    return day.strftime(_DISPLAY_FORMAT)
