"""Helpers shared by the Supabase repositories."""

from datetime import date, datetime


def to_row(payload: dict[str, object]) -> dict[str, object]:
    """Convert a payload into JSON-safe column values."""
    row: dict[str, object] = {}
    for key, value in payload.items():
        if isinstance(value, date | datetime):
            row[key] = value.isoformat()
        else:
            row[key] = value
    return row


def parse_date(value: object) -> date:
    """Parse a YYYY-MM-DD column value."""
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def parse_datetime(value: object) -> datetime | None:
    """Parse an ISO timestamp column value."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None


def optional_int(value: object) -> int | None:
    """Return the value as int, or None when empty."""
    if value is None or value == "":
        return None
    return int(value)
