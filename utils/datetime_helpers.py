"""Date/time helpers for backend timestamps and display."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from flask import current_app


def get_timezone() -> ZoneInfo:
    """Get the configured display timezone."""
    tz_name = current_app.config.get('TIMEZONE', 'Africa/Nairobi')
    return ZoneInfo(tz_name)


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string, the format stored in timestamptz columns."""
    return datetime.now(timezone.utc).isoformat()


def parse_timestamp(value) -> datetime | None:
    """
    Parse a backend timestamp into an aware datetime.

    Accepts datetime objects and ISO strings (including a trailing 'Z').
    Naive values are treated as UTC.
    """
    if not value:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(str(value).replace('Z', '+00:00'))
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
