"""
Miscellaneous utility helper functions.
Provides common functionality used across the application.
"""

import re
import uuid
from collections import OrderedDict

from utils.datetime_helpers import get_timezone, parse_timestamp


def format_date(value, format_str: str = '%b %d, %Y') -> str:
    """
    Format a date or timestamp for display.

    Args:
        value: ISO date/timestamp string or datetime
        format_str: Output format (default: 'Jan 05, 2026')

    Returns:
        Formatted date string, or the original value if it cannot be parsed
    """
    parsed = parse_timestamp(value)
    if parsed is None:
        return value or ''
    if 'T' in str(value) or ':' in str(value):
        parsed = parsed.astimezone(get_timezone())
    return parsed.strftime(format_str)


def slugify(text: str) -> str:
    """
    Build a URL-safe identifier from free text.

    'Mara Serena Lodge!' -> 'mara-serena-lodge'
    """
    return re.sub(r'[^a-z0-9]+', '-', (text or '').lower()).strip('-')


def new_row_key() -> str:
    """Synthetic key for one repeated form row, independent of its position."""
    return uuid.uuid4().hex[:10]


def parse_list_field(form, name: str) -> list:
    """
    Collect a repeated text field (images, highlights, tags, ...).

    Blank entries are dropped; order is preserved.

    Args:
        form: werkzeug MultiDict (request.form)
        name: Field name repeated once per entry

    Returns:
        List of stripped, non-empty strings
    """
    return [value.strip() for value in form.getlist(name) if value and value.strip()]


def parse_row_group(form, prefix: str, fields) -> list:
    """
    Collect repeated multi-field rows keyed by a synthetic row key.

    Inputs are named '<prefix>-<row_key>-<field>'. Rows are returned in the
    order their first input appears in the form; rows whose fields are all
    blank are dropped.

    Args:
        form: werkzeug MultiDict (request.form)
        prefix: Row group name (e.g. 'nearby_attractions')
        fields: Field names each row carries

    Returns:
        List of dicts with one key per field
    """
    pattern = re.compile(rf'^{re.escape(prefix)}-([A-Za-z0-9_]+)-({"|".join(map(re.escape, fields))})$')
    rows = OrderedDict()

    for key in form.keys():
        match = pattern.match(key)
        if not match:
            continue
        row_key, field = match.groups()
        rows.setdefault(row_key, {name: '' for name in fields})
        rows[row_key][field] = (form.get(key) or '').strip()

    return [row for row in rows.values() if any(row.values())]


def to_int(value, default=None):
    """Convert a form value to int, returning default when blank or invalid."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def to_float(value, default=None):
    """Convert a form value to float, returning default when blank or invalid."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def truncate_text(text: str, max_length: int = 100, suffix: str = '...') -> str:
    """
    Truncate text to maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if not text or len(text) <= max_length:
        return text or ''

    return text[:max_length - len(suffix)] + suffix
