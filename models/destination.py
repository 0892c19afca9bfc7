"""
Destination data access functions.
"""

from database import get_db, DESTINATIONS_TABLE
from database.schema import DESTINATION_COLUMNS, only_columns
from utils.messages import get_message
from utils.validators import validate_url, validate_hex_color

REQUIRED_FIELDS = (
    ('name', 'Destination name'),
    ('tagline', 'Tagline'),
    ('image_url', 'Image URL'),
    ('glow_color', 'Glow colour'),
    ('link', 'Link'),
    ('description', 'Description'),
)


def get_all_destinations() -> list:
    """Get all destinations ordered by name."""
    return get_db().table(DESTINATIONS_TABLE).select('*').order('name').execute().data or []


def get_destination_by_id(destination_id: str) -> dict:
    """Get destination by ID, or None if not found."""
    rows = get_db().table(DESTINATIONS_TABLE).select('*').eq('id', destination_id).limit(1).execute().data
    return rows[0] if rows else None


def validate_destination_data(data: dict, partial: bool = False) -> tuple:
    """
    Validate destination data.

    Returns:
        (is_valid, error_message)
    """
    for field, label in REQUIRED_FIELDS:
        if (not partial or field in data) and not (data.get(field) or '').strip():
            return False, get_message('field_required', field=label)

    if data.get('image_url') and not validate_url(data['image_url']):
        return False, 'Invalid image URL'

    if data.get('link') and not validate_url(data['link']):
        return False, 'Invalid link'

    if data.get('glow_color') and not validate_hex_color(data['glow_color']):
        return False, 'Glow colour must be a hex value such as #3B82F6'

    return True, ''


def create_destination(data: dict) -> dict:
    """
    Create destination.

    Raises:
        ValueError: If validation fails
    """
    is_valid, error = validate_destination_data(data)
    if not is_valid:
        raise ValueError(error)

    payload = only_columns(data, DESTINATION_COLUMNS)
    if not payload.get('id'):
        payload.pop('id', None)

    rows = get_db().table(DESTINATIONS_TABLE).insert(payload).execute().data
    return rows[0] if rows else payload


def update_destination(destination_id: str, data: dict) -> dict:
    """
    Update destination.

    Returns:
        Updated row, or None if not found

    Raises:
        ValueError: If validation fails
    """
    is_valid, error = validate_destination_data(data, partial=True)
    if not is_valid:
        raise ValueError(error)

    payload = only_columns(data, DESTINATION_COLUMNS)
    payload.pop('id', None)

    rows = get_db().table(DESTINATIONS_TABLE).update(payload).eq('id', destination_id).execute().data
    return rows[0] if rows else None


def delete_destination(destination_id: str) -> bool:
    """Delete destination. Returns True if a row was deleted."""
    rows = get_db().table(DESTINATIONS_TABLE).delete().eq('id', destination_id).execute().data
    return bool(rows)
