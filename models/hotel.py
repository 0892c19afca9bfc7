"""
Hotel aggregate data access.

A hotel and its nearby attractions are presented as one object, but they
live in two tables with no transaction spanning them:

- create: insert hotel, then insert attractions (best effort)
- update: update hotel, then replace the whole attraction set when one is
  supplied (delete-all then insert, best effort)
- delete: delete attractions (best effort), then always delete the hotel

Every mutation re-reads the full aggregate list instead of patching it.
Two concurrent updates of the same hotel are not serialized: the
delete-then-insert steps may interleave and leave an empty or duplicated
attraction set.
"""

import logging
import uuid

from database import get_db, HOTELS_TABLE, ATTRACTIONS_TABLE
from database.schema import HOTEL_COLUMNS, ATTRACTION_COLUMNS, only_columns
from utils.helpers import slugify
from utils.messages import get_message
from utils.validators import (validate_email, validate_url, validate_hex_color,
                              validate_number_range)

logger = logging.getLogger(__name__)

HOTEL_TYPES = ('hotel', 'camp', 'lodge')

RATING_BREAKDOWN_FIELDS = (
    'rating_location',
    'rating_service',
    'rating_cleanliness',
    'rating_comfort',
    'rating_value',
)

TEXT_FIELDS = (
    'location', 'description', 'price_range', 'glow_color', 'contact_phone',
    'contact_email', 'booking_link', 'image_url', 'check_in_time',
    'check_out_time', 'concierge_hours', 'certification',
)


# =============================================================================
# QUERY OPERATIONS
# =============================================================================

def get_all_hotels() -> list:
    """
    Fetch every hotel with its nearby attractions.

    Both tables are read in full and joined in memory by hotel_id.

    Returns:
        List of hotel dicts, newest first, each with a 'nearby_attractions'
        list in insertion order
    """
    db = get_db()

    hotels = db.table(HOTELS_TABLE).select('*').order('created_at', desc=True).execute().data or []
    attractions = db.table(ATTRACTIONS_TABLE).select('*').order('created_at').execute().data or []

    for hotel in hotels:
        hotel['nearby_attractions'] = [a for a in attractions if a.get('hotel_id') == hotel['id']]

    return hotels


def get_hotel_by_id(hotel_id: str) -> dict | None:
    """
    Get one hotel aggregate.

    Args:
        hotel_id: Hotel ID

    Returns:
        Hotel dict with 'nearby_attractions', or None if not found
    """
    for hotel in get_all_hotels():
        if hotel['id'] == hotel_id:
            return hotel
    return None


# =============================================================================
# VALIDATION
# =============================================================================

def validate_hotel_data(data: dict, partial: bool = False) -> tuple:
    """
    Validate hotel fields before create/update.

    Args:
        data: Hotel data dict
        partial: If True, only validate the keys present (PATCH semantics)

    Returns:
        (is_valid, error_message)
    """
    if not partial or 'name' in data:
        if data.get('name') is not None and not isinstance(data['name'], str):
            return False, 'Hotel name must be text'
        if not (data.get('name') or '').strip():
            return False, get_message('field_required', field='Hotel name')

    for field in TEXT_FIELDS:
        if data.get(field) is not None and not isinstance(data[field], str):
            return False, f"{field.replace('_', ' ').capitalize()} must be text"

    if 'type' in data and data['type'] not in HOTEL_TYPES:
        return False, f"Type must be one of: {', '.join(HOTEL_TYPES)}"

    if data.get('rating') is not None:
        is_valid, error = validate_number_range(data['rating'], 0, 5, 'Rating')
        if not is_valid:
            return False, error

    for field in RATING_BREAKDOWN_FIELDS:
        if data.get(field) is not None:
            label = field.replace('rating_', '').capitalize() + ' rating'
            is_valid, error = validate_number_range(data[field], 0, 10, label)
            if not is_valid:
                return False, error

    if data.get('contact_email') and not validate_email(data['contact_email']):
        return False, 'Invalid contact email'

    if data.get('booking_link') and not validate_url(data['booking_link']):
        return False, 'Invalid booking link'

    if data.get('glow_color') and not validate_hex_color(data['glow_color']):
        return False, 'Glow colour must be a hex value such as #3B82F6'

    attractions = data.get('nearby_attractions')
    if attractions is not None:
        if not isinstance(attractions, list):
            return False, 'Nearby attractions must be a list'
        for index, attraction in enumerate(attractions, start=1):
            if not isinstance(attraction, dict):
                return False, f'Nearby attraction {index} must be an object'
            if any(attraction.get(field) is not None and not isinstance(attraction[field], str)
                   for field in ('name', 'distance', 'type')):
                return False, f'Nearby attraction {index}: name, distance and type must be text'
            if not (attraction.get('name') or '').strip():
                return False, f'Nearby attraction {index}: name is required'

    return True, ''


# =============================================================================
# MUTATIONS
# =============================================================================

def create_hotel(data: dict) -> dict:
    """
    Create a hotel and, best effort, its nearby attractions.

    Args:
        data: Hotel fields; may include 'nearby_attractions' (list of dicts)

    Returns:
        The created hotel aggregate, re-read from the backend

    Raises:
        ValueError: If validation fails
        APIError: If the hotel insert fails
    """
    is_valid, error = validate_hotel_data(data)
    if not is_valid:
        raise ValueError(error)

    attractions = data.get('nearby_attractions')
    payload = only_columns(data, HOTEL_COLUMNS)
    if not payload.get('id'):
        payload['id'] = slugify(payload['name']) or str(uuid.uuid4())

    db = get_db()
    rows = db.table(HOTELS_TABLE).insert(payload).execute().data
    hotel_id = rows[0]['id'] if rows else payload['id']
    logger.info(f'Created hotel {hotel_id}')

    if attractions:
        _insert_attractions(hotel_id, attractions)

    return get_hotel_by_id(hotel_id)


def update_hotel(hotel_id: str, data: dict) -> dict | None:
    """
    Update a hotel's fields and, when supplied, replace its attraction set.

    A 'nearby_attractions' key holding a list (empty included) replaces
    every attraction row of the hotel with fresh rows. A missing key, or
    None, leaves the existing attraction rows untouched.

    Args:
        hotel_id: Hotel ID
        data: Fields to change; may include 'nearby_attractions'

    Returns:
        The updated hotel aggregate, or None if the hotel does not exist

    Raises:
        ValueError: If validation fails
        APIError: If the hotel update fails
    """
    is_valid, error = validate_hotel_data(data, partial=True)
    if not is_valid:
        raise ValueError(error)

    attractions = data.get('nearby_attractions')
    payload = only_columns(data, HOTEL_COLUMNS)
    payload.pop('id', None)

    db = get_db()
    if payload:
        rows = db.table(HOTELS_TABLE).update(payload).eq('id', hotel_id).execute().data
    else:
        rows = db.table(HOTELS_TABLE).select('id').eq('id', hotel_id).execute().data

    if not rows:
        return None

    if attractions is not None:
        _replace_attractions(hotel_id, attractions)

    return get_hotel_by_id(hotel_id)


def delete_hotel(hotel_id: str) -> bool:
    """
    Delete a hotel's attractions, then the hotel.

    The hotel delete is attempted even when the attraction delete fails.

    Args:
        hotel_id: Hotel ID

    Returns:
        True if the hotel row was deleted

    Raises:
        APIError: If the hotel delete fails
    """
    db = get_db()

    try:
        db.table(ATTRACTIONS_TABLE).delete().eq('hotel_id', hotel_id).execute()
    except Exception as e:
        logger.error(f'Failed to delete nearby attractions of hotel {hotel_id}: {e}', exc_info=True)

    rows = db.table(HOTELS_TABLE).delete().eq('id', hotel_id).execute().data
    return bool(rows)


# =============================================================================
# ATTRACTION SYNC (best effort)
# =============================================================================

def _attraction_rows(hotel_id: str, attractions: list) -> list:
    """Build insert rows; client-supplied ids and hotel_ids are discarded."""
    return [
        {**{field: attraction.get(field) or '' for field in ATTRACTION_COLUMNS}, 'hotel_id': hotel_id}
        for attraction in attractions
    ]


def _insert_attractions(hotel_id: str, attractions: list) -> bool:
    """Insert attraction rows for a freshly created hotel. Failures are logged."""
    try:
        get_db().table(ATTRACTIONS_TABLE).insert(_attraction_rows(hotel_id, attractions)).execute()
        return True
    except Exception as e:
        logger.error(f'Failed to insert nearby attractions for hotel {hotel_id}: {e}', exc_info=True)
        return False


def _replace_attractions(hotel_id: str, attractions: list) -> bool:
    """Delete every attraction of the hotel, then insert the new set. Failures are logged."""
    db = get_db()
    try:
        db.table(ATTRACTIONS_TABLE).delete().eq('hotel_id', hotel_id).execute()
        if attractions:
            db.table(ATTRACTIONS_TABLE).insert(_attraction_rows(hotel_id, attractions)).execute()
        return True
    except Exception as e:
        logger.error(f'Failed to replace nearby attractions for hotel {hotel_id}: {e}', exc_info=True)
        return False
