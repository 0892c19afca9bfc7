"""
Booking data access functions.
Bookings are created by the public site; the console lists, edits,
transitions and deletes them.
"""

from database import get_db, BOOKINGS_TABLE
from database.schema import BOOKING_COLUMNS, only_columns
from utils.datetime_helpers import utc_now_iso
from utils.helpers import to_int
from utils.messages import get_message
from utils.validators import validate_email, validate_date_format, validate_date_range, validate_number_range

BOOKING_STATUSES = ('pending', 'awaiting_payment', 'confirmed', 'cancelled', 'failed')

# Quick transitions offered in the booking list, per current status
BOOKING_ACTIONS = {
    'pending': [('confirmed', 'Confirm'), ('cancelled', 'Cancel')],
    'awaiting_payment': [('confirmed', 'Mark Paid')],
}

BOOKING_SELECT = '*, package:safari_packages(title, duration, destination_category, price_range)'


def get_all_bookings() -> list:
    """
    Get all bookings, newest first, with a summary of the booked package.

    Returns:
        List of booking dicts; 'package' holds the embedded package summary
    """
    return get_db().table(BOOKINGS_TABLE).select(BOOKING_SELECT).order('created_at', desc=True).execute().data or []


def get_booking_by_id(booking_id: str) -> dict:
    """
    Get booking by ID with its package summary.

    Returns:
        Booking dict or None if not found
    """
    rows = get_db().table(BOOKINGS_TABLE).select(BOOKING_SELECT).eq('id', booking_id).limit(1).execute().data
    return rows[0] if rows else None


def validate_booking_data(data: dict) -> tuple:
    """
    Validate booking fields present in data.

    Returns:
        (is_valid, error_message)
    """
    if 'status' in data and data['status'] not in BOOKING_STATUSES:
        return False, get_message('invalid_status', status=data['status'])

    for field, label in (('package_id', 'Package ID'), ('start_date', 'Start date'),
                         ('end_date', 'End date'), ('contact_name', 'Contact name')):
        if field in data and not str(data[field] or '').strip():
            return False, get_message('field_required', field=label)

    for field, label in (('start_date', 'Start date'), ('end_date', 'End date')):
        if data.get(field) and not validate_date_format(data[field]):
            return False, f'{label} must be a date (YYYY-MM-DD)'

    if data.get('start_date') and data.get('end_date'):
        if not validate_date_range(data['start_date'], data['end_date']):
            return False, 'End date must be on or after the start date'

    if data.get('adults') is not None:
        is_valid, error = validate_number_range(data['adults'], 1, 100, 'Adults')
        if not is_valid:
            return False, error

    if data.get('children') is not None:
        is_valid, error = validate_number_range(data['children'], 0, 100, 'Children')
        if not is_valid:
            return False, error

    if data.get('total_amount') is not None:
        is_valid, error = validate_number_range(data['total_amount'], 0, 100_000_000, 'Total amount')
        if not is_valid:
            return False, error

    if data.get('contact_email') and not validate_email(data['contact_email']):
        return False, 'Invalid contact email'

    return True, ''


def update_booking(booking_id: str, data: dict) -> dict:
    """
    Update booking fields and stamp updated_at.

    When adults or children change, traveler_count is recomputed as
    adults + children unless it is supplied explicitly.

    Args:
        booking_id: Booking ID
        data: Fields to update

    Returns:
        Updated booking with package summary, or None if not found

    Raises:
        ValueError: If validation fails
    """
    is_valid, error = validate_booking_data(data)
    if not is_valid:
        raise ValueError(error)

    payload = only_columns(data, BOOKING_COLUMNS)

    if ('adults' in payload or 'children' in payload) and 'traveler_count' not in payload:
        adults, children = payload.get('adults'), payload.get('children')
        if adults is None or children is None:
            current = get_booking_by_id(booking_id)
            if current is None:
                return None
            adults = current.get('adults') if adults is None else adults
            children = current.get('children') if children is None else children
        payload['traveler_count'] = to_int(adults, 0) + to_int(children, 0)

    payload['updated_at'] = utc_now_iso()

    rows = get_db().table(BOOKINGS_TABLE).update(payload).eq('id', booking_id).execute().data
    if not rows:
        return None
    return get_booking_by_id(booking_id)


def update_booking_status(booking_id: str, status: str) -> dict:
    """
    Move a booking to another status.

    Raises:
        ValueError: If status is not a booking status
    """
    if status not in BOOKING_STATUSES:
        raise ValueError(get_message('invalid_status', status=status))
    return update_booking(booking_id, {'status': status})


def delete_booking(booking_id: str) -> bool:
    """Delete booking. Returns True if a row was deleted."""
    rows = get_db().table(BOOKINGS_TABLE).delete().eq('id', booking_id).execute().data
    return bool(rows)
