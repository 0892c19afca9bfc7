"""
Contact inquiry data access functions.
"""

from database import get_db, INQUIRIES_TABLE
from database.schema import INQUIRY_COLUMNS, only_columns
from utils.datetime_helpers import utc_now_iso
from utils.messages import get_message

INQUIRY_STATUSES = ('pending', 'responded', 'spam', 'archived')


def get_all_inquiries() -> list:
    """Get all inquiries, newest first."""
    return get_db().table(INQUIRIES_TABLE).select('*').order('created_at', desc=True).execute().data or []


def get_inquiry_by_id(inquiry_id: str) -> dict:
    """Get inquiry by ID, or None if not found."""
    rows = get_db().table(INQUIRIES_TABLE).select('*').eq('id', inquiry_id).limit(1).execute().data
    return rows[0] if rows else None


def update_inquiry(inquiry_id: str, data: dict) -> dict:
    """
    Update inquiry fields and stamp updated_at.

    Returns:
        Updated inquiry, or None if not found

    Raises:
        ValueError: If the status is unknown
    """
    if 'status' in data and data['status'] not in INQUIRY_STATUSES:
        raise ValueError(get_message('invalid_status', status=data['status']))

    payload = only_columns(data, INQUIRY_COLUMNS)
    payload['updated_at'] = utc_now_iso()

    rows = get_db().table(INQUIRIES_TABLE).update(payload).eq('id', inquiry_id).execute().data
    return rows[0] if rows else None


def update_inquiry_status(inquiry_id: str, status: str) -> dict:
    """Move an inquiry to another status."""
    return update_inquiry(inquiry_id, {'status': status})


def mark_inquiry_as_spam(inquiry_id: str) -> dict:
    """Flag an inquiry as spam."""
    return update_inquiry(inquiry_id, {'status': 'spam'})


def archive_inquiry(inquiry_id: str) -> dict:
    """Archive an inquiry."""
    return update_inquiry(inquiry_id, {'status': 'archived'})


def delete_inquiry(inquiry_id: str) -> bool:
    """Delete inquiry. Returns True if a row was deleted."""
    rows = get_db().table(INQUIRIES_TABLE).delete().eq('id', inquiry_id).execute().data
    return bool(rows)
