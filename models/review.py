"""
Review moderation data access functions.
"""

from database import get_db, REVIEWS_TABLE
from database.schema import REVIEW_COLUMNS, only_columns
from utils.datetime_helpers import utc_now_iso
from utils.validators import validate_number_range

REVIEW_SELECT = '*, package:safari_packages(title, destination_category)'


def get_all_reviews() -> list:
    """
    Get all reviews, most recently submitted first.

    Returns:
        List of review dicts; 'package' holds the embedded package summary
    """
    return get_db().table(REVIEWS_TABLE).select(REVIEW_SELECT).order('submitted_at', desc=True).execute().data or []


def get_review_by_id(review_id: str) -> dict:
    """Get review by ID with package summary, or None if not found."""
    rows = get_db().table(REVIEWS_TABLE).select(REVIEW_SELECT).eq('id', review_id).limit(1).execute().data
    return rows[0] if rows else None


def update_review(review_id: str, data: dict) -> dict:
    """
    Update review fields and stamp updated_at.

    Returns:
        Updated review with package summary, or None if not found

    Raises:
        ValueError: If the rating is out of range
    """
    if data.get('rating') is not None:
        is_valid, error = validate_number_range(data['rating'], 1, 5, 'Rating')
        if not is_valid:
            raise ValueError(error)

    payload = only_columns(data, REVIEW_COLUMNS)
    payload['updated_at'] = utc_now_iso()

    rows = get_db().table(REVIEWS_TABLE).update(payload).eq('id', review_id).execute().data
    if not rows:
        return None
    return get_review_by_id(review_id)


def approve_review(review_id: str) -> dict:
    """Publish a review."""
    return update_review(review_id, {'is_approved': True})


def disapprove_review(review_id: str) -> dict:
    """Withdraw a review from the public site."""
    return update_review(review_id, {'is_approved': False})


def verify_review(review_id: str) -> dict:
    """Mark a review as coming from a verified traveller."""
    return update_review(review_id, {'is_verified': True})


def delete_review(review_id: str) -> bool:
    """Delete review. Returns True if a row was deleted."""
    rows = get_db().table(REVIEWS_TABLE).delete().eq('id', review_id).execute().data
    return bool(rows)
