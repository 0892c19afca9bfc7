"""
Dashboard statistics.
Entity counts, pending work and the latest activity across tables.
"""

from database import get_db, PACKAGES_TABLE, HOTELS_TABLE, BOOKINGS_TABLE, INQUIRIES_TABLE


def _count(table: str, status: str = None) -> int:
    query = get_db().table(table).select('*', count='exact', head=True)
    if status:
        query = query.eq('status', status)
    return query.execute().count or 0


def _recent(table: str, limit: int) -> list:
    return get_db().table(table).select('*').order('created_at', desc=True).limit(limit).execute().data or []


def get_dashboard_stats(recent_limit: int = 10) -> dict:
    """
    Collect dashboard statistics.

    Args:
        recent_limit: Number of recent bookings/inquiries to include

    Returns:
        Dict with total/pending counts and recent bookings/inquiries
    """
    return {
        'total_packages': _count(PACKAGES_TABLE),
        'total_hotels': _count(HOTELS_TABLE),
        'total_bookings': _count(BOOKINGS_TABLE),
        'total_inquiries': _count(INQUIRIES_TABLE),
        'pending_bookings': _count(BOOKINGS_TABLE, 'pending'),
        'pending_inquiries': _count(INQUIRIES_TABLE, 'pending'),
        'recent_bookings': _recent(BOOKINGS_TABLE, recent_limit),
        'recent_inquiries': _recent(INQUIRIES_TABLE, recent_limit),
    }
