"""
In-process list filtering for the console list screens.
Each screen fetches the full list and narrows it with search and a filter.
"""

from models.user import display_name, is_banned


def _matches(search: str, *values) -> bool:
    """Case-insensitive substring match against any of the values."""
    if not search:
        return True
    needle = search.lower()
    return any(needle in str(value).lower() for value in values if value)


def filter_packages(packages: list, search: str = '', category: str = '') -> list:
    """Filter packages by title/overview/tags and destination category."""
    return [
        p for p in packages
        if _matches(search, p.get('title'), p.get('overview'), *(p.get('tags') or []))
        and (not category or p.get('destination_category') == category)
    ]


def filter_hotels(hotels: list, search: str = '', hotel_type: str = '') -> list:
    """Filter hotels by name/location/description and type."""
    return [
        h for h in hotels
        if _matches(search, h.get('name'), h.get('location'), h.get('description'))
        and (not hotel_type or h.get('type') == hotel_type)
    ]


def filter_destinations(destinations: list, search: str = '') -> list:
    """Filter destinations by name/tagline/description."""
    return [
        d for d in destinations
        if _matches(search, d.get('name'), d.get('tagline'), d.get('description'))
    ]


def filter_bookings(bookings: list, search: str = '', status: str = '') -> list:
    """Filter bookings by contact name/email/package id and status."""
    return [
        b for b in bookings
        if _matches(search, b.get('contact_name'), b.get('contact_email'), b.get('package_id'))
        and (not status or status == 'all' or b.get('status') == status)
    ]


def filter_inquiries(inquiries: list, search: str = '', status: str = '') -> list:
    """Filter inquiries by name/email/subject/message and status."""
    return [
        i for i in inquiries
        if _matches(search, i.get('name'), i.get('email'), i.get('subject'), i.get('message'))
        and (not status or status == 'all' or i.get('status') == status)
    ]


def filter_reviews(reviews: list, search: str = '', status: str = '') -> list:
    """
    Filter reviews by name/comment/title and moderation state.

    status: 'approved', 'pending' (not approved), 'verified', or ''/'all'.
    """
    def status_matches(review):
        if status == 'approved':
            return bool(review.get('is_approved'))
        if status == 'pending':
            return not review.get('is_approved')
        if status == 'verified':
            return bool(review.get('is_verified'))
        return True

    return [
        r for r in reviews
        if _matches(search, r.get('name'), r.get('comment'), r.get('title'))
        and status_matches(r)
    ]


def filter_users(users: list, search: str = '', status: str = '') -> list:
    """Filter users by email/name and 'active'/'banned' state."""
    return [
        u for u in users
        if _matches(search, u.get('email'), display_name(u))
        and (not status or status == 'all'
             or (status == 'banned') == is_banned(u))
    ]
