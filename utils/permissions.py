"""
Role checks and navigation menu.
"""

from flask import current_app


MENU_ITEMS = [
    {'code': 'dashboard', 'name': 'Dashboard', 'icon': 'fa-gauge', 'endpoint': 'admin.dashboard'},
    {'code': 'packages', 'name': 'Safari Packages', 'icon': 'fa-map', 'endpoint': 'admin.list_packages'},
    {'code': 'hotels', 'name': 'Hotels', 'icon': 'fa-hotel', 'endpoint': 'admin.list_hotels'},
    {'code': 'destinations', 'name': 'Destinations', 'icon': 'fa-location-dot', 'endpoint': 'admin.list_destinations'},
    {'code': 'bookings', 'name': 'Bookings', 'icon': 'fa-calendar-check', 'endpoint': 'admin.list_bookings'},
    {'code': 'inquiries', 'name': 'Inquiries', 'icon': 'fa-envelope', 'endpoint': 'admin.list_inquiries'},
    {'code': 'reviews', 'name': 'Reviews', 'icon': 'fa-star', 'endpoint': 'admin.list_reviews'},
    {'code': 'users', 'name': 'Users', 'icon': 'fa-users', 'endpoint': 'admin.list_users'},
]


def _app_metadata(user) -> dict:
    if user is None:
        return {}
    if isinstance(user, dict):
        return user.get('app_metadata') or {}
    return getattr(user, 'app_metadata', None) or {}


def is_admin(user) -> bool:
    """
    Check whether a user carries the administrator role claim.

    Only app_metadata.role is trusted: it is writable solely with the
    service-role key, unlike user_metadata.

    Args:
        user: User object (Flask-Login), auth user dict, or None

    Returns:
        True if app_metadata.role equals the configured ADMIN_ROLE
    """
    if user is None or getattr(user, 'is_anonymous', False):
        return False

    return _app_metadata(user).get('role') == current_app.config.get('ADMIN_ROLE', 'admin')


def get_menu_items(user) -> list:
    """
    Build the sidebar navigation for the signed-in user.

    Args:
        user: User object (Flask-Login)

    Returns:
        List of menu item dicts (empty for non-admins)
    """
    if not is_admin(user):
        return []
    return list(MENU_ITEMS)
