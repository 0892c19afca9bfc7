"""
Centralized UI messages.
All user-facing notification text in one place for consistency.
"""

MESSAGES = {
    # Session
    'login_success': 'Welcome {name}',
    'logout_success': 'Signed out successfully',
    'invalid_credentials': 'Invalid email or password',
    'admin_required': 'Access denied: administrator role required',
    'permission_denied': 'You do not have permission to access this page',

    # Packages
    'package_created': 'Package created successfully',
    'package_updated': 'Package updated successfully',
    'package_deleted': 'Package deleted successfully',
    'package_not_found': 'Package not found',
    'packages_load_failed': 'Failed to load packages',
    'package_create_failed': 'Failed to create package',
    'package_update_failed': 'Failed to update package',
    'package_delete_failed': 'Failed to delete package',

    # Hotels
    'hotel_created': 'Hotel created successfully',
    'hotel_updated': 'Hotel updated successfully',
    'hotel_deleted': 'Hotel deleted successfully',
    'hotel_not_found': 'Hotel not found',
    'hotels_load_failed': 'Failed to load hotels',
    'hotel_create_failed': 'Failed to create hotel',
    'hotel_update_failed': 'Failed to update hotel',
    'hotel_delete_failed': 'Failed to delete hotel',

    # Destinations
    'destination_created': 'Destination created successfully',
    'destination_updated': 'Destination updated successfully',
    'destination_deleted': 'Destination deleted successfully',
    'destination_not_found': 'Destination not found',
    'destinations_load_failed': 'Failed to load destinations',
    'destination_create_failed': 'Failed to create destination',
    'destination_update_failed': 'Failed to update destination',
    'destination_delete_failed': 'Failed to delete destination',

    # Bookings
    'booking_updated': 'Booking updated successfully',
    'booking_deleted': 'Booking deleted successfully',
    'booking_not_found': 'Booking not found',
    'bookings_load_failed': 'Failed to load bookings',
    'booking_update_failed': 'Failed to update booking',
    'booking_delete_failed': 'Failed to delete booking',

    # Inquiries
    'inquiry_updated': 'Inquiry updated successfully',
    'inquiry_deleted': 'Inquiry deleted successfully',
    'inquiry_not_found': 'Inquiry not found',
    'inquiries_load_failed': 'Failed to load inquiries',
    'inquiry_update_failed': 'Failed to update inquiry',
    'inquiry_delete_failed': 'Failed to delete inquiry',

    # Reviews
    'review_updated': 'Review updated successfully',
    'review_deleted': 'Review deleted successfully',
    'review_not_found': 'Review not found',
    'reviews_load_failed': 'Failed to load reviews',
    'review_update_failed': 'Failed to update review',
    'review_delete_failed': 'Failed to delete review',

    # Users
    'user_updated': 'User updated successfully',
    'user_deleted': 'User deleted successfully',
    'user_banned': 'User banned successfully',
    'user_unbanned': 'User unbanned successfully',
    'user_not_found': 'User not found',
    'users_load_failed': 'Failed to load users',
    'user_update_failed': 'Failed to update user',
    'user_delete_failed': 'Failed to delete user',
    'user_ban_failed': 'Failed to ban user',
    'user_unban_failed': 'Failed to unban user',
    'cannot_delete_self': 'You cannot delete your own account',
    'cannot_ban_self': 'You cannot ban your own account',

    # Dashboard
    'dashboard_load_failed': 'Failed to load dashboard statistics',

    # Validation
    'field_required': '{field} is required',
    'invalid_email': 'Invalid email address',
    'invalid_url': 'Invalid URL',
    'invalid_color': 'Colour must be a hex value such as #3B82F6',
    'invalid_date_range': 'End date must be on or after the start date',
    'invalid_status': 'Invalid status: {status}',
    'invalid_json': 'Invalid request data',

    # Info
    'no_results': 'No results found',
    'confirm_delete': 'Are you sure you want to delete this record?',
}


def get_message(key: str, **kwargs) -> str:
    """
    Get message with optional formatting.

    Args:
        key: Message key
        **kwargs: Format parameters

    Returns:
        Formatted message or key if not found
    """
    message = MESSAGES.get(key, key)
    if kwargs:
        return message.format(**kwargs)
    return message
