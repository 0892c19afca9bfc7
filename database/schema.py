"""
Hosted table names and column sets.

The tables are owned by the Supabase project; these constants keep writes
limited to real columns so that joined/derived keys (embedded packages,
nearby_attractions) never reach an insert or update.
"""

PACKAGES_TABLE = 'safari_packages'
HOTELS_TABLE = 'hotels'
ATTRACTIONS_TABLE = 'nearby_attractions'
DESTINATIONS_TABLE = 'destinations'
BOOKINGS_TABLE = 'bookings'
INQUIRIES_TABLE = 'contact_inquiries'
REVIEWS_TABLE = 'reviews'


PACKAGE_COLUMNS = frozenset({
    'id', 'slug', 'package_id', 'title', 'duration', 'group_size', 'overview',
    'itinerary_highlights', 'inclusions', 'exclusions', 'best_travel_season',
    'price_range', 'tags', 'rating', 'image_url', 'image_gallery',
    'image_suggestions', 'destination_category', 'package_category',
    'is_featured',
})

HOTEL_COLUMNS = frozenset({
    'id', 'name', 'type', 'location', 'description', 'rating', 'price_range',
    'glow_color', 'contact_phone', 'contact_email', 'booking_link',
    'image_url', 'images', 'room_count', 'review_count', 'check_in_time',
    'check_out_time', 'concierge_hours', 'certification', 'rating_location',
    'rating_service', 'rating_cleanliness', 'rating_comfort', 'rating_value',
    'highlights', 'location_highlights', 'amenities', 'destinations',
})

ATTRACTION_COLUMNS = ('name', 'distance', 'type')

DESTINATION_COLUMNS = frozenset({
    'id', 'name', 'tagline', 'image_url', 'glow_color', 'description',
    'key_features', 'link',
})

BOOKING_COLUMNS = frozenset({
    'user_id', 'package_id', 'start_date', 'end_date', 'note', 'status',
    'payment_reference', 'adults', 'children', 'traveler_count',
    'contact_name', 'contact_email', 'contact_phone', 'contact_country',
    'special_requests', 'total_amount',
})

INQUIRY_COLUMNS = frozenset({
    'name', 'email', 'phone', 'subject', 'message', 'status', 'metadata',
})

REVIEW_COLUMNS = frozenset({
    'package_id', 'name', 'email', 'rating', 'title', 'comment',
    'is_verified', 'is_approved',
})


def only_columns(data: dict, columns) -> dict:
    """Return a copy of data restricted to the given column names."""
    return {key: value for key, value in data.items() if key in columns}
