"""Admin services package."""

from blueprints.admin.services.filters import (  # noqa: F401
    filter_packages,
    filter_hotels,
    filter_destinations,
    filter_bookings,
    filter_inquiries,
    filter_reviews,
    filter_users,
)
from blueprints.admin.services.payloads import (  # noqa: F401
    build_hotel_payload,
    hotel_form_error,
    build_package_payload,
    build_destination_payload,
    build_booking_payload,
    build_user_metadata_payload,
)
