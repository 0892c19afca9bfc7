"""
Form payload builders.
Turn submitted HTML forms into the dicts the model layer writes.
"""

from models.hotel import RATING_BREAKDOWN_FIELDS
from utils.helpers import parse_list_field, parse_row_group, to_int, to_float
from utils.messages import get_message
from utils.validators import sanitize_input

ATTRACTIONS_PREFIX = 'nearby_attractions'
ATTRACTIONS_MARKER = 'nearby_attractions_submitted'
ATTRACTION_FORM_FIELDS = ('name', 'distance', 'type')
HOTEL_FORM_REQUIRED = (('name', 'Hotel name'), ('location', 'Location'))


def _text(form, name: str):
    """Stripped text value, or None when blank."""
    return sanitize_input(form.get(name)) or None


def build_hotel_payload(form) -> dict:
    """
    Build hotel fields from the hotel form.

    'nearby_attractions' is included only when the form carries the
    attraction-section marker; the section always submits the complete set.
    """
    data = {
        'name': sanitize_input(form.get('name')),
        'type': form.get('type') or 'hotel',
        'location': sanitize_input(form.get('location')),
        'description': sanitize_input(form.get('description')),
        'rating': to_float(form.get('rating'), 0.0),
        'price_range': sanitize_input(form.get('price_range')),
        'glow_color': sanitize_input(form.get('glow_color')) or '#3B82F6',
        'contact_phone': _text(form, 'contact_phone'),
        'contact_email': _text(form, 'contact_email'),
        'booking_link': _text(form, 'booking_link'),
        'image_url': _text(form, 'image_url'),
        'images': parse_list_field(form, 'images'),
        'highlights': parse_list_field(form, 'highlights'),
        'location_highlights': parse_list_field(form, 'location_highlights'),
        'room_count': to_int(form.get('room_count'), 12),
        'review_count': to_int(form.get('review_count'), 0),
        'check_in_time': sanitize_input(form.get('check_in_time')) or '3:00 PM',
        'check_out_time': sanitize_input(form.get('check_out_time')) or '11:00 AM',
        'concierge_hours': sanitize_input(form.get('concierge_hours')) or '24/7',
        'certification': sanitize_input(form.get('certification')) or 'Certified Safari Lodge',
    }

    for field in RATING_BREAKDOWN_FIELDS:
        data[field] = to_float(form.get(field), 0.0)

    if form.get(ATTRACTIONS_MARKER):
        data['nearby_attractions'] = parse_row_group(form, ATTRACTIONS_PREFIX, ATTRACTION_FORM_FIELDS)

    return data


def hotel_form_error(data: dict):
    """
    Check the fields the hotel form requires.

    The form asks for a location even though the data layer only needs a name.

    Returns:
        Error message, or None when the form is complete
    """
    for field, label in HOTEL_FORM_REQUIRED:
        if not data.get(field):
            return get_message('field_required', field=label)
    return None


def build_package_payload(form) -> dict:
    """Build safari package fields from the package form."""
    return {
        'title': sanitize_input(form.get('title')),
        'slug': _text(form, 'slug'),
        'duration': sanitize_input(form.get('duration')),
        'group_size': sanitize_input(form.get('group_size')),
        'overview': sanitize_input(form.get('overview')),
        'best_travel_season': sanitize_input(form.get('best_travel_season')),
        'price_range': to_float(form.get('price_range')),
        'rating': to_float(form.get('rating'), 0.0),
        'image_url': sanitize_input(form.get('image_url')),
        'destination_category': form.get('destination_category'),
        'package_category': form.get('package_category'),
        'is_featured': form.get('is_featured') in ('on', '1', 'true'),
        'itinerary_highlights': parse_list_field(form, 'itinerary_highlights'),
        'inclusions': parse_list_field(form, 'inclusions'),
        'exclusions': parse_list_field(form, 'exclusions'),
        'tags': parse_list_field(form, 'tags'),
        'image_gallery': parse_list_field(form, 'image_gallery'),
        'image_suggestions': parse_list_field(form, 'image_suggestions'),
    }


def build_destination_payload(form) -> dict:
    """Build destination fields from the destination form."""
    return {
        'name': sanitize_input(form.get('name')),
        'tagline': sanitize_input(form.get('tagline')),
        'image_url': sanitize_input(form.get('image_url')),
        'glow_color': sanitize_input(form.get('glow_color')),
        'link': sanitize_input(form.get('link')),
        'description': sanitize_input(form.get('description')),
        'key_features': parse_list_field(form, 'key_features'),
    }


def build_booking_payload(form) -> dict:
    """Build booking fields from the booking edit form."""
    return {
        'package_id': sanitize_input(form.get('package_id')),
        'start_date': sanitize_input(form.get('start_date')),
        'end_date': sanitize_input(form.get('end_date')),
        'adults': to_int(form.get('adults'), 1),
        'children': to_int(form.get('children'), 0),
        'status': form.get('status') or 'pending',
        'contact_name': sanitize_input(form.get('contact_name')),
        'contact_email': _text(form, 'contact_email'),
        'contact_phone': _text(form, 'contact_phone'),
        'contact_country': _text(form, 'contact_country'),
        'total_amount': to_float(form.get('total_amount')),
        'payment_reference': _text(form, 'payment_reference'),
        'special_requests': _text(form, 'special_requests'),
        'note': _text(form, 'note'),
    }


def build_user_metadata_payload(form) -> dict:
    """Build user_metadata changes from the user edit form."""
    return {
        'full_name': sanitize_input(form.get('full_name')),
        'name': sanitize_input(form.get('name')),
        'avatar_url': sanitize_input(form.get('avatar_url')),
        'role': form.get('role') or 'user',
    }
