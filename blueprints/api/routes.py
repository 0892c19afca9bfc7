"""
API routes for JSON endpoints.
Hotel aggregate CRUD and booking/inquiry status transitions.
"""

from flask import request, Blueprint, current_app
from flask_login import login_required

from utils.api_response import api_success, api_error
from utils.decorators import admin_required
from utils.messages import MESSAGES

api_bp = Blueprint('api', __name__)


@api_bp.route('/health')
def health_check():
    """
    Health check endpoint (no authentication required).

    Returns:
        JSON with status and version
    """
    return api_success(data={
        'status': 'ok',
        'version': current_app.config.get('APP_VERSION', '1.0.0'),
        'app': current_app.config.get('APP_NAME', 'Safari Admin')
    })


# =============================================================================
# HOTELS
# =============================================================================

@api_bp.route('/hotels')
@login_required
@admin_required
def api_hotels():
    """
    Get every hotel with its nearby attractions.

    Returns:
        JSON list of hotel aggregates
    """
    from models.hotel import get_all_hotels

    try:
        hotels = get_all_hotels()
    except Exception as e:
        current_app.logger.error(f'Error fetching hotels: {e}', exc_info=True)
        return api_error(MESSAGES['hotels_load_failed'], 500)

    return api_success(data={'hotels': hotels}, count=len(hotels))


@api_bp.route('/hotels/<hotel_id>')
@login_required
@admin_required
def api_hotel_detail(hotel_id):
    """Get one hotel aggregate."""
    from models.hotel import get_hotel_by_id

    try:
        hotel = get_hotel_by_id(hotel_id)
    except Exception as e:
        current_app.logger.error(f'Error fetching hotel {hotel_id}: {e}', exc_info=True)
        return api_error(MESSAGES['hotels_load_failed'], 500)

    if not hotel:
        return api_error(MESSAGES['hotel_not_found'], 404)

    return api_success(data={'hotel': hotel})


@api_bp.route('/hotels', methods=['POST'])
@login_required
@admin_required
def api_create_hotel():
    """
    Create a hotel.

    Request body:
        Hotel fields, optionally 'nearby_attractions': [{name, distance, type}]

    Returns:
        201 with the created aggregate
    """
    from models.hotel import create_hotel

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return api_error(MESSAGES['invalid_json'], 400)

    try:
        hotel = create_hotel(data)
    except ValueError as e:
        return api_error(str(e), 400)
    except Exception as e:
        current_app.logger.error(f'Error creating hotel: {e}', exc_info=True)
        return api_error(MESSAGES['hotel_create_failed'], 500)

    return api_success(data={'hotel': hotel}, message=MESSAGES['hotel_created'], status=201)


@api_bp.route('/hotels/<hotel_id>', methods=['PATCH', 'PUT'])
@login_required
@admin_required
def api_update_hotel(hotel_id):
    """
    Update a hotel.

    A body without 'nearby_attractions' leaves the attraction set as is;
    a list (empty included) replaces it.
    """
    from models.hotel import update_hotel

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return api_error(MESSAGES['invalid_json'], 400)

    try:
        hotel = update_hotel(hotel_id, data)
    except ValueError as e:
        return api_error(str(e), 400)
    except Exception as e:
        current_app.logger.error(f'Error updating hotel {hotel_id}: {e}', exc_info=True)
        return api_error(MESSAGES['hotel_update_failed'], 500)

    if hotel is None:
        return api_error(MESSAGES['hotel_not_found'], 404)

    return api_success(data={'hotel': hotel}, message=MESSAGES['hotel_updated'])


@api_bp.route('/hotels/<hotel_id>', methods=['DELETE'])
@login_required
@admin_required
def api_delete_hotel(hotel_id):
    """Delete a hotel and its attractions."""
    from models.hotel import delete_hotel

    try:
        deleted = delete_hotel(hotel_id)
    except Exception as e:
        current_app.logger.error(f'Error deleting hotel {hotel_id}: {e}', exc_info=True)
        return api_error(MESSAGES['hotel_delete_failed'], 500)

    if not deleted:
        return api_error(MESSAGES['hotel_not_found'], 404)

    return api_success(message=MESSAGES['hotel_deleted'])


# =============================================================================
# STATUS TRANSITIONS
# =============================================================================

@api_bp.route('/bookings/<booking_id>/status', methods=['POST'])
@login_required
@admin_required
def api_booking_status(booking_id):
    """
    Move a booking to another status.

    Request body:
        {"status": "confirmed"}
    """
    from models.booking import update_booking_status

    data = request.get_json(silent=True) or {}

    try:
        booking = update_booking_status(booking_id, data.get('status', ''))
    except ValueError as e:
        return api_error(str(e), 400)
    except Exception as e:
        current_app.logger.error(f'Error updating booking status {booking_id}: {e}', exc_info=True)
        return api_error(MESSAGES['booking_update_failed'], 500)

    if booking is None:
        return api_error(MESSAGES['booking_not_found'], 404)

    return api_success(data={'booking': booking}, message=MESSAGES['booking_updated'])


@api_bp.route('/inquiries/<inquiry_id>/status', methods=['POST'])
@login_required
@admin_required
def api_inquiry_status(inquiry_id):
    """
    Move an inquiry to another status.

    Request body:
        {"status": "responded"}
    """
    from models.inquiry import update_inquiry_status

    data = request.get_json(silent=True) or {}

    try:
        inquiry = update_inquiry_status(inquiry_id, data.get('status', ''))
    except ValueError as e:
        return api_error(str(e), 400)
    except Exception as e:
        current_app.logger.error(f'Error updating inquiry status {inquiry_id}: {e}', exc_info=True)
        return api_error(MESSAGES['inquiry_update_failed'], 500)

    if inquiry is None:
        return api_error(MESSAGES['inquiry_not_found'], 404)

    return api_success(data={'inquiry': inquiry}, message=MESSAGES['inquiry_updated'])
