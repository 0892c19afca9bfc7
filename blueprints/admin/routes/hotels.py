"""
Hotel routes.
The hotel form edits the hotel and its complete nearby attraction set.
"""

from flask import render_template, redirect, url_for, flash, request, current_app
from flask_login import login_required
from utils.decorators import admin_required
from utils.helpers import new_row_key
from utils.messages import MESSAGES


def register_routes(bp):
    """Register hotel routes on the blueprint."""

    def render_form(hotel, mode):
        from models.hotel import HOTEL_TYPES, RATING_BREAKDOWN_FIELDS
        attraction_rows = [(new_row_key(), a) for a in (hotel or {}).get('nearby_attractions') or []]
        blank_rows = [(new_row_key(), {}) for _ in range(2)]
        return render_template(
            'admin/hotels/form.html',
            hotel=hotel,
            mode=mode,
            hotel_types=HOTEL_TYPES,
            rating_fields=RATING_BREAKDOWN_FIELDS,
            attraction_rows=attraction_rows + blank_rows
        )

    @bp.route('/hotels')
    @login_required
    @admin_required
    def list_hotels():
        """List hotels with their nearby attractions."""
        from models.hotel import get_all_hotels, HOTEL_TYPES
        from blueprints.admin.services import filter_hotels

        search = request.args.get('search', '').strip()
        hotel_type = request.args.get('type', '')

        try:
            hotels = get_all_hotels()
        except Exception as e:
            current_app.logger.error(f'Error fetching hotels: {e}', exc_info=True)
            flash(MESSAGES['hotels_load_failed'], 'error')
            hotels = []

        return render_template(
            'admin/hotels/list.html',
            hotels=filter_hotels(hotels, search, hotel_type),
            total=len(hotels),
            hotel_types=HOTEL_TYPES,
            filters={'search': search, 'type': hotel_type}
        )

    @bp.route('/hotels/create', methods=['GET', 'POST'])
    @login_required
    @admin_required
    def create_hotel_view():
        """Create a hotel with its initial attraction set."""
        from models.hotel import create_hotel
        from blueprints.admin.services import build_hotel_payload, hotel_form_error

        if request.method == 'POST':
            data = build_hotel_payload(request.form)
            error = hotel_form_error(data)
            if error:
                flash(error, 'error')
                return render_form(data, 'create')
            try:
                create_hotel(data)
                flash(MESSAGES['hotel_created'], 'success')
                return redirect(url_for('admin.list_hotels'))
            except ValueError as e:
                flash(str(e), 'error')
            except Exception as e:
                current_app.logger.error(f'Error creating hotel: {e}', exc_info=True)
                flash(MESSAGES['hotel_create_failed'], 'error')
            return render_form(data, 'create')

        return render_form(None, 'create')

    @bp.route('/hotels/<hotel_id>/edit', methods=['GET', 'POST'])
    @login_required
    @admin_required
    def edit_hotel_view(hotel_id):
        """Edit a hotel; the submitted attraction set replaces the stored one."""
        from models.hotel import get_hotel_by_id, update_hotel
        from blueprints.admin.services import build_hotel_payload, hotel_form_error

        hotel = get_hotel_by_id(hotel_id)
        if not hotel:
            flash(MESSAGES['hotel_not_found'], 'error')
            return redirect(url_for('admin.list_hotels'))

        if request.method == 'POST':
            data = build_hotel_payload(request.form)
            error = hotel_form_error(data)
            if error:
                flash(error, 'error')
                return render_form({**data, 'id': hotel_id}, 'edit')
            try:
                updated = update_hotel(hotel_id, data)
                if updated is None:
                    flash(MESSAGES['hotel_not_found'], 'error')
                else:
                    flash(MESSAGES['hotel_updated'], 'success')
                return redirect(url_for('admin.list_hotels'))
            except ValueError as e:
                flash(str(e), 'error')
            except Exception as e:
                current_app.logger.error(f'Error updating hotel {hotel_id}: {e}', exc_info=True)
                flash(MESSAGES['hotel_update_failed'], 'error')
            return render_form({**data, 'id': hotel_id}, 'edit')

        return render_form(hotel, 'edit')

    @bp.route('/hotels/<hotel_id>/delete', methods=['POST'])
    @login_required
    @admin_required
    def delete_hotel_view(hotel_id):
        """Delete a hotel and its attractions."""
        from models.hotel import delete_hotel

        try:
            if delete_hotel(hotel_id):
                flash(MESSAGES['hotel_deleted'], 'success')
            else:
                flash(MESSAGES['hotel_not_found'], 'error')
        except Exception as e:
            current_app.logger.error(f'Error deleting hotel {hotel_id}: {e}', exc_info=True)
            flash(MESSAGES['hotel_delete_failed'], 'error')

        return redirect(url_for('admin.list_hotels'))
