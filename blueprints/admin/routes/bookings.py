"""
Booking routes.
Bookings arrive from the public site; here they are reviewed, edited,
moved between statuses and deleted.
"""

from flask import render_template, redirect, url_for, flash, request, current_app
from flask_login import login_required
from utils.decorators import admin_required
from utils.messages import MESSAGES


def register_routes(bp):
    """Register booking routes on the blueprint."""

    @bp.route('/bookings')
    @login_required
    @admin_required
    def list_bookings():
        """List bookings with quick status actions."""
        from models.booking import get_all_bookings, BOOKING_STATUSES, BOOKING_ACTIONS
        from blueprints.admin.services import filter_bookings

        search = request.args.get('search', '').strip()
        status = request.args.get('status', 'all')

        try:
            bookings = get_all_bookings()
        except Exception as e:
            current_app.logger.error(f'Error fetching bookings: {e}', exc_info=True)
            flash(MESSAGES['bookings_load_failed'], 'error')
            bookings = []

        return render_template(
            'admin/bookings/list.html',
            bookings=filter_bookings(bookings, search, status),
            total=len(bookings),
            statuses=BOOKING_STATUSES,
            actions=BOOKING_ACTIONS,
            filters={'search': search, 'status': status}
        )

    @bp.route('/bookings/<booking_id>/edit', methods=['GET', 'POST'])
    @login_required
    @admin_required
    def edit_booking_view(booking_id):
        """Edit booking details."""
        from models.booking import get_booking_by_id, update_booking, BOOKING_STATUSES
        from blueprints.admin.services import build_booking_payload

        booking = get_booking_by_id(booking_id)
        if not booking:
            flash(MESSAGES['booking_not_found'], 'error')
            return redirect(url_for('admin.list_bookings'))

        if request.method == 'POST':
            data = build_booking_payload(request.form)
            try:
                if update_booking(booking_id, data) is None:
                    flash(MESSAGES['booking_not_found'], 'error')
                else:
                    flash(MESSAGES['booking_updated'], 'success')
                return redirect(url_for('admin.list_bookings'))
            except ValueError as e:
                flash(str(e), 'error')
            except Exception as e:
                current_app.logger.error(f'Error updating booking {booking_id}: {e}', exc_info=True)
                flash(MESSAGES['booking_update_failed'], 'error')
            booking = {**booking, **data}

        return render_template('admin/bookings/form.html', booking=booking, statuses=BOOKING_STATUSES)

    @bp.route('/bookings/<booking_id>/status', methods=['POST'])
    @login_required
    @admin_required
    def update_booking_status_view(booking_id):
        """Apply a quick status transition (confirm, cancel, mark paid)."""
        from models.booking import update_booking_status

        status = request.form.get('status', '')
        try:
            if update_booking_status(booking_id, status) is None:
                flash(MESSAGES['booking_not_found'], 'error')
            else:
                flash(MESSAGES['booking_updated'], 'success')
        except ValueError as e:
            flash(str(e), 'error')
        except Exception as e:
            current_app.logger.error(f'Error updating booking status {booking_id}: {e}', exc_info=True)
            flash(MESSAGES['booking_update_failed'], 'error')

        return redirect(url_for('admin.list_bookings'))

    @bp.route('/bookings/<booking_id>/delete', methods=['POST'])
    @login_required
    @admin_required
    def delete_booking_view(booking_id):
        from models.booking import delete_booking

        try:
            if delete_booking(booking_id):
                flash(MESSAGES['booking_deleted'], 'success')
            else:
                flash(MESSAGES['booking_not_found'], 'error')
        except Exception as e:
            current_app.logger.error(f'Error deleting booking {booking_id}: {e}', exc_info=True)
            flash(MESSAGES['booking_delete_failed'], 'error')

        return redirect(url_for('admin.list_bookings'))
