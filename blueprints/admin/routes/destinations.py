"""
Destination routes.
"""

from flask import render_template, redirect, url_for, flash, request, current_app
from flask_login import login_required
from utils.decorators import admin_required
from utils.messages import MESSAGES


def register_routes(bp):
    """Register destination routes on the blueprint."""

    @bp.route('/destinations')
    @login_required
    @admin_required
    def list_destinations():
        from models.destination import get_all_destinations
        from blueprints.admin.services import filter_destinations

        search = request.args.get('search', '').strip()

        try:
            destinations = get_all_destinations()
        except Exception as e:
            current_app.logger.error(f'Error fetching destinations: {e}', exc_info=True)
            flash(MESSAGES['destinations_load_failed'], 'error')
            destinations = []

        return render_template(
            'admin/destinations/list.html',
            destinations=filter_destinations(destinations, search),
            total=len(destinations),
            filters={'search': search}
        )

    @bp.route('/destinations/create', methods=['GET', 'POST'])
    @login_required
    @admin_required
    def create_destination_view():
        from models.destination import create_destination
        from blueprints.admin.services import build_destination_payload

        if request.method == 'POST':
            data = build_destination_payload(request.form)
            try:
                create_destination(data)
                flash(MESSAGES['destination_created'], 'success')
                return redirect(url_for('admin.list_destinations'))
            except ValueError as e:
                flash(str(e), 'error')
            except Exception as e:
                current_app.logger.error(f'Error creating destination: {e}', exc_info=True)
                flash(MESSAGES['destination_create_failed'], 'error')
            return render_template('admin/destinations/form.html', destination=data, mode='create')

        return render_template('admin/destinations/form.html', destination=None, mode='create')

    @bp.route('/destinations/<destination_id>/edit', methods=['GET', 'POST'])
    @login_required
    @admin_required
    def edit_destination_view(destination_id):
        from models.destination import get_destination_by_id, update_destination
        from blueprints.admin.services import build_destination_payload

        destination = get_destination_by_id(destination_id)
        if not destination:
            flash(MESSAGES['destination_not_found'], 'error')
            return redirect(url_for('admin.list_destinations'))

        if request.method == 'POST':
            data = build_destination_payload(request.form)
            try:
                if update_destination(destination_id, data) is None:
                    flash(MESSAGES['destination_not_found'], 'error')
                else:
                    flash(MESSAGES['destination_updated'], 'success')
                return redirect(url_for('admin.list_destinations'))
            except ValueError as e:
                flash(str(e), 'error')
            except Exception as e:
                current_app.logger.error(f'Error updating destination {destination_id}: {e}', exc_info=True)
                flash(MESSAGES['destination_update_failed'], 'error')
            return render_template('admin/destinations/form.html',
                                   destination={**data, 'id': destination_id}, mode='edit')

        return render_template('admin/destinations/form.html', destination=destination, mode='edit')

    @bp.route('/destinations/<destination_id>/delete', methods=['POST'])
    @login_required
    @admin_required
    def delete_destination_view(destination_id):
        from models.destination import delete_destination

        try:
            if delete_destination(destination_id):
                flash(MESSAGES['destination_deleted'], 'success')
            else:
                flash(MESSAGES['destination_not_found'], 'error')
        except Exception as e:
            current_app.logger.error(f'Error deleting destination {destination_id}: {e}', exc_info=True)
            flash(MESSAGES['destination_delete_failed'], 'error')

        return redirect(url_for('admin.list_destinations'))
