"""
Dashboard route.
"""

from flask import render_template, current_app, flash
from flask_login import login_required
from utils.decorators import admin_required
from utils.messages import MESSAGES


def register_routes(bp):
    """Register dashboard routes on the blueprint."""

    @bp.route('/')
    @login_required
    @admin_required
    def dashboard():
        """Entity counts, pending work and the latest bookings/inquiries."""
        from models.dashboard import get_dashboard_stats

        try:
            stats = get_dashboard_stats(current_app.config.get('RECENT_ACTIVITY_LIMIT', 10))
        except Exception as e:
            current_app.logger.error(f'Error loading dashboard: {e}', exc_info=True)
            flash(MESSAGES['dashboard_load_failed'], 'error')
            stats = {
                'total_packages': 0, 'total_hotels': 0,
                'total_bookings': 0, 'total_inquiries': 0,
                'pending_bookings': 0, 'pending_inquiries': 0,
                'recent_bookings': [], 'recent_inquiries': [],
            }

        return render_template('admin/dashboard.html', stats=stats)
