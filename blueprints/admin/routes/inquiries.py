"""
Contact inquiry routes.
"""

from flask import render_template, redirect, url_for, flash, request, current_app
from flask_login import login_required
from utils.decorators import admin_required
from utils.messages import MESSAGES


def register_routes(bp):
    """Register inquiry routes on the blueprint."""

    def apply(inquiry_id, action, *args):
        try:
            if action(inquiry_id, *args) is None:
                flash(MESSAGES['inquiry_not_found'], 'error')
            else:
                flash(MESSAGES['inquiry_updated'], 'success')
        except ValueError as e:
            flash(str(e), 'error')
        except Exception as e:
            current_app.logger.error(f'Error updating inquiry {inquiry_id}: {e}', exc_info=True)
            flash(MESSAGES['inquiry_update_failed'], 'error')
        return redirect(url_for('admin.list_inquiries'))

    @bp.route('/inquiries')
    @login_required
    @admin_required
    def list_inquiries():
        from models.inquiry import get_all_inquiries, INQUIRY_STATUSES
        from blueprints.admin.services import filter_inquiries

        search = request.args.get('search', '').strip()
        status = request.args.get('status', 'all')

        try:
            inquiries = get_all_inquiries()
        except Exception as e:
            current_app.logger.error(f'Error fetching inquiries: {e}', exc_info=True)
            flash(MESSAGES['inquiries_load_failed'], 'error')
            inquiries = []

        return render_template(
            'admin/inquiries/list.html',
            inquiries=filter_inquiries(inquiries, search, status),
            total=len(inquiries),
            statuses=INQUIRY_STATUSES,
            filters={'search': search, 'status': status}
        )

    @bp.route('/inquiries/<inquiry_id>')
    @login_required
    @admin_required
    def view_inquiry(inquiry_id):
        from models.inquiry import get_inquiry_by_id, INQUIRY_STATUSES

        inquiry = get_inquiry_by_id(inquiry_id)
        if not inquiry:
            flash(MESSAGES['inquiry_not_found'], 'error')
            return redirect(url_for('admin.list_inquiries'))

        return render_template('admin/inquiries/detail.html', inquiry=inquiry, statuses=INQUIRY_STATUSES)

    @bp.route('/inquiries/<inquiry_id>/status', methods=['POST'])
    @login_required
    @admin_required
    def update_inquiry_status_view(inquiry_id):
        from models.inquiry import update_inquiry_status
        return apply(inquiry_id, update_inquiry_status, request.form.get('status', ''))

    @bp.route('/inquiries/<inquiry_id>/spam', methods=['POST'])
    @login_required
    @admin_required
    def mark_inquiry_spam_view(inquiry_id):
        from models.inquiry import mark_inquiry_as_spam
        return apply(inquiry_id, mark_inquiry_as_spam)

    @bp.route('/inquiries/<inquiry_id>/archive', methods=['POST'])
    @login_required
    @admin_required
    def archive_inquiry_view(inquiry_id):
        from models.inquiry import archive_inquiry
        return apply(inquiry_id, archive_inquiry)

    @bp.route('/inquiries/<inquiry_id>/delete', methods=['POST'])
    @login_required
    @admin_required
    def delete_inquiry_view(inquiry_id):
        from models.inquiry import delete_inquiry

        try:
            if delete_inquiry(inquiry_id):
                flash(MESSAGES['inquiry_deleted'], 'success')
            else:
                flash(MESSAGES['inquiry_not_found'], 'error')
        except Exception as e:
            current_app.logger.error(f'Error deleting inquiry {inquiry_id}: {e}', exc_info=True)
            flash(MESSAGES['inquiry_delete_failed'], 'error')

        return redirect(url_for('admin.list_inquiries'))
