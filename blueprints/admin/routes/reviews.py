"""
Review moderation routes.
"""

from flask import render_template, redirect, url_for, flash, request, current_app
from flask_login import login_required
from utils.decorators import admin_required
from utils.messages import MESSAGES


def register_routes(bp):
    """Register review routes on the blueprint."""

    def moderate(review_id, action):
        try:
            if action(review_id) is None:
                flash(MESSAGES['review_not_found'], 'error')
            else:
                flash(MESSAGES['review_updated'], 'success')
        except Exception as e:
            current_app.logger.error(f'Error moderating review {review_id}: {e}', exc_info=True)
            flash(MESSAGES['review_update_failed'], 'error')
        return redirect(url_for('admin.list_reviews'))

    @bp.route('/reviews')
    @login_required
    @admin_required
    def list_reviews():
        from models.review import get_all_reviews
        from blueprints.admin.services import filter_reviews

        search = request.args.get('search', '').strip()
        status = request.args.get('status', 'all')

        try:
            reviews = get_all_reviews()
        except Exception as e:
            current_app.logger.error(f'Error fetching reviews: {e}', exc_info=True)
            flash(MESSAGES['reviews_load_failed'], 'error')
            reviews = []

        return render_template(
            'admin/reviews/list.html',
            reviews=filter_reviews(reviews, search, status),
            total=len(reviews),
            filters={'search': search, 'status': status}
        )

    @bp.route('/reviews/<review_id>/approve', methods=['POST'])
    @login_required
    @admin_required
    def approve_review_view(review_id):
        from models.review import approve_review
        return moderate(review_id, approve_review)

    @bp.route('/reviews/<review_id>/disapprove', methods=['POST'])
    @login_required
    @admin_required
    def disapprove_review_view(review_id):
        from models.review import disapprove_review
        return moderate(review_id, disapprove_review)

    @bp.route('/reviews/<review_id>/verify', methods=['POST'])
    @login_required
    @admin_required
    def verify_review_view(review_id):
        from models.review import verify_review
        return moderate(review_id, verify_review)

    @bp.route('/reviews/<review_id>/delete', methods=['POST'])
    @login_required
    @admin_required
    def delete_review_view(review_id):
        from models.review import delete_review

        try:
            if delete_review(review_id):
                flash(MESSAGES['review_deleted'], 'success')
            else:
                flash(MESSAGES['review_not_found'], 'error')
        except Exception as e:
            current_app.logger.error(f'Error deleting review {review_id}: {e}', exc_info=True)
            flash(MESSAGES['review_delete_failed'], 'error')

        return redirect(url_for('admin.list_reviews'))
