"""
Auth user routes.
Administers Supabase auth accounts: profile metadata, bans and deletion.
"""

from flask import render_template, redirect, url_for, flash, request, current_app
from flask_login import login_required, current_user
from utils.decorators import admin_required
from utils.messages import MESSAGES


def register_routes(bp):
    """Register user management routes on the blueprint."""

    @bp.route('/users')
    @login_required
    @admin_required
    def list_users():
        """List auth users."""
        from models.user import get_all_users, is_banned
        from blueprints.admin.services import filter_users

        search = request.args.get('search', '').strip()
        status = request.args.get('status', 'all')

        try:
            users = get_all_users()
        except Exception as e:
            current_app.logger.error(f'Error fetching users: {e}', exc_info=True)
            flash(MESSAGES['users_load_failed'], 'error')
            users = []

        return render_template(
            'admin/users/list.html',
            users=filter_users(users, search, status),
            banned_ids={u['id'] for u in users if is_banned(u)},
            total=len(users),
            filters={'search': search, 'status': status}
        )

    @bp.route('/users/<user_id>/edit', methods=['GET', 'POST'])
    @login_required
    @admin_required
    def edit_user_view(user_id):
        """Edit a user's profile metadata."""
        from models.user import get_user_by_id, update_user_metadata, USER_ROLES
        from blueprints.admin.services import build_user_metadata_payload
        from utils.auth_session import refresh_session_user

        user = get_user_by_id(user_id)
        if not user:
            flash(MESSAGES['user_not_found'], 'error')
            return redirect(url_for('admin.list_users'))

        if request.method == 'POST':
            data = build_user_metadata_payload(request.form)
            try:
                updated = update_user_metadata(user_id, data)
                if updated is None:
                    flash(MESSAGES['user_not_found'], 'error')
                else:
                    # Editing one's own account keeps the session snapshot current
                    refresh_session_user(updated)
                    flash(MESSAGES['user_updated'], 'success')
                return redirect(url_for('admin.list_users'))
            except ValueError as e:
                flash(str(e), 'error')
            except Exception as e:
                current_app.logger.error(f'Error updating user {user_id}: {e}', exc_info=True)
                flash(MESSAGES['user_update_failed'], 'error')
            user = {**user, 'user_metadata': {**user['user_metadata'], **data}}

        return render_template('admin/users/form.html', user=user, roles=USER_ROLES)

    @bp.route('/users/<user_id>/ban', methods=['POST'])
    @login_required
    @admin_required
    def ban_user_view(user_id):
        """Ban a user indefinitely."""
        from models.user import ban_user, can_modify_user

        allowed, message_key = can_modify_user(user_id, current_user.id, 'ban')
        if not allowed:
            flash(MESSAGES[message_key], 'error')
            return redirect(url_for('admin.list_users'))

        try:
            ban_user(user_id)
            flash(MESSAGES['user_banned'], 'success')
        except Exception as e:
            current_app.logger.error(f'Error banning user {user_id}: {e}', exc_info=True)
            flash(MESSAGES['user_ban_failed'], 'error')

        return redirect(url_for('admin.list_users'))

    @bp.route('/users/<user_id>/unban', methods=['POST'])
    @login_required
    @admin_required
    def unban_user_view(user_id):
        """Lift a user's ban."""
        from models.user import unban_user

        try:
            unban_user(user_id)
            flash(MESSAGES['user_unbanned'], 'success')
        except Exception as e:
            current_app.logger.error(f'Error unbanning user {user_id}: {e}', exc_info=True)
            flash(MESSAGES['user_unban_failed'], 'error')

        return redirect(url_for('admin.list_users'))

    @bp.route('/users/<user_id>/delete', methods=['POST'])
    @login_required
    @admin_required
    def delete_user_view(user_id):
        """Delete a user permanently."""
        from models.user import delete_user, can_modify_user

        allowed, message_key = can_modify_user(user_id, current_user.id, 'delete')
        if not allowed:
            flash(MESSAGES[message_key], 'error')
            return redirect(url_for('admin.list_users'))

        try:
            delete_user(user_id)
            flash(MESSAGES['user_deleted'], 'success')
        except Exception as e:
            current_app.logger.error(f'Error deleting user {user_id}: {e}', exc_info=True)
            flash(MESSAGES['user_delete_failed'], 'error')

        return redirect(url_for('admin.list_users'))
