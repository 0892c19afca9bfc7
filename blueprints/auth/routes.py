"""
Authentication routes: login, logout, profile.
"""

from flask import render_template, redirect, url_for, flash, request, Blueprint, current_app
from flask_login import login_user, logout_user, login_required, current_user
from urllib.parse import urlparse

from blueprints.auth.forms import LoginForm
from models.user import User, sign_in
from utils.auth_session import start_session_user, clear_session_user
from utils.messages import MESSAGES, get_message
from utils.permissions import is_admin

auth_bp = Blueprint('auth', __name__)


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """
    Login route with form handling.

    GET: Display login form
    POST: Verify credentials with Supabase auth and require the admin role
    """
    if current_user.is_authenticated:
        return redirect(url_for('admin.dashboard'))

    form = LoginForm()

    if form.validate_on_submit():
        try:
            user_dict = sign_in(form.email.data.strip(), form.password.data)
        except Exception as e:
            current_app.logger.error(f'Sign in error: {e}', exc_info=True)
            flash(MESSAGES['invalid_credentials'], 'error')
            return redirect(url_for('auth.login'))

        if user_dict is None:
            flash(MESSAGES['invalid_credentials'], 'error')
            return redirect(url_for('auth.login'))

        if not is_admin(user_dict):
            current_app.logger.warning(f"Non-admin sign in refused: {user_dict.get('email')}")
            flash(MESSAGES['admin_required'], 'error')
            return redirect(url_for('auth.login'))

        snapshot = start_session_user(user_dict)
        user = User(snapshot)
        login_user(user, remember=form.remember_me.data)

        flash(get_message('login_success', name=user.full_name), 'success')

        next_page = request.args.get('next')
        if not next_page or urlparse(next_page).netloc != '':
            next_page = url_for('admin.dashboard')

        return redirect(next_page)

    return render_template('auth/login.html', form=form)


@auth_bp.route('/logout')
@login_required
def logout():
    """Logout current user and drop the session snapshot."""
    logout_user()
    clear_session_user()
    flash(MESSAGES['logout_success'], 'success')
    return redirect(url_for('auth.login'))


@auth_bp.route('/profile')
@login_required
def profile():
    """Display the signed-in user's session snapshot."""
    return render_template('auth/profile.html', user=current_user)
