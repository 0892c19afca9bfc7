"""
Flask extensions initialization.
Extensions are initialized here and then initialized with the app in app.py.
"""

from flask import session
from flask_login import LoginManager
from flask_wtf.csrf import CSRFProtect

# Initialize Flask-Login
login_manager = LoginManager()

# Initialize CSRF Protection
csrf = CSRFProtect()

# Configure Login Manager
login_manager.login_view = 'auth.login'
login_manager.login_message = 'Please sign in to access this page'
login_manager.login_message_category = 'warning'


@login_manager.user_loader
def load_user(user_id):
    """
    Load the signed-in user from the session snapshot.

    The snapshot is written at sign-in, so screens never re-fetch the
    current user from the backend.

    Args:
        user_id: The auth user ID as a string

    Returns:
        User object or None if no matching snapshot exists
    """
    from models.user import User
    from utils.auth_session import get_session_user

    user_dict = get_session_user()
    if user_dict and str(user_dict.get('id')) == user_id:
        return User(user_dict)
    session.pop('auth_user', None)
    return None
