"""
Route decorators for authentication and authorization.
Gates console routes behind the administrator role claim.
"""

from functools import wraps
from flask import flash, abort, request
from flask_login import login_required, current_user

from utils.messages import MESSAGES
from utils.permissions import is_admin


def admin_required(func):
    """
    Decorator to require the administrator role for a route.

    Usage:
        @admin_bp.route('/hotels')
        @login_required
        @admin_required
        def list_hotels():
            ...

    JSON endpoints (under /api) get a bare 403; HTML routes also flash.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        if not is_admin(current_user):
            if not request.path.startswith('/api/'):
                flash(MESSAGES['permission_denied'], 'error')
            abort(403)

        return func(*args, **kwargs)
    return wrapper


# Re-export login_required for convenience
__all__ = ['login_required', 'admin_required']
