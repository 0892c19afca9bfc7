"""
Signed-in user snapshot kept in the Flask session.

The snapshot is the single source of "who is signed in" for every screen:
written at sign-in, refreshed when the admin edits their own account,
removed at sign-out.
"""

from flask import session

SESSION_KEY = 'auth_user'
SNAPSHOT_FIELDS = ('id', 'email', 'created_at', 'last_sign_in_at', 'banned_until',
                   'user_metadata', 'app_metadata')


def _snapshot(user_dict: dict) -> dict:
    snapshot = {field: user_dict.get(field) for field in SNAPSHOT_FIELDS}
    snapshot['id'] = str(snapshot['id'])
    return snapshot


def start_session_user(user_dict: dict) -> dict:
    """Store the signed-in user's snapshot and return it."""
    snapshot = _snapshot(user_dict)
    session[SESSION_KEY] = snapshot
    session.permanent = True
    return snapshot


def get_session_user() -> dict | None:
    """Return the current snapshot, or None when nobody is signed in."""
    return session.get(SESSION_KEY)


def refresh_session_user(user_dict: dict) -> bool:
    """
    Replace the snapshot if user_dict is the signed-in user.

    Returns:
        True if the snapshot was updated
    """
    current = get_session_user()
    if not current or current.get('id') != str(user_dict.get('id')):
        return False
    session[SESSION_KEY] = _snapshot(user_dict)
    return True


def clear_session_user():
    """Remove the snapshot at sign-out."""
    session.pop(SESSION_KEY, None)
