"""
User model and auth data access functions.
Handles sign-in, the Flask-Login user object, and the Supabase auth admin API
(listing, metadata edits, bans and deletion).
"""

import logging
from datetime import datetime, timezone

from supabase import AuthApiError

from database import get_db, get_auth_client
from utils.datetime_helpers import parse_timestamp

logger = logging.getLogger(__name__)

# GoTrue has no "forever"; a century is the conventional stand-in
BAN_DURATION = '876000h'
UNBAN_DURATION = 'none'

USER_ROLES = ('user', 'moderator', 'admin')
METADATA_FIELDS = ('full_name', 'name', 'avatar_url', 'role')


class User:
    """
    User class for Flask-Login integration.
    Wraps the auth user snapshot with required Flask-Login properties.
    """

    def __init__(self, user_dict):
        """
        Initialize User from an auth user dict.

        Args:
            user_dict: Dictionary with auth user data
        """
        self.id = str(user_dict['id'])
        self.email = user_dict.get('email')
        self.user_metadata = user_dict.get('user_metadata') or {}
        self.app_metadata = user_dict.get('app_metadata') or {}
        self.banned_until = user_dict.get('banned_until')
        self.created_at = user_dict.get('created_at')
        self.last_sign_in_at = user_dict.get('last_sign_in_at')

    @property
    def full_name(self):
        """Display name from user metadata, falling back to the email."""
        return display_name(self.__dict__)

    @property
    def is_authenticated(self):
        """Required by Flask-Login."""
        return True

    @property
    def is_active(self):
        """Required by Flask-Login."""
        return not is_banned(self.__dict__)

    @property
    def is_anonymous(self):
        """Required by Flask-Login."""
        return False

    def get_id(self):
        """Required by Flask-Login. Returns user ID as unicode string."""
        return self.id


def user_to_dict(user) -> dict:
    """
    Normalize an auth user (pydantic model or dict) into a plain dict.

    Timestamps become ISO strings so the result is session-serializable.
    """
    if user is None:
        return None
    if isinstance(user, dict):
        data = dict(user)
    elif hasattr(user, 'model_dump'):
        data = user.model_dump(mode='json')
    else:
        data = dict(vars(user))

    for key, value in data.items():
        if isinstance(value, datetime):
            data[key] = value.isoformat()
    data['user_metadata'] = data.get('user_metadata') or {}
    data['app_metadata'] = data.get('app_metadata') or {}
    return data


def display_name(user_dict: dict) -> str:
    """Name shown in lists: full_name, then name, then email."""
    metadata = user_dict.get('user_metadata') or {}
    return metadata.get('full_name') or metadata.get('name') or user_dict.get('email') or ''


def is_banned(user_dict: dict) -> bool:
    """True while banned_until lies in the future."""
    banned_until = parse_timestamp(user_dict.get('banned_until'))
    return banned_until is not None and banned_until > datetime.now(timezone.utc)


# =============================================================================
# SIGN-IN
# =============================================================================

def sign_in(email: str, password: str) -> dict:
    """
    Verify credentials against Supabase auth.

    A throwaway anon-key client performs the sign-in and is signed out
    again; the console keeps only the user snapshot.

    Args:
        email: Account email
        password: Account password

    Returns:
        Auth user dict, or None if the credentials are rejected
    """
    client = get_auth_client()
    try:
        response = client.auth.sign_in_with_password({'email': email, 'password': password})
    except AuthApiError as e:
        logger.warning(f'Sign in rejected for {email}: {e}')
        return None

    if not response or not response.user:
        return None

    user = user_to_dict(response.user)
    client.auth.sign_out()
    logger.info(f'Sign in successful: {email}')
    return user


# =============================================================================
# ADMIN API
# =============================================================================

def get_all_users() -> list:
    """
    List every auth user.

    Returns:
        List of user dicts, newest first
    """
    users = [user_to_dict(u) for u in (get_db().auth.admin.list_users() or [])]
    users.sort(key=lambda u: u.get('created_at') or '', reverse=True)
    return users


def get_user_by_id(user_id: str) -> dict:
    """
    Get auth user by ID.

    Returns:
        User dict or None if not found
    """
    try:
        response = get_db().auth.admin.get_user_by_id(user_id)
    except AuthApiError as e:
        logger.warning(f'User lookup failed for {user_id}: {e}')
        return None
    return user_to_dict(response.user) if response and response.user else None


def get_user_by_email(email: str) -> dict:
    """
    Find auth user by email (case-insensitive).

    Returns:
        User dict or None if not found
    """
    email = (email or '').strip().lower()
    for user in get_all_users():
        if (user.get('email') or '').lower() == email:
            return user
    return None


def update_user_metadata(user_id: str, metadata: dict) -> dict:
    """
    Merge changes into a user's user_metadata.

    Args:
        user_id: Auth user ID
        metadata: Keys to set (full_name, name, avatar_url, role)

    Returns:
        Updated user dict, or None if the user does not exist

    Raises:
        ValueError: If role is not a known role
    """
    changes = {key: value for key, value in metadata.items() if key in METADATA_FIELDS}
    if changes.get('role') and changes['role'] not in USER_ROLES:
        raise ValueError(f"Invalid role: {changes['role']}")

    current = get_user_by_id(user_id)
    if current is None:
        return None

    merged = {**current['user_metadata'], **changes}
    response = get_db().auth.admin.update_user_by_id(user_id, {'user_metadata': merged})
    return user_to_dict(response.user)


def set_app_role(user_id: str, role: str) -> dict:
    """
    Set the app_metadata.role claim (the claim the console trusts).

    Returns:
        Updated user dict
    """
    current = get_user_by_id(user_id)
    app_metadata = dict(current['app_metadata']) if current else {}
    app_metadata['role'] = role
    response = get_db().auth.admin.update_user_by_id(user_id, {'app_metadata': app_metadata})
    return user_to_dict(response.user)


def create_admin_user(email: str, password: str, role: str = 'admin') -> dict:
    """
    Create a confirmed auth user carrying the admin role claim.

    Returns:
        Created user dict
    """
    response = get_db().auth.admin.create_user({
        'email': email,
        'password': password,
        'email_confirm': True,
        'app_metadata': {'role': role},
    })
    return user_to_dict(response.user)


def ban_user(user_id: str) -> None:
    """Ban a user indefinitely."""
    get_db().auth.admin.update_user_by_id(user_id, {'ban_duration': BAN_DURATION})
    logger.info(f'Banned user {user_id}')


def unban_user(user_id: str) -> None:
    """Lift a user's ban."""
    get_db().auth.admin.update_user_by_id(user_id, {'ban_duration': UNBAN_DURATION})
    logger.info(f'Unbanned user {user_id}')


def delete_user(user_id: str) -> None:
    """Delete an auth user permanently."""
    get_db().auth.admin.delete_user(user_id)
    logger.info(f'Deleted user {user_id}')


def can_modify_user(user_id: str, current_user_id: str, action: str) -> tuple:
    """
    Check if the signed-in admin may ban or delete a user.

    Args:
        user_id: Target user ID
        current_user_id: Signed-in user ID
        action: 'ban' or 'delete'

    Returns:
        Tuple of (allowed, message_key)
    """
    if str(user_id) == str(current_user_id):
        return False, f'cannot_{action}_self'
    return True, ''
