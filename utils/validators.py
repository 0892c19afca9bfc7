"""
Input validation helper functions.
Provides validation for common input types.
"""

import re
from datetime import datetime


def validate_email(email: str) -> bool:
    """
    Validate email format.

    Args:
        email: Email address to validate

    Returns:
        True if valid email format
    """
    if not email:
        return False

    pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    return bool(re.match(pattern, email))


def validate_url(url: str) -> bool:
    """
    Validate an absolute http(s) URL or a site-relative path.

    Args:
        url: URL to validate

    Returns:
        True if valid
    """
    if not url:
        return False

    if url.startswith('/') and not url.startswith('//'):
        return ' ' not in url

    return bool(re.match(r'^https?://[^\s/$.?#][^\s]*$', url, re.IGNORECASE))


def validate_hex_color(color: str) -> bool:
    """
    Validate a CSS hex colour (#RGB or #RRGGBB).

    Args:
        color: Colour string

    Returns:
        True if valid hex colour
    """
    if not color:
        return False

    return bool(re.match(r'^#(?:[0-9a-fA-F]{3}){1,2}$', color))


def validate_date_range(start_date: str, end_date: str) -> bool:
    """
    Validate that end date is not before start date.

    Args:
        start_date: Start date (YYYY-MM-DD)
        end_date: End date (YYYY-MM-DD)

    Returns:
        True if valid date range
    """
    try:
        start = datetime.strptime(start_date, '%Y-%m-%d')
        end = datetime.strptime(end_date, '%Y-%m-%d')
        return end >= start
    except (ValueError, TypeError):
        return False


def validate_date_format(date_str: str) -> bool:
    """
    Validate date is in YYYY-MM-DD format.

    Args:
        date_str: Date string to validate

    Returns:
        True if valid format
    """
    try:
        datetime.strptime(date_str, '%Y-%m-%d')
        return True
    except (ValueError, TypeError):
        return False


def validate_number_range(value, minimum: float, maximum: float, label: str) -> tuple:
    """
    Validate that a numeric value falls inside [minimum, maximum].

    Args:
        value: Value to check (number or numeric string)
        minimum: Lowest accepted value
        maximum: Highest accepted value
        label: Field label used in the error message

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False, f'{label} must be a number'

    if number < minimum or number > maximum:
        return False, f'{label} must be between {minimum:g} and {maximum:g}'

    return True, ''


def sanitize_input(text: str, max_length: int = None) -> str:
    """
    Sanitize text input by trimming and limiting length.

    Args:
        text: Text to sanitize
        max_length: Maximum length (optional)

    Returns:
        Sanitized text
    """
    if not text:
        return ''

    sanitized = text.strip()

    if max_length and len(sanitized) > max_length:
        sanitized = sanitized[:max_length]

    return sanitized
