"""
Safari package data access functions.
Handles CRUD operations for the safari_packages table.
"""

import re
from typing import Optional, List, Dict, Tuple

from database import get_db, PACKAGES_TABLE
from database.schema import PACKAGE_COLUMNS, only_columns
from utils.messages import get_message
from utils.validators import validate_url, validate_number_range

DESTINATION_CATEGORIES = ('Masai Mara', 'Combo', 'Samburu', 'Lake Nakuru', 'Amboseli')
PACKAGE_CATEGORIES = ('Premium', 'Classic', 'Adventure', 'Cultural')

REQUIRED_FIELDS = (
    ('title', 'Title'),
    ('duration', 'Duration'),
    ('group_size', 'Group size'),
    ('overview', 'Overview'),
    ('best_travel_season', 'Best travel season'),
    ('image_url', 'Image URL'),
)


# =============================================================================
# QUERY OPERATIONS
# =============================================================================

def get_all_packages() -> List[Dict]:
    """
    Get all packages, newest first.

    Returns:
        List of package dicts
    """
    return get_db().table(PACKAGES_TABLE).select('*').order('created_at', desc=True).execute().data or []


def get_package_by_id(package_id: str) -> Optional[Dict]:
    """
    Get a single package by ID.

    Args:
        package_id: Package ID

    Returns:
        Package dict or None if not found
    """
    rows = get_db().table(PACKAGES_TABLE).select('*').eq('id', package_id).limit(1).execute().data
    return rows[0] if rows else None


# =============================================================================
# VALIDATION
# =============================================================================

def package_key(data: Dict) -> Optional[str]:
    """
    Derive the public package_id: the slug, else the title lower-cased with
    whitespace runs replaced by '-'.
    """
    if data.get('slug'):
        return data['slug']
    if data.get('title'):
        return re.sub(r'\s+', '-', data['title'].lower())
    return None


def validate_package_data(data: Dict, partial: bool = False) -> Tuple[bool, str]:
    """
    Validate package data before create/update.

    Args:
        data: Package data dict
        partial: If True, only validate the keys present

    Returns:
        (is_valid, error_message)
    """
    for field, label in REQUIRED_FIELDS:
        if (not partial or field in data) and not str(data.get(field) or '').strip():
            return False, get_message('field_required', field=label)

    if not partial or 'price_range' in data:
        is_valid, error = validate_number_range(data.get('price_range'), 0, 10_000_000, 'Price')
        if not is_valid:
            return False, error

    if data.get('rating') is not None:
        is_valid, error = validate_number_range(data['rating'], 0, 5, 'Rating')
        if not is_valid:
            return False, error

    if (not partial or 'destination_category' in data) and data.get('destination_category') not in DESTINATION_CATEGORIES:
        return False, 'Invalid destination category'

    if (not partial or 'package_category' in data) and data.get('package_category') not in PACKAGE_CATEGORIES:
        return False, 'Invalid package category'

    if data.get('image_url') and not validate_url(data['image_url']):
        return False, 'Invalid image URL'

    return True, ''


# =============================================================================
# MUTATIONS
# =============================================================================

def create_package(data: Dict) -> Dict:
    """
    Create a new package.

    Args:
        data: Package data dict

    Returns:
        The created package row

    Raises:
        ValueError: If validation fails
    """
    is_valid, error = validate_package_data(data)
    if not is_valid:
        raise ValueError(error)

    payload = only_columns(data, PACKAGE_COLUMNS)
    payload.pop('id', None)
    payload['package_id'] = package_key(payload)

    rows = get_db().table(PACKAGES_TABLE).insert(payload).execute().data
    return rows[0] if rows else payload


def update_package(package_id: str, data: Dict) -> Optional[Dict]:
    """
    Update an existing package.

    Args:
        package_id: Package ID
        data: Fields to update

    Returns:
        Updated package row, or None if not found

    Raises:
        ValueError: If validation fails
    """
    is_valid, error = validate_package_data(data, partial=True)
    if not is_valid:
        raise ValueError(error)

    payload = only_columns(data, PACKAGE_COLUMNS)
    payload.pop('id', None)
    if 'slug' in payload or 'title' in payload:
        payload['package_id'] = package_key(payload)

    rows = get_db().table(PACKAGES_TABLE).update(payload).eq('id', package_id).execute().data
    return rows[0] if rows else None


def set_package_featured(package_id: str, featured: bool) -> Optional[Dict]:
    """
    Feature or un-feature a package on the public site.

    Args:
        package_id: Package ID
        featured: New is_featured value

    Returns:
        Updated package row, or None if not found
    """
    rows = get_db().table(PACKAGES_TABLE).update({'is_featured': bool(featured)}).eq('id', package_id).execute().data
    return rows[0] if rows else None


def delete_package(package_id: str) -> bool:
    """
    Delete a package.

    Args:
        package_id: Package ID

    Returns:
        True if a row was deleted
    """
    rows = get_db().table(PACKAGES_TABLE).delete().eq('id', package_id).execute().data
    return bool(rows)
