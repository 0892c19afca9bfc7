"""
Database package for the Safari Admin console.

All data lives in a hosted Supabase project. This package provides:
- connection: Supabase client management (get_db, get_auth_client, close_db)
- schema: Table names and column sets of the hosted tables
"""

from database.connection import get_db, get_auth_client, close_db
from database.schema import (
    PACKAGES_TABLE,
    HOTELS_TABLE,
    ATTRACTIONS_TABLE,
    DESTINATIONS_TABLE,
    BOOKINGS_TABLE,
    INQUIRIES_TABLE,
    REVIEWS_TABLE,
)

__all__ = [
    # Connection
    'get_db',
    'get_auth_client',
    'close_db',
    # Schema
    'PACKAGES_TABLE',
    'HOTELS_TABLE',
    'ATTRACTIONS_TABLE',
    'DESTINATIONS_TABLE',
    'BOOKINGS_TABLE',
    'INQUIRIES_TABLE',
    'REVIEWS_TABLE',
]
