"""
Standardized API response helpers.

Every JSON endpoint answers with the same envelope:

    Success:  {"success": true, "data": {...}, "message": "..."}
    Error:    {"success": false, "error": "Failed to update hotel"}

Usage:
    from utils.api_response import api_success, api_error

    return api_success(data={'hotel': hotel}, message='Hotel created successfully', status=201)
    return api_error('Hotel not found', status=404)
"""

from flask import jsonify
from typing import Any


def api_success(
    data: dict | None = None,
    message: str | None = None,
    status: int = 200,
    **extra_fields: Any
) -> tuple:
    """
    Build a success JSON response.

    Args:
        data: Optional dict placed under 'data'.
        message: Optional notification text.
        status: HTTP status code (default 200).
        **extra_fields: Additional top-level fields.

    Returns:
        Tuple of (Response, status_code)
    """
    response = {'success': True}

    if data is not None:
        response['data'] = data

    if message:
        response['message'] = message

    if extra_fields:
        response.update(extra_fields)

    return jsonify(response), status


def api_error(error: str, status: int = 400, **extra_fields: Any) -> tuple:
    """
    Build an error JSON response.

    Args:
        error: Notification text shown to the user.
        status: HTTP status code (default 400).
        **extra_fields: Additional top-level fields.

    Returns:
        Tuple of (Response, status_code)
    """
    response = {'success': False, 'error': error}

    if extra_fields:
        response.update(extra_fields)

    return jsonify(response), status
