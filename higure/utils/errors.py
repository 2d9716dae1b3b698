"""
JSON error envelope shared by every failure path.
"""

from flask import current_app, jsonify

from higure.services.exceptions import ContentError

INTERNAL_ERROR_MESSAGE = 'internal server error'


def error_response(message, status_code=500):
    """
    Build ``{"success": false, "error": message}``.

    The envelope is sent with HTTP 200 unless ERROR_STATUS_CODES is enabled,
    in which case ``status_code`` is used.
    """
    response = jsonify({'success': False, 'error': message})
    if current_app.config.get('ERROR_STATUS_CODES'):
        response.status_code = status_code
    return response


def content_error_response(error: ContentError):
    return error_response(error.message, error.status_code)
