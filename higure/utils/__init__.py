"""
Utility functions package for the content server.
"""

from .errors import (
    INTERNAL_ERROR_MESSAGE,
    error_response,
    content_error_response
)

__all__ = [
    'INTERNAL_ERROR_MESSAGE',
    'error_response',
    'content_error_response',
]
