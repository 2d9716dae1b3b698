"""
Exceptions raised while resolving and serving content.
"""


class ContentError(Exception):
    """Base exception for request resolution errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ContentError):
    """Record or alias missing, or hidden by the domain policy."""

    status_code = 404


class DecodeError(NotFoundError):
    """A stored document could not be read as the expected record type."""

    def __init__(self, message: str, collection: str = None, reason: str = None):
        super().__init__(message)
        self.collection = collection
        self.reason = reason


class UpstreamError(ContentError):
    """Object store fetch or read failure."""

    status_code = 502

    def __init__(self, message: str, key: str = None):
        super().__init__(message)
        self.key = key


class RenderError(ContentError):
    """Template execution failure."""
    pass
