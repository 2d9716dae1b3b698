"""Storage service facade used by the response composer."""

from __future__ import annotations

import logging
from typing import Optional

from higure.services.exceptions import UpstreamError

from .factory import StorageSettings, build_backend, load_storage_settings_from_env
from .interfaces import FetchedObject
from .locator import build_cdn_url

logger = logging.getLogger(__name__)


class StorageService:
    """Facade to hide storage backend details from request handling."""

    def __init__(self, settings: Optional[StorageSettings] = None, backend=None):
        self.settings = settings or load_storage_settings_from_env()
        self.backend = backend if backend is not None else build_backend(self.settings)

    @property
    def backend_kind(self) -> str:
        return self.settings.backend

    def fetch(self, key: str) -> FetchedObject:
        """Read an object, turning any backend failure into UpstreamError."""
        try:
            return self.backend.get_object(key)
        except Exception as e:
            logger.warning(f"Object fetch failed for key {key!r}: {e}")
            raise UpstreamError(str(e), key=key) from e

    def cdn_url(self, key: str) -> str:
        return build_cdn_url(self.settings.s3_endpoint, self.settings.s3_bucket_name, key)
