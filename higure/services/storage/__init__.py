"""Object storage access supporting S3 and local backends."""

from .interfaces import FetchedObject
from .locator import build_cdn_url, normalize_key
from .factory import StorageSettings, load_storage_settings_from_env, build_backend
from .service import StorageService

__all__ = [
    'FetchedObject',
    'build_cdn_url',
    'normalize_key',
    'StorageSettings',
    'load_storage_settings_from_env',
    'build_backend',
    'StorageService',
]
