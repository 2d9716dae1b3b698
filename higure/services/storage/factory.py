"""Factory for configuring object storage backends from environment variables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .local import LocalStorageBackend
from .s3 import S3StorageBackend


@dataclass
class StorageSettings:
    backend: str
    local_root: str
    s3_endpoint: str = ''
    s3_bucket_name: str = ''
    s3_region: Optional[str] = None
    s3_access_key_id: Optional[str] = None
    s3_secret_access_key: Optional[str] = None
    s3_use_path_style: bool = True
    s3_verify_ssl: bool = True
    s3_timeout_seconds: float = 10.0


def load_storage_settings_from_env() -> StorageSettings:
    from higure.config import app_config

    return StorageSettings(
        backend=(app_config.FILE_STORAGE_BACKEND or 's3').strip().lower() or 's3',
        local_root=app_config.UPLOAD_FOLDER,
        s3_endpoint=app_config.S3_ENDPOINT,
        s3_bucket_name=app_config.S3_BUCKET_NAME,
        s3_region=app_config.S3_REGION,
        s3_access_key_id=app_config.S3_ACCESS_KEY_ID,
        s3_secret_access_key=app_config.S3_SECRET_ACCESS_KEY,
        s3_use_path_style=bool(app_config.S3_USE_PATH_STYLE),
        s3_verify_ssl=bool(app_config.S3_VERIFY_SSL),
        s3_timeout_seconds=float(app_config.S3_TIMEOUT_SECONDS),
    )


def build_local_backend(settings: StorageSettings) -> LocalStorageBackend:
    return LocalStorageBackend(settings.local_root)


def build_s3_backend(settings: StorageSettings) -> Optional[S3StorageBackend]:
    if not settings.s3_bucket_name:
        return None
    return S3StorageBackend(
        bucket=settings.s3_bucket_name,
        region=settings.s3_region,
        endpoint_url=settings.s3_endpoint or None,
        access_key_id=settings.s3_access_key_id,
        secret_access_key=settings.s3_secret_access_key,
        use_path_style=settings.s3_use_path_style,
        verify_ssl=settings.s3_verify_ssl,
        timeout_seconds=settings.s3_timeout_seconds,
    )


def build_backend(settings: StorageSettings):
    if settings.backend == 's3':
        backend = build_s3_backend(settings)
        if backend is None:
            raise RuntimeError('FILE_STORAGE_BACKEND=s3 but S3_BUCKET_NAME is not configured')
        return backend
    if settings.backend == 'local':
        return build_local_backend(settings)
    raise ValueError(f"Unsupported FILE_STORAGE_BACKEND: {settings.backend}")
