"""Metadata store access (files, short links, invisible aliases)."""

from .mongo import (
    FILES_COLLECTION,
    SHORTLINKS_COLLECTION,
    INVISIBLE_URLS_COLLECTION,
    MetadataSettings,
    MongoMetadataStore,
    load_metadata_settings_from_env,
)
from .service import DocumentStore, MetadataService

__all__ = [
    'FILES_COLLECTION',
    'SHORTLINKS_COLLECTION',
    'INVISIBLE_URLS_COLLECTION',
    'MetadataSettings',
    'MongoMetadataStore',
    'load_metadata_settings_from_env',
    'DocumentStore',
    'MetadataService',
]
