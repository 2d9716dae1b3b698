"""Dependency container for request handling."""

from __future__ import annotations

import atexit
from dataclasses import dataclass
from typing import Optional

from higure.config import app_config

from .composer import ResponseComposer
from .metadata import MetadataService, MongoMetadataStore, load_metadata_settings_from_env
from .resolver import ContentResolver
from .storage import StorageService


@dataclass
class ContentServices:
    """Everything a request needs, built once at startup."""

    metadata: MetadataService
    storage: StorageService
    resolver: ContentResolver
    composer: ResponseComposer

    @classmethod
    def from_parts(cls, *, store, storage: StorageService, canonical_url: Optional[str] = None,
                   site_name: Optional[str] = None, stylesheet_url: Optional[str] = None) -> 'ContentServices':
        metadata = MetadataService(store)
        return cls(
            metadata=metadata,
            storage=storage,
            resolver=ContentResolver(metadata),
            composer=ResponseComposer(
                storage,
                canonical_url=canonical_url or app_config.CANONICAL_URL,
                site_name=site_name or app_config.SITE_NAME,
                stylesheet_url=stylesheet_url or app_config.STYLESHEET_URL,
            ),
        )


def build_services() -> ContentServices:
    """Wire the production metadata and object stores from the environment."""
    store = MongoMetadataStore(load_metadata_settings_from_env())
    atexit.register(store.close)
    return ContentServices.from_parts(store=store, storage=StorageService())
