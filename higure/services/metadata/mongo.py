"""MongoDB-backed metadata store with lazy client initialization."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Mapping, Optional

FILES_COLLECTION = 'files'
SHORTLINKS_COLLECTION = 'shorteners'
INVISIBLE_URLS_COLLECTION = 'invisibleurls'


@dataclass
class MetadataSettings:
    uri: str
    database: str
    timeout_ms: int = 5000


def load_metadata_settings_from_env() -> MetadataSettings:
    from higure.config import app_config

    return MetadataSettings(
        uri=app_config.MONGO_URI,
        database=app_config.MONGO_DATABASE,
        timeout_ms=int(app_config.MONGO_TIMEOUT_MS),
    )


class MongoMetadataStore:
    """Read-only access to the files, shorteners and invisibleurls collections."""

    def __init__(self, settings: MetadataSettings):
        self.settings = settings
        self._client = None
        self._client_lock = threading.Lock()

    def _get_database(self):
        if self._client is None:
            with self._client_lock:
                if self._client is None:
                    from pymongo import MongoClient

                    timeout = self.settings.timeout_ms
                    self._client = MongoClient(
                        self.settings.uri,
                        serverSelectionTimeoutMS=timeout,
                        connectTimeoutMS=timeout,
                        socketTimeoutMS=timeout,
                    )
        return self._client[self.settings.database]

    def find_one(self, collection: str, filter: Mapping[str, Any]) -> Optional[dict]:
        """First document in ``collection`` matching ``filter`` exactly, or None."""
        return self._get_database()[collection].find_one(dict(filter))

    def close(self) -> None:
        with self._client_lock:
            if self._client is not None:
                self._client.close()
                self._client = None
