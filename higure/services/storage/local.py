"""Local filesystem storage backend."""

from __future__ import annotations

import mimetypes
from pathlib import Path

from .interfaces import FetchedObject
from .locator import local_path_from_key


class LocalStorageBackend:
    """Serves objects from a directory, keyed by relative path."""

    def __init__(self, root: str):
        self.root = str(Path(root))
        Path(self.root).mkdir(parents=True, exist_ok=True)

    def get_object(self, key: str) -> FetchedObject:
        path = local_path_from_key(self.root, key)
        with open(path, 'rb') as f:
            body = f.read()
        content_type, _ = mimetypes.guess_type(path)
        return FetchedObject(key=key, body=body, content_type=content_type)
