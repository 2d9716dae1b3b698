"""Key normalization and public URL helpers for stored objects."""

from __future__ import annotations

import os
from pathlib import Path


def normalize_key(key: str) -> str:
    key = (key or '').replace('\\', '/').strip()
    while '//' in key:
        key = key.replace('//', '/')
    return key.lstrip('/')


def build_cdn_url(endpoint: str, bucket: str, key: str) -> str:
    """Public URL of an object: ``<endpoint>/<bucket>/<key>``."""
    parts = [(endpoint or '').rstrip('/'), (bucket or '').strip('/'), normalize_key(key)]
    return '/'.join(part for part in parts if part)


def local_path_from_key(root: str, key: str) -> str:
    rel = normalize_key(key)
    root_path = Path(root).resolve()
    path = (root_path / rel).resolve()
    if root_path != path and root_path not in path.parents:
        raise ValueError(f"Key escapes storage root: {key}")
    return str(path)
