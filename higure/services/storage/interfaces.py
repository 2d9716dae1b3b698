"""Storage interfaces and shared dataclasses for object storage backends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class FetchedObject:
    """Bytes read from the object store together with their stored metadata."""

    key: str
    body: bytes
    content_type: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.body)
