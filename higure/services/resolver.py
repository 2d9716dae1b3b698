"""Resolve classified routes to records from the metadata store."""

from __future__ import annotations

import logging
from typing import Tuple

from higure.models import FileRecord, is_invisible_key

from .exceptions import NotFoundError
from .metadata import MetadataService

logger = logging.getLogger(__name__)

DOMAIN_PLACEHOLDER = '{domain}'

INVALID_FILE = 'invalid file'
INVALID_SHORT_LINK = 'invalid short link'
INVALID_INVISIBLE_URL = 'no invisible url or file was found'


def substitute_domain(text: str, host: str) -> str:
    """Replace every ``{domain}`` token with the request host."""
    return text.replace(DOMAIN_PLACEHOLDER, host)


def normalize_destination(destination: str) -> str:
    """Short-link targets may be stored without a scheme; default to https."""
    if destination.startswith('http'):
        return destination
    return 'https://' + destination


class ContentResolver:
    """Turns routing keys into records, applying alias indirection and domain policy."""

    def __init__(self, metadata: MetadataService):
        self.metadata = metadata

    def resolve_oembed(self, filename: str, host: str) -> Tuple[str, str]:
        record = self.metadata.find_file(filename, INVALID_FILE)
        if record is None:
            raise NotFoundError(INVALID_FILE)
        return (
            substitute_domain(record.embed.title, host),
            substitute_domain(record.embed.author, host),
        )

    def resolve_short_link(self, short_id: str) -> str:
        link = self.metadata.find_short_link(short_id, INVALID_SHORT_LINK)
        if link is None:
            raise NotFoundError(INVALID_SHORT_LINK)
        return normalize_destination(link.destination)

    def resolve_file(self, key: str, host: str) -> FileRecord:
        if is_invisible_key(key):
            alias = self.metadata.find_invisible_alias(key, INVALID_INVISIBLE_URL)
            if alias is None:
                raise NotFoundError(INVALID_INVISIBLE_URL)
            filename = alias.filename
        else:
            filename = key

        record = self.metadata.find_file(filename, INVALID_FILE)
        if record is None:
            raise NotFoundError(INVALID_FILE)

        # Same message as a missing file so restricted uploads can't be probed
        if record.user_only_domain and host != record.domain:
            logger.debug(f"File {record.filename!r} restricted to {record.domain!r}, requested via {host!r}")
            raise NotFoundError(INVALID_FILE)
        return record
