"""Typed lookups on top of a document store."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Protocol

from higure.models import FileRecord, InvisibleAliasRecord, ShortLinkRecord
from higure.services.exceptions import DecodeError

from .mongo import FILES_COLLECTION, INVISIBLE_URLS_COLLECTION, SHORTLINKS_COLLECTION

logger = logging.getLogger(__name__)


class DocumentStore(Protocol):
    def find_one(self, collection: str, filter: Mapping[str, Any]) -> Optional[dict]:
        ...


class MetadataService:
    """
    Looks records up by their unique key and decodes them.

    Every method returns None when nothing matches. A document that exists but
    cannot be decoded raises DecodeError carrying ``not_found_message`` so that
    callers report it exactly like a missing record.
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    def _decode(self, record_type, doc, collection, not_found_message):
        try:
            return record_type.from_document(doc, message=not_found_message)
        except DecodeError as e:
            logger.error(f"Undecodable document in '{collection}': {e.reason}")
            raise

    def find_file(self, filename: str, not_found_message: str = 'invalid file') -> Optional[FileRecord]:
        doc = self.store.find_one(FILES_COLLECTION, {'filename': filename})
        if doc is None:
            return None
        return self._decode(FileRecord, doc, FILES_COLLECTION, not_found_message)

    def find_short_link(self, short_id: str,
                        not_found_message: str = 'invalid short link') -> Optional[ShortLinkRecord]:
        doc = self.store.find_one(SHORTLINKS_COLLECTION, {'shortId': short_id})
        if doc is None:
            return None
        return self._decode(ShortLinkRecord, doc, SHORTLINKS_COLLECTION, not_found_message)

    def find_invisible_alias(self, alias_id: str,
                             not_found_message: str = 'no invisible url or file was found') -> Optional[InvisibleAliasRecord]:
        doc = self.store.find_one(INVISIBLE_URLS_COLLECTION, {'_id': alias_id})
        if doc is None:
            return None
        return self._decode(InvisibleAliasRecord, doc, INVISIBLE_URLS_COLLECTION, not_found_message)
