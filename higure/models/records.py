"""
Typed records read from the metadata store.

Documents come back from the store as plain dicts. Each record type knows how to
build itself from one and raises DecodeError when a field is missing or has the
wrong type, so nothing downstream has to guess at shapes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from higure.services.exceptions import DecodeError

ZERO_WIDTH_SPACE = '\u200b'


def _field(doc: Mapping[str, Any], name: str, kind, *, message: str, collection: str, default=None, required: bool = True):
    value = doc.get(name, default)
    if value is None:
        if required:
            raise DecodeError(message, collection=collection, reason=f"missing field '{name}'")
        return default
    if not isinstance(value, kind):
        raise DecodeError(
            message,
            collection=collection,
            reason=f"field '{name}' is {type(value).__name__}, expected {kind.__name__}",
        )
    return value


def _sub_document(doc: Mapping[str, Any], name: str, *, message: str, collection: str) -> Mapping[str, Any]:
    return _field(doc, name, dict, message=message, collection=collection)


@dataclass(frozen=True)
class EmbedSettings:
    """Preview settings attached to every uploaded file."""

    enabled: bool = False
    title: str = ''
    author: str = ''
    description: str = ''
    color: str = ''

    @classmethod
    def from_document(cls, doc: Mapping[str, Any], *, message: str = 'invalid file') -> 'EmbedSettings':
        kw = dict(message=message, collection='files', required=False)
        return cls(
            enabled=_field(doc, 'enabled', bool, default=False, **kw),
            title=_field(doc, 'title', str, default='', **kw),
            author=_field(doc, 'author', str, default='', **kw),
            description=_field(doc, 'description', str, default='', **kw),
            color=_field(doc, 'color', str, default='', **kw),
        )


@dataclass(frozen=True)
class Uploader:
    username: str

    @classmethod
    def from_document(cls, doc: Mapping[str, Any], *, message: str = 'invalid file') -> 'Uploader':
        return cls(username=_field(doc, 'username', str, message=message, collection='files', default=''))


@dataclass(frozen=True)
class FileRecord:
    """One uploaded asset."""

    filename: str
    key: str
    mimetype: str
    size: str
    domain: str
    uploader: Uploader
    embed: EmbedSettings
    user_only_domain: bool = False
    show_link: bool = False

    @property
    def category(self) -> str:
        """Top-level MIME type, e.g. 'image' for 'image/png'."""
        return self.mimetype.split('/', 1)[0]

    @property
    def is_image(self) -> bool:
        return self.category == 'image'

    @property
    def is_video(self) -> bool:
        return self.category == 'video'

    @classmethod
    def from_document(cls, doc: Mapping[str, Any], *, message: str = 'invalid file') -> 'FileRecord':
        kw = dict(message=message, collection='files')
        return cls(
            filename=_field(doc, 'filename', str, **kw),
            key=_field(doc, 'key', str, **kw),
            mimetype=_field(doc, 'mimetype', str, **kw),
            size=_field(doc, 'size', str, default='', required=False, **kw),
            domain=_field(doc, 'domain', str, default='', required=False, **kw),
            uploader=Uploader.from_document(_sub_document(doc, 'uploader', **kw), message=message),
            embed=EmbedSettings.from_document(_sub_document(doc, 'embed', **kw), message=message),
            user_only_domain=_field(doc, 'userOnlyDomain', bool, default=False, required=False, **kw),
            show_link=_field(doc, 'showLink', bool, default=False, required=False, **kw),
        )


@dataclass(frozen=True)
class ShortLinkRecord:
    """A short-link alias pointing at an external destination."""

    short_id: str
    destination: str

    @classmethod
    def from_document(cls, doc: Mapping[str, Any], *, message: str = 'invalid short link') -> 'ShortLinkRecord':
        kw = dict(message=message, collection='shorteners')
        return cls(
            short_id=_field(doc, 'shortId', str, **kw),
            destination=_field(doc, 'destination', str, **kw),
        )


@dataclass(frozen=True)
class InvisibleAliasRecord:
    """A zero-width-space suffixed path segment that aliases a filename."""

    alias_id: str
    filename: str

    @classmethod
    def from_document(cls, doc: Mapping[str, Any], *,
                      message: str = 'no invisible url or file was found') -> 'InvisibleAliasRecord':
        kw = dict(message=message, collection='invisibleurls')
        return cls(
            alias_id=_field(doc, '_id', str, **kw),
            filename=_field(doc, 'filename', str, **kw),
        )


def is_invisible_key(key: Optional[str]) -> bool:
    return bool(key) and key.endswith(ZERO_WIDTH_SPACE)
