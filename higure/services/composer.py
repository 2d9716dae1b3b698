"""Build HTTP responses for resolved routes."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from flask import Response, jsonify, render_template
from jinja2 import TemplateError

from higure.models import FileRecord

from .exceptions import RenderError
from .resolver import substitute_domain
from .storage import FetchedObject, StorageService

logger = logging.getLogger(__name__)

EMBED_TEMPLATE = 'embed.html'
SHOW_LINK_TEMPLATE = 'show_link.html'
DEFAULT_CONTENT_TYPE = 'application/octet-stream'


@dataclass(frozen=True)
class EmbedPage:
    """Values handed to the embed page template."""

    file_url: str
    oembed_url: str
    description: str
    color: str
    is_image: bool
    is_video: bool
    user: str
    name: str
    size: str


class ResponseComposer:
    """Selects and renders the response for each strategy."""

    def __init__(self, storage: StorageService, *, canonical_url: str, site_name: str, stylesheet_url: str):
        self.storage = storage
        self.canonical_url = canonical_url
        self.site_name = site_name
        self.stylesheet_url = stylesheet_url

    def oembed(self, title: str, author: str) -> Response:
        return jsonify({
            'version': '1.0',
            'type': 'link',
            'title': title,
            'author_name': author,
        })

    def redirect(self, location: str) -> Response:
        return Response(status=301, headers={'Location': location})

    def root_redirect(self) -> Response:
        return self.redirect(self.canonical_url)

    def raw(self, fetched: FetchedObject) -> Response:
        return Response(fetched.body, content_type=fetched.content_type or DEFAULT_CONTENT_TYPE)

    def file(self, record: FileRecord, host: str) -> Response:
        fetched = self.storage.fetch(record.key)
        cdn_url = self.storage.cdn_url(record.key)

        if record.embed.enabled:
            page = EmbedPage(
                file_url=cdn_url,
                oembed_url=f"https://{host}/{record.filename}.json",
                description=substitute_domain(record.embed.description, host),
                color=record.embed.color,
                is_image=record.is_image,
                is_video=record.is_video,
                user=record.uploader.username,
                name=record.filename,
                size=record.size,
            )
            return self._render(EMBED_TEMPLATE, page=page, site_name=self.site_name,
                                stylesheet_url=self.stylesheet_url)

        if record.show_link:
            # Link previews can't play video, so send the file itself
            if record.is_video:
                return self.raw(fetched)
            return self._render(SHOW_LINK_TEMPLATE, file_url=cdn_url)

        return self.raw(fetched)

    def _render(self, template_name: str, **context) -> Response:
        try:
            html = render_template(template_name, **context)
        except TemplateError as e:
            logger.error(f"Failed to render {template_name}: {e}")
            raise RenderError(str(e)) from e
        return Response(html, content_type='text/html; charset=utf-8')
