"""Classify a request path into the strategy that will serve it."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

OEMBED_SUFFIX = '.json'
SHORTLINK_PREFIX = '/s/'
IGNORED_SEGMENTS = frozenset({'', 'favicon.ico'})


class Strategy(enum.Enum):
    ROOT_REDIRECT = 'root-redirect'
    OEMBED = 'oembed'
    SHORTLINK = 'shortlink'
    FILE = 'file-resolve'
    NOOP = 'no-op'


@dataclass(frozen=True)
class Route:
    """A classified request: which strategy applies and the key it looks up."""

    strategy: Strategy
    key: Optional[str] = None


def base_segment(path: str) -> str:
    """Final element of a slash-separated path, ignoring trailing slashes."""
    return (path or '').rstrip('/').rsplit('/', 1)[-1]


def classify_path(path: str) -> Route:
    """
    Pick the strategy for a request path. The first matching rule wins:

    1. ``/`` redirects to the canonical site
    2. ``<name>.json`` is an oEmbed lookup for ``<name>``
    3. ``/s/<id>`` is a short link (``/s/`` alone is not)
    4. any other non-empty segment except ``favicon.ico`` is a file
    5. everything else is ignored
    """
    if path == '/':
        return Route(Strategy.ROOT_REDIRECT)

    base = base_segment(path)
    if base.endswith(OEMBED_SUFFIX):
        return Route(Strategy.OEMBED, base[:-len(OEMBED_SUFFIX)])
    if path.startswith(SHORTLINK_PREFIX) and base != 's':
        return Route(Strategy.SHORTLINK, base)
    if base not in IGNORED_SEGMENTS:
        return Route(Strategy.FILE, base)
    return Route(Strategy.NOOP)
