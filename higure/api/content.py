"""
Content routes.

Every GET path on the server lands here and is classified into one of:
- root redirect to the canonical site
- oEmbed JSON for a file (``/<filename>.json``)
- short-link redirect (``/s/<id>``)
- file delivery by filename or invisible alias
"""

import logging

from flask import Blueprint, Response, current_app, request
from werkzeug.exceptions import HTTPException

from higure.services.exceptions import ContentError, NotFoundError
from higure.services.routing import Strategy, classify_path
from higure.utils import INTERNAL_ERROR_MESSAGE, content_error_response, error_response

logger = logging.getLogger(__name__)

# Create blueprint
content_bp = Blueprint('content', __name__)


def _services():
    return current_app.extensions['content_services']


@content_bp.route('/', defaults={'request_path': ''}, methods=['GET'])
@content_bp.route('/<path:request_path>', methods=['GET'])
def serve(request_path):
    # request.path keeps the leading slash and the raw segment layout
    path = request.path
    host = request.host
    route = classify_path(path)
    services = _services()

    if route.strategy is Strategy.ROOT_REDIRECT:
        return services.composer.root_redirect()

    if route.strategy is Strategy.OEMBED:
        title, author = services.resolver.resolve_oembed(route.key, host)
        return services.composer.oembed(title, author)

    if route.strategy is Strategy.SHORTLINK:
        return services.composer.redirect(services.resolver.resolve_short_link(route.key))

    if route.strategy is Strategy.FILE:
        record = services.resolver.resolve_file(route.key, host)
        return services.composer.file(record, host)

    return Response(status=204)


@content_bp.errorhandler(ContentError)
def handle_content_error(error):
    if isinstance(error, NotFoundError):
        logger.info(f"{request.path!r} on {request.host}: {error.message}")
    else:
        logger.warning(f"{request.path!r} on {request.host}: {type(error).__name__}: {error.message}")
    return content_error_response(error)


@content_bp.errorhandler(Exception)
def handle_unexpected_error(error):
    if isinstance(error, HTTPException):
        return error
    logger.exception(f"Unhandled error serving {request.path!r}")
    return error_response(INTERNAL_ERROR_MESSAGE)
