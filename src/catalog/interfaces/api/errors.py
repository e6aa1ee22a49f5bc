"""Error serialization and fallback handling for the API."""

import logging

import falcon
import falcon.asgi

logger = logging.getLogger(__name__)


def serialize_http_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, exception: falcon.HTTPError
) -> None:
    """Render framework errors (405, unknown route, ...) as ``{"error": ...}`` JSON."""
    resp.content_type = falcon.MEDIA_JSON
    resp.media = {"error": exception.description or exception.title}


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log unhandled exceptions and answer 500."""
    logger.error("unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "internal server error"}
