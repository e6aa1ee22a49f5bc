"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from catalog.interfaces.api.errors import handle_unexpected_error, serialize_http_error
from catalog.interfaces.api.resources.books import BookResource, BooksResource
from catalog.interfaces.api.resources.health import HealthResource


def create_app(
    books_resource: BooksResource,
    book_resource: BookResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.set_error_serializer(serialize_http_error)
    app.add_route("/health", health_resource)
    app.add_route("/health/ready", health_resource, suffix="ready")
    app.add_route("/books", books_resource)
    app.add_route("/books/{book_id}", book_resource)
    return app
