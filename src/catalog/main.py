"""Application entry point and composition root."""

import logging
import sys

from falcon.asgi import App
from pymongo.errors import PyMongoError

from catalog import __version__
from catalog.application.use_cases.book.create_book import CreateBookUseCase
from catalog.application.use_cases.book.delete_book import DeleteBookUseCase
from catalog.application.use_cases.book.list_books import ListBooksUseCase
from catalog.application.use_cases.book.update_book import UpdateBookUseCase
from catalog.config import Settings, get_settings
from catalog.infrastructure.persistence.mongo.book_repository import MongoBookRepository
from catalog.infrastructure.persistence.mongo.connection import (
    create_client,
    get_collection,
)
from catalog.interfaces.api.app import create_app
from catalog.interfaces.api.middleware.store_lifespan import StoreLifespanMiddleware
from catalog.interfaces.api.resources.books import BookResource, BooksResource
from catalog.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


def create_catalog_app(settings: Settings | None = None) -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    client = create_client(settings.mongo_uri, app_name=settings.service_name)
    collection = get_collection(client, settings.mongo_db, settings.mongo_collection)
    book_repository = MongoBookRepository(collection, timeout=settings.request_timeout)

    list_books = ListBooksUseCase(book_repository)
    create_book = CreateBookUseCase(book_repository)
    update_book = UpdateBookUseCase(book_repository)
    delete_book = DeleteBookUseCase(book_repository)

    return create_app(
        books_resource=BooksResource(list_books, create_book),
        book_resource=BookResource(update_book, delete_book),
        health_resource=HealthResource(settings.service_name, book_repository),
        middleware=[StoreLifespanMiddleware(client, settings.connect_timeout)],
    )


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        app = create_catalog_app(settings)
    except PyMongoError as e:
        logger.critical("mongo connect: %s", e)
        sys.exit(1)

    logger.info(
        "%s v%s listening on %s:%d",
        settings.service_name,
        __version__,
        settings.host,
        settings.port,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, lifespan="on", log_config=None)


if __name__ == "__main__":
    main()
