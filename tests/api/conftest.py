"""Fixtures for API tests."""

import pytest

from catalog.application.use_cases.book.create_book import CreateBookUseCase
from catalog.application.use_cases.book.delete_book import DeleteBookUseCase
from catalog.application.use_cases.book.list_books import ListBooksUseCase
from catalog.application.use_cases.book.update_book import UpdateBookUseCase
from catalog.interfaces.api.app import create_app
from catalog.interfaces.api.resources.books import BookResource, BooksResource
from catalog.interfaces.api.resources.health import HealthResource


def build_app(repo):
    """Falcon ASGI app wired to the given repository."""
    return create_app(
        books_resource=BooksResource(ListBooksUseCase(repo), CreateBookUseCase(repo)),
        book_resource=BookResource(UpdateBookUseCase(repo), DeleteBookUseCase(repo)),
        health_resource=HealthResource("catalog-service", repo),
    )


@pytest.fixture
def app(fake_books):
    """Falcon ASGI app with API resources for testing."""
    return build_app(fake_books)


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)


@pytest.fixture
def broken_client(broken_books):
    """Test client whose store fails every call."""
    from falcon.testing import TestClient
    return TestClient(build_app(broken_books))
