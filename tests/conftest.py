"""Pytest fixtures for catalog tests."""

from __future__ import annotations

from bson import ObjectId
import pytest

from catalog.application.dto.book_dto import BookInput
from catalog.domain.entities import Book
from catalog.domain.exceptions import StoreError
from catalog.domain.value_objects import BookId


# --- Fake repositories ---


class FakeBookRepository:
    """In-memory book repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Book] = {}
        self.calls: list[str] = []
        self.error: Exception | None = None

    def _check(self, op: str) -> None:
        self.calls.append(op)
        if self.error is not None:
            raise self.error

    async def list_all(self) -> list[Book]:
        self._check("list_all")
        return list(self._by_id.values())

    async def create(self, book: BookInput) -> str:
        self._check("create")
        book_id = str(ObjectId())
        self._by_id[book_id] = Book(id=book_id, **book.to_fields())
        return book_id

    async def replace_fields(self, book_id: BookId, book: BookInput) -> bool:
        self._check("replace_fields")
        if book_id.value not in self._by_id:
            return False
        self._by_id[book_id.value] = Book(id=book_id.value, **book.to_fields())
        return True

    async def delete(self, book_id: BookId) -> bool:
        self._check("delete")
        return self._by_id.pop(book_id.value, None) is not None

    async def ping(self) -> None:
        self._check("ping")

    def add_book(self, book: Book) -> None:
        """Helper to seed a book for tests."""
        self._by_id[book.id] = book


# --- Fixtures ---


@pytest.fixture
def fake_books() -> FakeBookRepository:
    """Fresh in-memory book repository for each test."""
    return FakeBookRepository()


@pytest.fixture
def broken_books() -> FakeBookRepository:
    """Repository whose every call fails like an unreachable store."""
    repo = FakeBookRepository()
    repo.error = StoreError("server selection timeout: localhost:27017")
    return repo


@pytest.fixture
def dune() -> Book:
    return Book(
        id="65a1f0c2e4b0a1b2c3d4e5f6",
        title="Dune",
        author="Herbert",
        price=9.99,
        stock=5,
    )
