"""Unit tests for use cases."""

import pytest

from catalog.application.dto.book_dto import BookInput
from catalog.application.use_cases.book.create_book import CreateBookUseCase
from catalog.application.use_cases.book.delete_book import DeleteBookUseCase
from catalog.application.use_cases.book.list_books import ListBooksUseCase
from catalog.application.use_cases.book.update_book import UpdateBookUseCase
from catalog.domain.entities import Book
from catalog.domain.exceptions import NotFound, StoreError
from catalog.domain.value_objects import BookId

from tests.conftest import FakeBookRepository

_UNKNOWN = BookId("0123456789abcdef01234567")


# --- ListBooksUseCase ---


@pytest.mark.asyncio
async def test_list_books_empty() -> None:
    """ListBooksUseCase returns empty list for empty store."""
    assert await ListBooksUseCase(FakeBookRepository()).execute() == []


@pytest.mark.asyncio
async def test_list_books_returns_all(dune: Book) -> None:
    repo = FakeBookRepository()
    repo.add_book(dune)
    assert await ListBooksUseCase(repo).execute() == [dune]


@pytest.mark.asyncio
async def test_list_books_propagates_store_error() -> None:
    repo = FakeBookRepository()
    repo.error = StoreError("timed out")
    with pytest.raises(StoreError, match="timed out"):
        await ListBooksUseCase(repo).execute()


# --- CreateBookUseCase ---


@pytest.mark.asyncio
async def test_create_book_assigns_fresh_ids() -> None:
    """CreateBookUseCase returns a new id per call, even for identical input."""
    repo = FakeBookRepository()
    use_case = CreateBookUseCase(repo)
    book = BookInput(title="Dune", author="Herbert", price=9.99, stock=5)

    first = await use_case.execute(book)
    second = await use_case.execute(book)

    assert first.id != second.id
    assert len(await repo.list_all()) == 2


# --- UpdateBookUseCase ---


@pytest.mark.asyncio
async def test_update_book_replaces_fields(dune: Book) -> None:
    repo = FakeBookRepository()
    repo.add_book(dune)

    await UpdateBookUseCase(repo).execute(
        BookId(dune.id), BookInput(title="Dune Messiah", price=12.5)
    )

    [book] = await repo.list_all()
    assert book == Book(id=dune.id, title="Dune Messiah", author="", price=12.5, stock=0)


@pytest.mark.asyncio
async def test_update_book_not_found() -> None:
    """UpdateBookUseCase raises NotFound for unassigned id."""
    with pytest.raises(NotFound):
        await UpdateBookUseCase(FakeBookRepository()).execute(_UNKNOWN, BookInput())


# --- DeleteBookUseCase ---


@pytest.mark.asyncio
async def test_delete_book_twice(dune: Book) -> None:
    """Second delete of the same id raises NotFound."""
    repo = FakeBookRepository()
    repo.add_book(dune)
    use_case = DeleteBookUseCase(repo)

    await use_case.execute(BookId(dune.id))
    assert await repo.list_all() == []

    with pytest.raises(NotFound):
        await use_case.execute(BookId(dune.id))
