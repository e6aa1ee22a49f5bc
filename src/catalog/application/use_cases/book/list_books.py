"""List books use case."""

from catalog.application.ports import BookRepository
from catalog.domain.entities import Book


class ListBooksUseCase:
    """Return every book in the catalog, in store order."""

    def __init__(self, book_repository: BookRepository) -> None:
        self._books = book_repository

    async def execute(self) -> list[Book]:
        """List all books."""
        return await self._books.list_all()
