"""Create book use case."""

from catalog.application.dto.book_dto import BookCreated, BookInput
from catalog.application.ports import BookRepository


class CreateBookUseCase:
    """Insert a new book; the store assigns its identity."""

    def __init__(self, book_repository: BookRepository) -> None:
        self._books = book_repository

    async def execute(self, book: BookInput) -> BookCreated:
        """Create book and return its new id."""
        book_id = await self._books.create(book)
        return BookCreated(id=book_id)
