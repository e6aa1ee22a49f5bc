"""Delete book use case."""

from catalog.application.ports import BookRepository
from catalog.domain.exceptions import NotFound
from catalog.domain.value_objects import BookId


class DeleteBookUseCase:
    """Remove a book by id."""

    def __init__(self, book_repository: BookRepository) -> None:
        self._books = book_repository

    async def execute(self, book_id: BookId) -> None:
        deleted = await self._books.delete(book_id)
        if not deleted:
            raise NotFound("not found")
