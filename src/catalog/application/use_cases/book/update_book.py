"""Update book use case."""

from catalog.application.dto.book_dto import BookInput
from catalog.application.ports import BookRepository
from catalog.domain.exceptions import NotFound
from catalog.domain.value_objects import BookId


class UpdateBookUseCase:
    """Overwrite all mutable fields of an existing book."""

    def __init__(self, book_repository: BookRepository) -> None:
        self._books = book_repository

    async def execute(self, book_id: BookId, book: BookInput) -> None:
        """Replace title, author, price and stock; no partial merge."""
        matched = await self._books.replace_fields(book_id, book)
        if not matched:
            raise NotFound("not found")
