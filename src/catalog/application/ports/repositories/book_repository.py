"""Book repository port."""

from typing import Protocol

from catalog.application.dto.book_dto import BookInput
from catalog.domain.entities import Book
from catalog.domain.value_objects import BookId


class BookRepository(Protocol):
    """Port for book persistence.

    Implementations raise StoreError when the underlying store fails.
    """

    async def list_all(self) -> list[Book]: ...

    async def create(self, book: BookInput) -> str: ...

    async def replace_fields(self, book_id: BookId, book: BookInput) -> bool: ...

    async def delete(self, book_id: BookId) -> bool: ...

    async def ping(self) -> None: ...
