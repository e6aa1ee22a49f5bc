"""Repository ports."""

from catalog.application.ports.repositories.book_repository import BookRepository

__all__ = [
    "BookRepository",
]
