"""Domain entities."""

from catalog.domain.entities.book import Book

__all__ = [
    "Book",
]
