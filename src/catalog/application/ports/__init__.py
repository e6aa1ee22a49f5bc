"""Application ports - interfaces for external adapters."""

from catalog.application.ports.repositories.book_repository import BookRepository

__all__ = [
    "BookRepository",
]
