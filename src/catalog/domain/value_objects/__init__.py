"""Domain value objects."""

from catalog.domain.value_objects.book_id import BookId

__all__ = [
    "BookId",
]
