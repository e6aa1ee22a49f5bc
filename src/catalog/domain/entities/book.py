"""Book entity."""

from dataclasses import dataclass


@dataclass
class Book:
    """Book - the single catalog record."""

    id: str
    title: str
    author: str
    price: float
    stock: int
