"""Book DTOs."""

import math
from dataclasses import dataclass
from typing import Any

from catalog.domain.exceptions import MalformedInput

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _string_field(body: dict[str, Any], key: str) -> str:
    value = body.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise MalformedInput(f"field '{key}' must be a string")
    return value


def _number_field(body: dict[str, Any], key: str) -> float:
    value = body.get(key)
    if value is None:
        return 0.0
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedInput(f"field '{key}' must be a number")
    try:
        number = float(value)
    except OverflowError:
        raise MalformedInput(f"field '{key}' must be a number") from None
    # json accepts NaN, Infinity and out-of-range literals like 1e400
    if not math.isfinite(number):
        raise MalformedInput(f"field '{key}' must be a number")
    return number


def _integer_field(body: dict[str, Any], key: str) -> int:
    value = body.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedInput(f"field '{key}' must be an integer")
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise MalformedInput(f"field '{key}' must be a 64-bit integer")
    return value


@dataclass
class BookInput:
    """Mutable book fields as submitted by a client.

    Used for both create and full-field update. Missing fields take zero
    values; an ``id`` key in the body is ignored.
    """

    title: str = ""
    author: str = ""
    price: float = 0.0
    stock: int = 0

    @classmethod
    def from_media(cls, body: object) -> "BookInput":
        """Decode a parsed JSON body, raising MalformedInput on type mismatch."""
        if not isinstance(body, dict):
            raise MalformedInput("request body must be a JSON object")
        return cls(
            title=_string_field(body, "title"),
            author=_string_field(body, "author"),
            price=_number_field(body, "price"),
            stock=_integer_field(body, "stock"),
        )

    def to_fields(self) -> dict[str, Any]:
        """Field mapping used for insert and ``$set``."""
        return {
            "title": self.title,
            "author": self.author,
            "price": self.price,
            "stock": self.stock,
        }


@dataclass
class BookCreated:
    """Output of a successful create."""

    id: str
