"""Store-assigned book identity."""

import re
from dataclasses import dataclass

from catalog.domain.exceptions import InvalidIdentifier

_HEX_ID = re.compile(r"[0-9a-fA-F]{24}")


@dataclass(frozen=True)
class BookId:
    """Book identity as a 24-character hex string (12-byte ObjectId)."""

    value: str

    def __post_init__(self) -> None:
        if not _HEX_ID.fullmatch(self.value):
            raise InvalidIdentifier("invalid id")

    @classmethod
    def from_hex(cls, raw: str) -> "BookId":
        """Parse identity from its external form, normalized to lowercase."""
        return cls(value=raw.lower())

    def __str__(self) -> str:
        return self.value
