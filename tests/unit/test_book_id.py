"""Unit tests for BookId value object."""

import pytest

from catalog.domain.exceptions import InvalidIdentifier
from catalog.domain.value_objects import BookId


def test_book_id_valid() -> None:
    """BookId accepts 24 hex chars."""
    bid = BookId(value="65a1f0c2e4b0a1b2c3d4e5f6")
    assert str(bid) == "65a1f0c2e4b0a1b2c3d4e5f6"


def test_book_id_from_hex_lowercases() -> None:
    assert BookId.from_hex("65A1F0C2E4B0A1B2C3D4E5F6").value == "65a1f0c2e4b0a1b2c3d4e5f6"


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "abc",
        "65a1f0c2e4b0a1b2c3d4e5f",
        "65a1f0c2e4b0a1b2c3d4e5f6a",
        "zza1f0c2e4b0a1b2c3d4e5f6",
        "65a1f0c2e4b0a1b2c3d4e5f6\n",
    ],
)
def test_book_id_invalid(raw: str) -> None:
    """BookId raises InvalidIdentifier for anything but 24 hex chars."""
    with pytest.raises(InvalidIdentifier, match="invalid id"):
        BookId.from_hex(raw)


def test_book_id_is_hashable() -> None:
    assert len({BookId("65a1f0c2e4b0a1b2c3d4e5f6"), BookId("65a1f0c2e4b0a1b2c3d4e5f6")}) == 1
