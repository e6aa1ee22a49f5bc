"""MongoDB book repository implementation."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import pymongo
from bson import ObjectId
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from catalog.application.dto.book_dto import BookInput
from catalog.domain.entities import Book
from catalog.domain.exceptions import StoreError
from catalog.domain.value_objects import BookId


def _document_to_book(doc: dict[str, Any]) -> Book:
    return Book(
        id=str(doc["_id"]),
        title=doc.get("title") or "",
        author=doc.get("author") or "",
        price=float(doc.get("price") or 0.0),
        stock=int(doc.get("stock") or 0),
    )


class MongoBookRepository:
    """Book repository over a single MongoDB collection.

    Every call runs under ``pymongo.timeout(timeout)``; driver errors,
    timeouts included, are re-raised as StoreError carrying the driver message.
    """

    def __init__(self, collection: AsyncCollection, timeout: float = 5.0) -> None:
        self._collection = collection
        self._timeout = timeout

    @contextmanager
    def _store_call(self) -> Iterator[None]:
        try:
            with pymongo.timeout(self._timeout):
                yield
        except PyMongoError as e:
            raise StoreError(str(e)) from e

    async def list_all(self) -> list[Book]:
        """List every book (unfiltered find)."""
        with self._store_call():
            docs = await self._collection.find({}).to_list()
        return [_document_to_book(d) for d in docs]

    async def create(self, book: BookInput) -> str:
        """Insert book, return the assigned ObjectId as hex."""
        with self._store_call():
            result = await self._collection.insert_one(book.to_fields())
        return str(result.inserted_id)

    async def replace_fields(self, book_id: BookId, book: BookInput) -> bool:
        """``$set`` all four fields. Returns False when no document matched."""
        with self._store_call():
            result = await self._collection.update_one(
                {"_id": ObjectId(book_id.value)},
                {"$set": book.to_fields()},
            )
        return result.matched_count > 0

    async def delete(self, book_id: BookId) -> bool:
        """Delete by id. Returns False when nothing was deleted."""
        with self._store_call():
            result = await self._collection.delete_one({"_id": ObjectId(book_id.value)})
        return result.deleted_count > 0

    async def ping(self) -> None:
        """Check the store answers within the call timeout."""
        with self._store_call():
            await self._collection.database.command("ping")
