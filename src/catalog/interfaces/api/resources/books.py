"""Book API resources."""

import json

import falcon
import falcon.asgi

from catalog.application.dto.book_dto import BookInput
from catalog.application.use_cases.book.create_book import CreateBookUseCase
from catalog.application.use_cases.book.delete_book import DeleteBookUseCase
from catalog.application.use_cases.book.list_books import ListBooksUseCase
from catalog.application.use_cases.book.update_book import UpdateBookUseCase
from catalog.domain.entities import Book
from catalog.domain.exceptions import (
    InvalidIdentifier,
    MalformedInput,
    NotFound,
    StoreError,
)
from catalog.domain.value_objects import BookId


async def _decode_book(req: falcon.asgi.Request) -> BookInput:
    """Read the body as JSON whatever its Content-Type; any failure is MalformedInput."""
    raw = await req.stream.read()
    if not raw:
        raise MalformedInput("request body is empty")
    try:
        body = json.loads(raw)
    except ValueError as e:
        raise MalformedInput(f"invalid JSON body: {e}") from e
    return BookInput.from_media(body)


def _book_to_dict(b: Book) -> dict:
    return {
        "id": b.id,
        "title": b.title,
        "author": b.author,
        "price": b.price,
        "stock": b.stock,
    }


class BooksResource:
    """GET/POST /books - list and create books."""

    def __init__(self, list_books: ListBooksUseCase, create_book: CreateBookUseCase) -> None:
        self._list_books = list_books
        self._create_book = create_book

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List all books."""
        try:
            books = await self._list_books.execute()
        except StoreError as e:
            resp.status = falcon.HTTP_500
            resp.media = {"error": str(e)}
            return

        resp.media = [_book_to_dict(b) for b in books]
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create book; the store assigns the id."""
        try:
            book = await _decode_book(req)
        except MalformedInput as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            result = await self._create_book.execute(book)
        except StoreError as e:
            resp.status = falcon.HTTP_500
            resp.media = {"error": str(e)}
            return

        resp.media = {"message": "created", "id": result.id}
        resp.status = falcon.HTTP_201

    async def on_options(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """OPTIONS is not served; replaces Falcon's default responder."""
        raise falcon.HTTPMethodNotAllowed(["GET", "POST"])


class BookResource:
    """PUT/DELETE /books/{book_id} - overwrite and delete a book."""

    def __init__(self, update_book: UpdateBookUseCase, delete_book: DeleteBookUseCase) -> None:
        self._update_book = update_book
        self._delete_book = delete_book

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        book_id: str,
    ) -> None:
        """Replace all fields of a book."""
        try:
            bid = BookId.from_hex(book_id)
        except InvalidIdentifier:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "invalid id"}
            return

        try:
            book = await _decode_book(req)
        except MalformedInput as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            await self._update_book.execute(bid, book)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "not found"}
            return
        except StoreError as e:
            resp.status = falcon.HTTP_500
            resp.media = {"error": str(e)}
            return

        resp.media = {"message": "updated"}
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        book_id: str,
    ) -> None:
        """Delete a book."""
        try:
            bid = BookId.from_hex(book_id)
        except InvalidIdentifier:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "invalid id"}
            return

        try:
            await self._delete_book.execute(bid)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "not found"}
            return
        except StoreError as e:
            resp.status = falcon.HTTP_500
            resp.media = {"error": str(e)}
            return

        resp.media = {"message": "deleted"}
        resp.status = falcon.HTTP_200

    async def on_options(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        book_id: str,
    ) -> None:
        """OPTIONS is not served; replaces Falcon's default responder."""
        raise falcon.HTTPMethodNotAllowed(["PUT", "DELETE"])
