"""Health check endpoints."""

import falcon.asgi

from catalog.application.ports import BookRepository
from catalog.domain.exceptions import StoreError


class HealthResource:
    """Liveness and readiness endpoints."""

    def __init__(self, service_name: str, book_repository: BookRepository) -> None:
        self._service_name = service_name
        self._books = book_repository

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /health - liveness, never touches the store."""
        resp.media = {"status": "ok", "service": self._service_name}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /health/ready - readiness (store ping)."""
        try:
            await self._books.ping()
        except StoreError as e:
            resp.status = falcon.HTTP_503
            resp.media = {"status": "unavailable", "error": str(e)}
            return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
