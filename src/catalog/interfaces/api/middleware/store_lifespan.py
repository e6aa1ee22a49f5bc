"""Store lifespan middleware - pings the store on startup, closes on shutdown."""

import logging
from typing import Any

from pymongo import AsyncMongoClient

from catalog.infrastructure.persistence.mongo.connection import ping

logger = logging.getLogger(__name__)


class StoreLifespanMiddleware:
    """Middleware that verifies the MongoDB connection on startup and closes it on shutdown.

    A failed startup ping propagates, so the ASGI server aborts startup.
    """

    def __init__(self, client: AsyncMongoClient, connect_timeout: float = 10.0) -> None:
        self._client = client
        self._connect_timeout = connect_timeout

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Ping store when ASGI server starts."""
        try:
            await ping(self._client, self._connect_timeout)
        except Exception:
            logger.critical("mongo connect failed", exc_info=True)
            raise
        logger.info("mongo connected")

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close client when ASGI server shuts down."""
        await self._client.close()
        logger.info("mongo connection closed")
