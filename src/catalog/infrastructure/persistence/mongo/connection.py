"""MongoDB async client."""

import pymongo
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection


def create_client(uri: str, app_name: str | None = None) -> AsyncMongoClient:
    """Create async MongoDB client.

    The client connects lazily. Call ``ping`` (e.g. via StoreLifespanMiddleware
    in ASGI lifespan) to verify the server is reachable before serving.
    Raises ``pymongo.errors.ConfigurationError`` / ``InvalidURI`` for a bad URI.
    """
    return AsyncMongoClient(uri, appname=app_name)


def get_collection(
    client: AsyncMongoClient, database: str, collection: str
) -> AsyncCollection:
    """Get collection handle (no I/O)."""
    return client[database][collection]


async def ping(client: AsyncMongoClient, timeout: float) -> None:
    """Run the ``ping`` admin command, bounded by ``timeout`` seconds."""
    with pymongo.timeout(timeout):
        await client.admin.command("ping")
