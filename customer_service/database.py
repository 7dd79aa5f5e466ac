"""
Customer Service — MongoDB Client Management
==============================================

What:  Motor client lifecycle, collection access, and a connectivity probe.
Why:   Centralizes all database connection logic in one place.
How:   A single AsyncIOMotorClient is created on first use and shared by every
       request; Motor keeps its own connection pool underneath.
Who:   The repository dependency (get_customer_repository) and the health route.
When:  Client is created lazily inside the running event loop and closed
       during application shutdown.

Architecture Decision:
    We use Motor (the asyncio driver on top of PyMongo) because:
    1. Non-blocking I/O: a slow query doesn't block other requests
    2. Natural fit with FastAPI's async request handling
    Alternative considered: plain PyMongo, simpler but blocks the event loop
"""

import logging
from typing import Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)

from customer_service.config import settings

logger = logging.getLogger(__name__)

_client: Optional[AsyncIOMotorClient] = None


def get_client() -> AsyncIOMotorClient:
    """
    Return the process-wide Motor client, creating it on first call.

    Why lazy: creating the client at import time would bind it before the
    event loop exists and would open sockets in every process that merely
    imports the package (tests, tooling).
    """
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(
            settings.mongo_url,
            serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        )
        logger.info("MongoDB client created for database '%s'", settings.mongo_database)
    return _client


def get_database() -> AsyncIOMotorDatabase:
    return get_client()[settings.mongo_database]


def get_customer_collection() -> AsyncIOMotorCollection:
    return get_database()[settings.mongo_collection]


async def ping_database() -> bool:
    """
    What:  Lightweight connectivity test used by the health check.
    How:   Runs the `ping` admin command; any failure means unreachable.
    """
    try:
        await get_client().admin.command("ping")
        return True
    except Exception as e:
        logger.warning("MongoDB ping failed: %s", str(e))
        return False


def close_client() -> None:
    """
    What:  Closes the shared client and its pooled connections.
    When:  Called during application shutdown (lifespan handler).
    """
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB client closed")
