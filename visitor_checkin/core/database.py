"""
Database configuration and client management
"""

from typing import Optional

import structlog
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from visitor_checkin.core.config import settings

logger = structlog.get_logger(__name__)

# One client per process, opened in the application lifespan
_client: Optional[AsyncIOMotorClient] = None


def init_db() -> AsyncIOMotorClient:
    """Create the MongoDB client"""
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(settings.MONGODB_URL)
        logger.info(
            "MongoDB client initialized",
            database=settings.MONGODB_DATABASE,
            collection=settings.MONGODB_COLLECTION,
        )
    return _client


def close_db():
    """Close the MongoDB client"""
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("MongoDB client closed")


def get_collection() -> AsyncIOMotorCollection:
    """Get the visitor collection"""
    client = init_db()
    return client[settings.MONGODB_DATABASE][settings.MONGODB_COLLECTION]
