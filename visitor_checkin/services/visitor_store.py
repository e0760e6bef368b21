#!/usr/bin/env python3
"""
Visitor store
Persists visitor records to MongoDB
"""

import structlog
from bson.errors import BSONError
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from visitor_checkin.core.exceptions import VisitorStoreError
from visitor_checkin.models.visitor import VisitorRecord

logger = structlog.get_logger(__name__)


class VisitorStore:
    """Insert-only access to the visitors collection"""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection
        self.logger = logger

    async def insert(self, record: VisitorRecord) -> str:
        """
        Save a visitor record

        Args:
            record: Validated visitor record

        Returns:
            Identifier assigned by the store

        Raises:
            VisitorStoreError: the write failed or was not acknowledged
        """
        try:
            result = await self.collection.insert_one(record.to_document())
        except (PyMongoError, BSONError) as e:
            self.logger.error("MongoDB save error", err=str(e))
            raise VisitorStoreError(str(e)) from e

        if not result.acknowledged or result.inserted_id is None:
            self.logger.error("MongoDB insert not acknowledged")
            raise VisitorStoreError("Insert was not acknowledged by the database")

        visitor_id = str(result.inserted_id)
        self.logger.info("Visitor saved to DB", visitor_id=visitor_id)
        return visitor_id
