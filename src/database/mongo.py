import logging
from typing import List, Optional, Tuple

from motor.motor_asyncio import AsyncIOMotorClient

from src.app.utils import config

logger = logging.getLogger(__name__)


class MongoDBClient:
    def __init__(self, uri=None, db_name=None, client=None):
        self.uri = uri or config.MONGO_URI
        self.db_name = db_name or config.MONGO_DB
        self.client = client or AsyncIOMotorClient(self.uri)
        self.db = self.client[self.db_name]

    async def insert(self, collection_name: str, doc: dict):
        try:
            collection = self.db[collection_name]
            result = await collection.insert_one(doc)
            logger.info(f"Inserted document with ID: {result.inserted_id}")
            return {"status": True, "inserted_id": str(result.inserted_id)}
        except Exception as e:
            logger.error(f"Insert error: {e}")
            return {"status": False, "message": str(e)}

    async def find(self, collection_name: str, query: dict,
                   sort: Optional[List[Tuple[str, int]]] = None, limit: int = 0):
        try:
            collection = self.db[collection_name]
            cursor = collection.find(query)
            if sort:
                cursor = cursor.sort(sort)
            if limit:
                cursor = cursor.limit(limit)
            results = []
            async for document in cursor:
                document["_id"] = str(document["_id"])
                results.append(document)
            return {"status": True, "results": results}
        except Exception as e:
            logger.error(f"Find error: {e}")
            return {"status": False, "message": str(e)}

    async def delete(self, collection_name: str, query: dict):
        try:
            collection = self.db[collection_name]
            result = await collection.delete_many(query)
            return {"status": True, "deleted_count": result.deleted_count}
        except Exception as e:
            logger.error(f"Delete error: {e}")
            return {"status": False, "message": str(e)}

    def close(self):
        self.client.close()
