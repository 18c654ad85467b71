import logging
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId

from src.app.models.prompt_models import SessionRecord
from src.app.utils import config
from src.database.mongo import MongoDBClient

logger = logging.getLogger(__name__)


class SessionStore:
    """Prompt-session rows in MongoDB. Scoping rows to a user is done by user_id."""

    def __init__(self, mongo: Optional[MongoDBClient] = None, collection: str = None):
        self.mongo = mongo or MongoDBClient()
        self.collection = collection or config.SESSIONS_COLLECTION

    async def save(self, session: SessionRecord):
        return await self.mongo.insert(self.collection, session.to_document())

    async def list_for_user(self, user_id: Optional[str]):
        return await self.mongo.find(
            self.collection,
            {"user_id": user_id},
            sort=[("created_at", -1)],
        )

    async def delete_by_id(self, session_id: str, user_id: Optional[str] = None):
        try:
            object_id = ObjectId(session_id)
        except (InvalidId, TypeError):
            logger.error(f"Invalid session id: {session_id}")
            return {"status": False, "message": f"Invalid session id: {session_id}"}

        query = {"_id": object_id}
        if user_id is not None:
            query["user_id"] = user_id
        result = await self.mongo.delete(self.collection, query)
        if result.get("status") and result.get("deleted_count") == 0:
            return {"status": False, "message": f"Session {session_id} not found"}
        return result
