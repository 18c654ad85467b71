"""Tests for SessionStore on top of a mocked MongoDBClient."""

import pytest
from bson import ObjectId
from unittest.mock import AsyncMock

from src.app.models.prompt_models import OptimizedResult, SessionRecord
from src.app.services.text_generation.normalize_fields import normalize
from src.database.session_store import SessionStore


@pytest.fixture
def mongo():
    client = AsyncMock()
    client.insert = AsyncMock(return_value={"status": True, "inserted_id": "65f000000000000000000001"})
    client.find = AsyncMock(return_value={"status": True, "results": []})
    client.delete = AsyncMock(return_value={"status": True, "deleted_count": 1})
    return client


@pytest.fixture
def session_store(mongo):
    return SessionStore(mongo=mongo, collection="prompt_sessions")


@pytest.mark.asyncio
async def test_save_writes_document(session_store, mongo, blog_form):
    record = normalize({**blog_form, "userId": "user-1"})
    session = SessionRecord(
        title=SessionRecord.make_title(record.raw_prompt),
        user_id=record.user_id,
        input=record,
        result=OptimizedResult(optimized_prompt="optimized"),
    )

    response = await session_store.save(session)

    assert response["status"] is True
    collection, document = mongo.insert.await_args.args
    assert collection == "prompt_sessions"
    assert document["title"] == "Write a blog post about AI"
    assert document["user_id"] == "user-1"
    assert document["input"]["targetModelId"] == "claude-sonnet-4"
    assert document["result"]["optimized_prompt"] == "optimized"


@pytest.mark.asyncio
async def test_list_scoped_to_user_newest_first(session_store, mongo):
    await session_store.list_for_user("user-1")
    args, kwargs = mongo.find.await_args
    assert args == ("prompt_sessions", {"user_id": "user-1"})
    assert kwargs["sort"] == [("created_at", -1)]


@pytest.mark.asyncio
async def test_delete_by_id(session_store, mongo):
    session_id = str(ObjectId())
    response = await session_store.delete_by_id(session_id, user_id="user-1")

    assert response["status"] is True
    _, query = mongo.delete.await_args.args
    assert query == {"_id": ObjectId(session_id), "user_id": "user-1"}


@pytest.mark.asyncio
async def test_delete_invalid_id(session_store, mongo):
    response = await session_store.delete_by_id("not-an-id")
    assert response["status"] is False
    mongo.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_missing_row(session_store, mongo):
    mongo.delete.return_value = {"status": True, "deleted_count": 0}
    response = await session_store.delete_by_id(str(ObjectId()))
    assert response["status"] is False
