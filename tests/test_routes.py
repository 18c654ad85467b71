"""Tests for the HTTP routes."""

import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from src.app.services.text_generation.generate_prompt import PromptOptimizer
from src.routes.routes import router


@pytest.fixture
def session_store():
    fake = AsyncMock()
    fake.list_for_user = AsyncMock(return_value={"status": True, "results": [{"_id": "1", "title": "t"}]})
    fake.delete_by_id = AsyncMock(return_value={"status": True, "deleted_count": 1})
    return fake


@pytest.fixture
def client(provider, catalog, session_store):
    app = FastAPI()
    app.include_router(router)
    app.state.provider = provider
    app.state.store = session_store
    # No background writes inside TestClient's short-lived event loops.
    app.state.optimizer = PromptOptimizer(provider=provider, store=None, catalog=catalog)
    return TestClient(app)


def test_root(client):
    assert client.get("/").status_code == 200


def test_models(client):
    body = client.get("/models").json()
    ids = [model["id"] for model in body["models"]]
    assert "claude-sonnet-4" in ids


def test_models_lists_form_options(client):
    options = client.get("/models").json()["options"]
    assert {"value": "professional", "label": "Professional"} in options["tone"]
    assert {"value": "high", "label": "Deep Analysis"} in options["thinking_depth"]
    assert [option["value"] for option in options["response_length_tokens"]] == [256, 512, 1024, 2048]
    assert set(options) == {"tone", "style", "focus_level", "thinking_depth", "response_length_tokens"}


def test_optimize(client, blog_form):
    response = client.post("/optimize", json=blog_form)
    assert response.status_code == 200
    result = response.json()["result"]
    assert result["optimized_prompt"].startswith("You are a senior technology writer.")
    assert result["input_checklist"] == ["Desired word count", "Links to reference material"]


def test_optimize_legacy_names(client):
    response = client.post("/optimize", json={
        "model_id": "gpt-4o",
        "user_prompt": "Write a blog post about AI",
        "temperature": 0.5,
        "max_tokens": 700,
    })
    assert response.status_code == 200


def test_optimize_blank_model_falls_through_to_legacy_name(client):
    response = client.post("/optimize", json={
        "targetModelId": "   ",
        "model_id": "gpt-4o",
        "rawPrompt": "Write a blog post about AI",
    })
    assert response.status_code == 200


def test_optimize_accepts_option_values_and_labels(client):
    response = client.post("/optimize", json={
        "targetModelId": "gpt-4o",
        "rawPrompt": "Write a blog post about AI",
        "tone": "friendly",
        "style": "Step-by-step",
        "focusLevel": "Laser-focused",
        "thinkingDepth": "Deep Analysis",
        "audience": "",
    })
    assert response.status_code == 200


def test_optimize_unknown_model_is_404(client):
    response = client.post("/optimize", json={"targetModelId": "gpt-2", "rawPrompt": "Write a haiku about rain"})
    assert response.status_code == 404


@pytest.mark.parametrize("payload", [
    {"targetModelId": "gpt-4o", "rawPrompt": "too short"},
    {"rawPrompt": "Write a blog post about AI"},
    {"targetModelId": "gpt-4o", "rawPrompt": "Write a blog post about AI", "creativity": 2.5},
    {"targetModelId": "gpt-4o", "rawPrompt": "Write a blog post about AI", "responseLengthTokens": 0},
    {"targetModelId": "command-r-plus", "rawPrompt": "Write a blog post about AI", "responseLengthTokens": 5000},
    {"targetModelId": "gpt-4o", "rawPrompt": "Write a blog post about AI", "tone": "Sarcastic"},
    {"targetModelId": "gpt-4o", "rawPrompt": "Write a blog post about AI", "style": "Haiku"},
    {"targetModelId": "gpt-4o", "rawPrompt": "Write a blog post about AI", "focusLevel": "Unfocused"},
    {"targetModelId": "gpt-4o", "rawPrompt": "Write a blog post about AI", "reasoning_effort": "extreme"},
    {"targetModelId": "   ", "targetModel": "  ", "rawPrompt": "Write a blog post about AI"},
])
def test_optimize_validation_is_422(client, payload):
    assert client.post("/optimize", json=payload).status_code == 422


def test_optimize_provider_failure_still_200(client, provider, blog_form):
    provider.complete.side_effect = TimeoutError("slow")
    response = client.post("/optimize", json=blog_form)
    assert response.status_code == 200
    assert response.json()["result"]["used_fallback"] is True


def test_preview_does_not_call_provider(client, provider, blog_form):
    response = client.post("/meta_prompt/preview", json=blog_form)
    assert response.status_code == 200
    body = response.json()
    assert body["target_label"] == "Claude Sonnet 4"
    assert "## Optimized Prompt" in body["meta_prompt"]
    assert body["known_model"] is True
    provider.complete.assert_not_awaited()


def test_analyze(client, provider):
    provider.complete.return_value = json.dumps({"use_case": "coding", "domain": "technology"})
    response = client.post("/analyze", json={"user_prompt": "Review my Python code for bugs"})
    assert response.status_code == 200
    assert response.json()["analysis"]["use_case"] == "coding"


def test_analyze_short_prompt_is_422(client):
    assert client.post("/analyze", json={"user_prompt": "short"}).status_code == 422


def test_list_sessions(client, session_store):
    response = client.get("/sessions", params={"user_id": "user-1"})
    assert response.status_code == 200
    session_store.list_for_user.assert_awaited_once_with("user-1")


def test_delete_session_not_found(client, session_store):
    session_store.delete_by_id.return_value = {"status": False, "message": "Session x not found"}
    assert client.delete("/sessions/x").status_code == 404


def test_preview_flags_unknown_model(client):
    response = client.post("/meta_prompt/preview", json={"targetModelId": "gpt-2", "rawPrompt": "Write a haiku about rain"})
    body = response.json()
    assert body["known_model"] is False
    assert body["target_label"] == "Generic LLM"


def test_preview_renders_whole_number_creativity(client, blog_form):
    response = client.post("/meta_prompt/preview", json={**blog_form, "creativity": 1})
    assert "- Creativity (temperature): 1 (" in response.json()["meta_prompt"]
