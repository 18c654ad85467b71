import pytest
from unittest.mock import AsyncMock

from src.app.services.text_generation.generate_prompt import PromptOptimizer
from src.app.services.text_generation.model_catalog import ModelProfileCatalog
from src.app.utils.exceptions import ProviderTimeoutError


SAMPLE_REPLY = """## Optimized Prompt
You are a senior technology writer. Write a blog post about AI for developers.

## Brief Thought Process
- Added a clear role and goal
- Mapped tone and audience

## Input Checklist
- Desired word count
- Links to reference material
"""


@pytest.fixture
def catalog():
    return ModelProfileCatalog()


@pytest.fixture
def blog_form():
    return {
        "targetModelId": "claude-sonnet-4",
        "rawPrompt": "Write a blog post about AI",
        "domainContext": "Technology",
        "audience": "Developers",
    }


@pytest.fixture
def provider():
    fake = AsyncMock()
    fake.complete = AsyncMock(return_value=SAMPLE_REPLY)
    return fake


@pytest.fixture
def failing_provider():
    fake = AsyncMock()
    fake.complete = AsyncMock(side_effect=ProviderTimeoutError("timed out"))
    return fake


@pytest.fixture
def store():
    fake = AsyncMock()
    fake.save = AsyncMock(return_value={"status": True, "inserted_id": "abc123"})
    return fake


@pytest.fixture
def optimizer(provider, store, catalog):
    return PromptOptimizer(provider=provider, store=store, catalog=catalog, timeout=5)
