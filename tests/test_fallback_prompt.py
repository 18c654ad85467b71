"""Tests for the locally synthesized fallback result."""

from src.app.services.text_generation.fallback_prompt import (
    FALLBACK_THOUGHT_PROCESS,
    build_checklist,
    build_fallback_result,
)
from src.app.services.text_generation.normalize_fields import normalize


def test_embeds_user_context(blog_form):
    record = normalize({**blog_form, "tone": "Friendly", "style": "Conversational"})
    result = build_fallback_result(record)

    assert result.used_fallback is True
    assert "Technology expert" in result.optimized_prompt
    assert "Write a blog post about AI" in result.optimized_prompt
    assert "**Target Audience:** Developers" in result.optimized_prompt
    assert "friendly and conversational" in result.optimized_prompt
    assert result.thought_process == FALLBACK_THOUGHT_PROCESS


def test_optional_sections_only_when_set():
    bare = build_fallback_result(normalize({"targetModelId": "gpt-4o", "rawPrompt": "Outline a workshop"}))
    assert "## Critical Requirements" not in bare.optimized_prompt
    assert "helpful assistant" in bare.optimized_prompt

    full = build_fallback_result(normalize({
        "targetModelId": "gpt-4o",
        "rawPrompt": "Outline a workshop",
        "hardConstraints": "two hours max",
        "prohibited": "sales pitches",
    }))
    assert "## Critical Requirements\ntwo hours max" in full.optimized_prompt
    assert "## Avoid\nsales pitches" in full.optimized_prompt


def test_checklist_flags_missing_fields():
    checklist = build_checklist(normalize({
        "targetModelId": "gpt-4o",
        "rawPrompt": "Outline a workshop",
        "audience": "Team leads",
    }))
    assert "Consider adding domain context" in checklist
    assert "Target audience defined" in checklist
    assert "Success criteria would help" in checklist
