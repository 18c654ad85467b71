"""Tests for the optimizer reply parser."""

import pytest

from src.app.services.text_generation.parse_response import parse, to_bullets
from conftest import SAMPLE_REPLY


def test_three_sections_extracted():
    result = parse(SAMPLE_REPLY)

    assert result.optimized_prompt.startswith("You are a senior technology writer.")
    assert "## Brief Thought Process" not in result.optimized_prompt
    assert result.thought_process == ["Added a clear role and goal", "Mapped tone and audience"]
    assert result.input_checklist == ["Desired word count", "Links to reference material"]
    assert result.raw_response == SAMPLE_REPLY
    assert result.used_fallback is False


def test_nested_headings_kept_in_prompt():
    reply = (
        "## Optimized Prompt\n"
        "## Role & Goal\nYou are an analyst.\n\n## Output Format\nA table.\n"
        "## Brief Thought Process\n1. Added output format\n"
        "## Input Checklist\n* Data source\n"
    )
    result = parse(reply)
    assert "## Role & Goal" in result.optimized_prompt
    assert "## Output Format" in result.optimized_prompt
    assert result.thought_process == ["Added output format"]
    assert result.input_checklist == ["Data source"]


def test_headings_case_insensitive_with_crlf():
    reply = "## optimized prompt\r\nDo the thing.\r\n## BRIEF THOUGHT PROCESS\r\n- one\r\n## input checklist\r\n- two\r\n"
    result = parse(reply)
    assert result.optimized_prompt == "Do the thing."
    assert result.thought_process == ["one"]
    assert result.input_checklist == ["two"]


def test_missing_checklist_gives_empty_list():
    result = parse("## Optimized Prompt\nDo the thing.\n## Brief Thought Process\n- one\n")
    assert result.optimized_prompt == "Do the thing."
    assert result.thought_process == ["one"]
    assert result.input_checklist == []


def test_no_headings_passes_through():
    result = parse("  Just a plain optimized prompt body.  \n")
    assert result.optimized_prompt == "Just a plain optimized prompt body."
    assert result.thought_process == []
    assert result.input_checklist == []


def test_missing_prompt_heading_uses_leading_text():
    result = parse("Plain prompt body\n## Input Checklist\n- deadline\n")
    assert result.optimized_prompt == "Plain prompt body"
    assert result.input_checklist == ["deadline"]


@pytest.mark.parametrize("raw", ["", "   ", "##", "## Input Checklist", None, "\n\n## Brief Thought Process\n"])
def test_never_raises(raw):
    result = parse(raw)
    assert isinstance(result.optimized_prompt, str)
    assert isinstance(result.thought_process, list)
    assert isinstance(result.input_checklist, list)


def test_to_bullets_strips_markers():
    block = "- dash\n* star\n• dot\n2) paren\n3. period\n\n   \nplain"
    assert to_bullets(block) == ["dash", "star", "dot", "paren", "period", "plain"]
