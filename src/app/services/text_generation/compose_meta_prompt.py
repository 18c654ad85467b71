"""
Meta-prompt composer.

Turns a canonical InputRecord plus a target-model profile into the
instruction document sent to the optimizer model. Pure: no I/O, no clock,
same input always yields the same text.
"""
import re
from typing import List, Optional

from src.app.models.prompt_models import ComposedMetaPrompt, InputRecord, ModelProfile
from src.app.services.text_generation.model_catalog import DEFAULT_MODEL_PROFILE
from src.app.utils.prompts.meta_prompt import (
    CLOSING_INSTRUCTION,
    CONFLICT_RESOLUTION_ORDER,
    INPUT_CHECKLIST_REQUIREMENTS,
    META_PROMPT_INTRO,
    OPTIMIZED_PROMPT_REQUIREMENTS,
    OUTPUT_CONTRACT,
    SECTION_HEADINGS,
    STYLE_RULES,
    THOUGHT_PROCESS_REQUIREMENTS,
)

NONE_SENTINEL = "none"
DEFAULT_OUTPUT_FORMAT = "Use clear H2 sections followed by a final checklist."


def _present(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _or_none(value) -> str:
    return _present(value) or NONE_SENTINEL


_HEADING_MARKS = re.compile(r"^(\s*)(#+)", re.MULTILINE)


def _escape_headings(text: str) -> str:
    """User text must not open a Markdown heading inside the meta-prompt."""
    return _HEADING_MARKS.sub(lambda match: match.group(1) + "\\#" * len(match.group(2)), text)


def creativity_band(creativity: float) -> str:
    if creativity <= 0.3:
        return "Low (focused, deterministic)"
    if creativity <= 0.7:
        return "Medium (balanced)"
    return "High (creative, diverse)"


def response_length_band(tokens: int) -> str:
    if tokens <= 256:
        return "Short (1-2 paragraphs)"
    if tokens <= 512:
        return "Medium (3-4 paragraphs)"
    if tokens <= 1024:
        return "Long (detailed response)"
    return "Extended (comprehensive)"


def _header_block(profile: ModelProfile) -> str:
    lines = [
        "## Target Model",
        profile.label,
        "",
        "## Target-Model Notes (use to tailor the Optimized Prompt)",
        f"- System/Role: {profile.system_role}",
        f"- Sampling: {profile.sampling_tips}",
        f"- Structure: {profile.structure_tips}",
    ]
    if _present(profile.tool_calling_tips):
        lines.append(f"- Tool Calling: {profile.tool_calling_tips}")
    if _present(profile.safety_tips):
        lines.append(f"- Safety: {profile.safety_tips}")
    do_nots = [item for item in profile.do_nots if _present(item)]
    if do_nots:
        lines.append("- Do not:")
        lines.extend(f"  - {item}" for item in do_nots)
    return "\n".join(lines)


def _inputs_block(record: InputRecord) -> str:
    fields = [
        ("Domain Context", record.domain_context),
        ("Target Audience", record.audience),
        ("Tone", record.tone),
        ("Style", record.style),
        ("Format Requirements", record.format_requirements),
        ("Hard Constraints (MUST do)", record.hard_constraints),
        ("Prohibited Content (MUST NOT do)", record.prohibited),
        ("Success Criteria", record.success_criteria),
        ("Exemplars", record.exemplars),
    ]
    lines = ["## Inputs from UI", f"- Raw Prompt: {_escape_headings(record.raw_prompt)}"]
    lines.extend(f"- {label}: {_escape_headings(_or_none(value))}" for label, value in fields)
    return "\n".join(lines)


def _factory_settings_block(record: InputRecord) -> str:
    if record.parallelization_enabled:
        parallel = "Enabled (split independent sub-tasks, work them in parallel, then merge and reconcile the results)"
    else:
        parallel = "Disabled (work through sub-tasks sequentially)"
    lines = [
        "## Factory Settings (map UI to behavior; these are instructions to the *final* model)",
        f"- Creativity (temperature): {record.creativity} ({creativity_band(record.creativity)})",
        f"- Response Length (tokens): {record.response_length_tokens} ({response_length_band(record.response_length_tokens)})",
        f"- Focus Level: {_escape_headings(_or_none(record.focus_level))} (higher = tighter, fewer tangents)",
        f"- Thinking Depth: {_escape_headings(_or_none(record.thinking_depth))} (e.g., Quick / Standard / Deep Analysis)",
        f"- Parallelization: {parallel}",
    ]
    return "\n".join(lines)


def _requirements_block(record: InputRecord) -> str:
    tone = _escape_headings(_present(record.tone) or "Professional")
    style = _escape_headings(_present(record.style) or "Clear and structured")
    focus_extra = ""
    if record.top_p is not None and record.top_p <= 0.5:
        focus_extra = " Eliminate filler; prefer compact wording."
    return OPTIMIZED_PROMPT_REQUIREMENTS.format(
        domain=_escape_headings(_present(record.domain_context) or "the task's domain"),
        output_format=_escape_headings(_present(record.format_requirements) or DEFAULT_OUTPUT_FORMAT),
        audience=_escape_headings(_present(record.audience) or "the target audience"),
        tone=tone,
        style=style,
        length_band=response_length_band(record.response_length_tokens),
        length=record.response_length_tokens,
        creativity=record.creativity,
        creativity_band=creativity_band(record.creativity),
        focus_level=_escape_headings(_or_none(record.focus_level)),
        focus_extra=focus_extra,
        thinking_depth=_escape_headings(_or_none(record.thinking_depth)),
        conflict_order=CONFLICT_RESOLUTION_ORDER,
    )


def compose(record: InputRecord, profile: Optional[ModelProfile] = None) -> ComposedMetaPrompt:
    """Render the meta-prompt for ``record``.

    ``profile`` must already be resolved by the caller; ``None`` composes
    against the generic default profile.
    """
    profile = profile or DEFAULT_MODEL_PROFILE
    blocks: List[str] = [
        META_PROMPT_INTRO,
        _header_block(profile),
        _inputs_block(record),
        _factory_settings_block(record),
        OUTPUT_CONTRACT.format(headings="\n".join(SECTION_HEADINGS)),
        _requirements_block(record),
        THOUGHT_PROCESS_REQUIREMENTS,
        INPUT_CHECKLIST_REQUIREMENTS,
        STYLE_RULES,
        CLOSING_INSTRUCTION,
    ]
    return ComposedMetaPrompt(
        text="\n\n".join(blocks),
        target_model_id=record.target_model_id,
        target_label=profile.label,
    )
