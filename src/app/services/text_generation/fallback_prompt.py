from typing import List

from src.app.models.prompt_models import InputRecord, OptimizedResult

FALLBACK_THOUGHT_PROCESS = [
    "Applied prompt engineering best practices",
    "Added a structured thinking framework",
    "Incorporated the specified tone and style",
    "Built in quality validation steps",
    "Note: generated locally because the optimization service was unavailable",
]

FALLBACK_PROMPT_TEMPLATE = """You are an expert {role}. Your task is to {task}

## Context & Approach
**Target Audience:** {audience}
**Communication Style:** {tone} and {style}
**Domain Focus:** {domain_focus}

## Thinking Framework
Before responding:
1. **Analyze** the request thoroughly
2. **Plan** your approach step-by-step
3. **Consider** the specific needs of {audience}
4. **Structure** your response for maximum clarity

## Quality Standards
Ensure your response:
- Addresses the core request completely
- Uses {tone} tone throughout
- Follows {style} presentation style
- Provides actionable information
- Is appropriate for {audience}
- Stays within roughly {length} tokens"""


def _optional_sections(record: InputRecord) -> List[str]:
    sections = []
    if record.format_requirements:
        sections.append(f"## Format Requirements\n{record.format_requirements}")
    if record.hard_constraints:
        sections.append(f"## Critical Requirements\n{record.hard_constraints}")
    if record.prohibited:
        sections.append(f"## Avoid\n{record.prohibited}")
    if record.success_criteria:
        sections.append(f"## Success Criteria\n{record.success_criteria}")
    if record.exemplars:
        sections.append(f"## Examples to Follow\n{record.exemplars}")
    return sections


def build_checklist(record: InputRecord) -> List[str]:
    checks = [
        (record.domain_context, "Domain context provided", "Consider adding domain context"),
        (record.audience, "Target audience defined", "Target audience could be specified"),
        (record.success_criteria, "Success criteria set", "Success criteria would help"),
        (record.format_requirements, "Format requirements specified", "Output format could be clarified"),
        (record.exemplars, "Examples supplied", "Examples of the desired output would help"),
    ]
    return [present if value else missing for value, present, missing in checks]


def build_fallback_result(record: InputRecord) -> OptimizedResult:
    """Deterministic result synthesized from the record alone, no provider call."""
    role = f"{record.domain_context} expert" if record.domain_context else "helpful assistant"
    audience = record.audience or "users"
    tone = (record.tone or "professional").lower()
    style = (record.style or "clear and comprehensive").lower()

    body = FALLBACK_PROMPT_TEMPLATE.format(
        role=role,
        task=record.raw_prompt,
        audience=audience,
        tone=tone,
        style=style,
        domain_focus=record.domain_context or "General assistance",
        length=record.response_length_tokens,
    )
    blocks = [body] + _optional_sections(record) + [
        "## Execute\nNow complete this task following the framework above, ensuring excellence at every step."
    ]

    return OptimizedResult(
        optimized_prompt="\n\n".join(blocks),
        thought_process=list(FALLBACK_THOUGHT_PROCESS),
        input_checklist=build_checklist(record),
        raw_response=None,
        used_fallback=True,
    )
