import re
import logging
from typing import List, Optional, Tuple

from src.app.models.prompt_models import OptimizedResult

logger = logging.getLogger(__name__)

_HEADING_PATTERNS = (
    re.compile(r"^[ \t]*##[ \t]*Optimized[ \t]+Prompt[ \t]*:?[ \t]*$", re.IGNORECASE | re.MULTILINE),
    re.compile(r"^[ \t]*##[ \t]*Brief[ \t]+Thought[ \t]+Process[ \t]*:?[ \t]*$", re.IGNORECASE | re.MULTILINE),
    re.compile(r"^[ \t]*##[ \t]*Input[ \t]+Checklist[ \t]*:?[ \t]*$", re.IGNORECASE | re.MULTILINE),
)
_BULLET = re.compile(r"^\s*(?:[-*•+]|\d+[.)])\s+")


def _locate(text: str) -> List[Optional[Tuple[int, int]]]:
    """(start, end) of each heading line, searched in contract order."""
    spans: List[Optional[Tuple[int, int]]] = []
    cursor = 0
    for pattern in _HEADING_PATTERNS:
        match = pattern.search(text, cursor)
        if match:
            spans.append((match.start(), match.end()))
            cursor = match.end()
        else:
            spans.append(None)
    return spans


def _body(text: str, spans, index: int) -> Optional[str]:
    span = spans[index]
    if span is None:
        return None
    following = [s[0] for s in spans[index + 1:] if s is not None]
    end = following[0] if following else len(text)
    return text[span[1]:end].strip()


def to_bullets(block: Optional[str]) -> List[str]:
    if not block:
        return []
    items = []
    for line in block.splitlines():
        item = _BULLET.sub("", line).strip()
        if item:
            items.append(item)
    return items


def parse(raw_text: Optional[str]) -> OptimizedResult:
    """Split the optimizer reply into its three contract sections.

    Never raises. A missing section yields an empty list; a reply without
    the Optimized Prompt heading is taken whole as the optimized prompt.
    """
    raw = raw_text if isinstance(raw_text, str) else ""
    text = raw.replace("\r\n", "\n")
    spans = _locate(text)

    prompt = _body(text, spans, 0)
    if prompt is None:
        logger.warning("Optimized Prompt heading not found; passing the reply through as-is.")
        cut = [s[0] for s in spans if s is not None]
        prompt = text[:cut[0]].strip() if cut else text.strip()

    thoughts = to_bullets(_body(text, spans, 1))
    checklist = to_bullets(_body(text, spans, 2))
    if spans[1] is None or spans[2] is None:
        logger.info("Reply is missing one or more trailing sections; using empty lists for them.")

    return OptimizedResult(
        optimized_prompt=prompt,
        thought_process=thoughts,
        input_checklist=checklist,
        raw_response=raw,
    )
