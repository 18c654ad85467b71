"""
Resolve the aliased form fields into one canonical InputRecord.

The form payload grew two spellings for several fields over time (snake_case
from the first release, camelCase from the current one). Each logical field
lists its names newest first; the first non-empty value wins, otherwise the
field default applies. ``None`` as a default keeps the field absent so the
composer can render its own placeholder.
"""
import math
from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import BaseModel

from src.app.models.prompt_models import InputRecord

TEXT_FIELDS = {
    "target_model_id": (("targetModelId", "targetModel", "model_id"), ""),
    "raw_prompt": (("rawPrompt", "user_prompt"), ""),
    "domain_context": (("domainContext", "domain_context"), None),
    "audience": (("audience",), None),
    "tone": (("tone",), "Professional"),
    "style": (("style",), None),
    "focus_level": (("focusLevel", "focus_level"), "Standard"),
    "thinking_depth": (("thinkingDepth", "reasoning_effort"), "Standard"),
    "user_id": (("userId", "user_id"), None),
}

LIST_FIELDS = {
    "format_requirements": ("formatRequirements", "format_requirements"),
    "hard_constraints": ("hardConstraints", "hard_constraints"),
    "prohibited": ("prohibited", "avoid_list"),
    "success_criteria": ("successCriteria", "success_criteria"),
    "exemplars": ("exemplars",),
}

NUMBER_FIELDS = {
    "creativity": (("creativity", "temperature"), 0.7, float),
    "response_length_tokens": (("responseLengthTokens", "max_tokens"), 512, int),
    "top_p": (("topP", "top_p"), None, float),
}

FLAG_FIELDS = {
    "parallelization_enabled": (("enableParallelization", "enable_parallelization"), False),
}


def _as_mapping(raw: Union[Mapping[str, Any], BaseModel, None]) -> Mapping[str, Any]:
    if raw is None:
        return {}
    if isinstance(raw, BaseModel):
        return raw.model_dump(by_alias=True, exclude_none=True)
    return raw


def _clean_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    return text or None


def _join_list(value: Any) -> Optional[str]:
    if isinstance(value, (list, tuple)):
        parts = [_clean_text(item) for item in value]
        return _clean_text(", ".join(part for part in parts if part))
    return _clean_text(value)


def _first_present(raw: Mapping[str, Any], names: Sequence[str], clean) -> Any:
    for name in names:
        if name in raw:
            value = clean(raw[name])
            if value is not None:
                return value
    return None


def _to_number(kind):
    def convert(value: Any):
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
        # Whole numbers stay ints so the composer renders them as typed.
        if kind is float and isinstance(value, int):
            return value
        try:
            number = kind(value)
        except (TypeError, ValueError, OverflowError):
            return None
        if isinstance(number, float) and not math.isfinite(number):
            return None
        return number
    return convert


def _to_flag(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "1", "on"):
            return True
        if lowered in ("false", "no", "0", "off"):
            return False
        return None
    if isinstance(value, (int, float)):
        return bool(value)
    return None


def normalize(raw: Union[Mapping[str, Any], BaseModel, None]) -> InputRecord:
    """Build the canonical record from a payload that may carry legacy names.

    Never raises: unparseable values are treated as absent and fall back to
    the field default. Passing an InputRecord back in returns an equal record.
    """
    source = _as_mapping(raw)
    resolved = {}

    for field, (names, default) in TEXT_FIELDS.items():
        value = _first_present(source, names, _clean_text)
        resolved[field] = default if value is None else value

    for field, names in LIST_FIELDS.items():
        resolved[field] = _first_present(source, names, _join_list)

    for field, (names, default, kind) in NUMBER_FIELDS.items():
        value = _first_present(source, names, _to_number(kind))
        resolved[field] = default if value is None else value

    for field, (names, default) in FLAG_FIELDS.items():
        value = _first_present(source, names, _to_flag)
        resolved[field] = default if value is None else value

    return InputRecord.model_validate(resolved)
