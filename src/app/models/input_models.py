from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Optional, Union

from src.app.utils.prompts.form_options import (
    FOCUS_LEVEL_OPTIONS,
    STYLE_OPTIONS,
    THINKING_DEPTH_OPTIONS,
    TONE_OPTIONS,
)

TextOrList = Union[str, List[str]]


def _allowed(options) -> set:
    return {str(option[key]).lower() for option in options for key in ("value", "label")}


ALLOWED_CHOICES = {
    "tone": _allowed(TONE_OPTIONS),
    "style": _allowed(STYLE_OPTIONS),
    "focusLevel": _allowed(FOCUS_LEVEL_OPTIONS),
    "focus_level": _allowed(FOCUS_LEVEL_OPTIONS),
    "thinkingDepth": _allowed(THINKING_DEPTH_OPTIONS),
    "reasoning_effort": _allowed(THINKING_DEPTH_OPTIONS),
}


class OptimizeInput(BaseModel):
    """Form payload. Accepts both the current camelCase and the legacy snake_case names."""
    model_config = ConfigDict(extra="ignore", protected_namespaces=())

    targetModelId: Optional[str] = None
    targetModel: Optional[str] = None
    model_id: Optional[str] = None
    userId: Optional[str] = None
    user_id: Optional[str] = None

    rawPrompt: Optional[str] = None
    user_prompt: Optional[str] = None

    domainContext: Optional[str] = None
    domain_context: Optional[str] = None
    audience: Optional[str] = None
    tone: Optional[str] = None
    style: Optional[str] = None

    formatRequirements: Optional[TextOrList] = None
    format_requirements: Optional[TextOrList] = None
    hardConstraints: Optional[TextOrList] = None
    hard_constraints: Optional[TextOrList] = None
    prohibited: Optional[TextOrList] = None
    avoid_list: Optional[TextOrList] = None
    successCriteria: Optional[TextOrList] = None
    success_criteria: Optional[TextOrList] = None
    exemplars: Optional[TextOrList] = None

    creativity: Optional[Union[int, float]] = None
    temperature: Optional[Union[int, float]] = None
    responseLengthTokens: Optional[int] = Field(None, ge=1)
    max_tokens: Optional[int] = Field(None, ge=1)
    topP: Optional[float] = Field(None, ge=0, le=1)
    top_p: Optional[float] = Field(None, ge=0, le=1)
    focusLevel: Optional[str] = None
    focus_level: Optional[str] = None
    thinkingDepth: Optional[str] = None
    reasoning_effort: Optional[str] = None
    enableParallelization: Optional[bool] = None
    enable_parallelization: Optional[bool] = None

    @field_validator("creativity", "temperature")
    @classmethod
    def check_creativity(cls, value):
        if value is not None and not 0 <= value <= 2:
            raise ValueError("creativity must be between 0 and 2")
        return value

    @field_validator("tone", "style", "focusLevel", "focus_level", "thinkingDepth", "reasoning_effort")
    @classmethod
    def check_choice(cls, value, info):
        # Blank means "not chosen" and falls back to the default.
        if value is None or not value.strip():
            return value
        if value.strip().lower() not in ALLOWED_CHOICES[info.field_name]:
            raise ValueError(f"Unsupported {info.field_name}: {value.strip()}")
        return value

    @model_validator(mode="after")
    def check_required(self):
        model = (self.targetModelId or "").strip() or (self.targetModel or "").strip() or (self.model_id or "").strip()
        if not model:
            raise ValueError("targetModelId is required")
        prompt = (self.rawPrompt or "").strip() or (self.user_prompt or "").strip()
        if len(prompt) < 10:
            raise ValueError("Prompt must be at least 10 characters long")
        return self


class AnalyzeInput(BaseModel):
    user_prompt: str = Field(..., min_length=10)
