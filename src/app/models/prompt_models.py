from datetime import datetime, timezone
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ModelProfile(BaseModel):
    """Guidance notes describing how a target model responds best to instructions."""
    model_config = ConfigDict(frozen=True)

    label: str
    provider: str = "generic"
    max_output_tokens: int = 8192
    system_role: str
    sampling_tips: str
    structure_tips: str
    tool_calling_tips: Optional[str] = None
    safety_tips: Optional[str] = None
    do_nots: tuple[str, ...] = ()


class InputRecord(BaseModel):
    """Canonical, alias-free form input consumed by the composer.

    Dumped with ``by_alias=True`` the keys are the camelCase names, which
    the normalizer treats as the preferred spelling of every field.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    target_model_id: str
    raw_prompt: str
    domain_context: Optional[str] = None
    audience: Optional[str] = None
    tone: Optional[str] = None
    style: Optional[str] = None
    format_requirements: Optional[str] = None
    hard_constraints: Optional[str] = None
    prohibited: Optional[str] = None
    success_criteria: Optional[str] = None
    exemplars: Optional[str] = None
    creativity: Union[int, float] = 0.7
    response_length_tokens: int = 512
    focus_level: str = "Standard"
    thinking_depth: str = "Standard"
    parallelization_enabled: bool = Field(default=False, alias="enableParallelization")
    top_p: Optional[float] = None
    user_id: Optional[str] = None


class ComposedMetaPrompt(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    target_model_id: str
    target_label: str

    def __str__(self) -> str:
        return self.text


class OptimizedResult(BaseModel):
    optimized_prompt: str
    thought_process: List[str] = Field(default_factory=list)
    input_checklist: List[str] = Field(default_factory=list)
    raw_response: Optional[str] = None
    used_fallback: bool = False


class SessionRecord(BaseModel):
    title: str
    user_id: Optional[str] = None
    input: InputRecord
    result: OptimizedResult
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def make_title(raw_prompt: str, limit: int = 50) -> str:
        if len(raw_prompt) > limit:
            return raw_prompt[:limit] + "..."
        return raw_prompt

    def to_document(self) -> dict:
        return {
            "title": self.title,
            "user_id": self.user_id,
            "input": self.input.model_dump(by_alias=True),
            "result": self.result.model_dump(),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


class CompletionRequest(BaseModel):
    prompt_text: str
    model: str
    temperature: float
    top_p: float = 1.0
    max_tokens: int
    system_prompt: Optional[str] = None


class PromptAnalysis(BaseModel):
    use_case: Optional[str] = None
    task: Optional[str] = None
    domain: Optional[str] = None
    audience: Optional[str] = None
    tone: Optional[str] = None
    style: Optional[str] = None
    creativity: float = 0.7
    responseLengthTokens: int = 512
    focusLevel: str = "Standard"
    thinkingDepth: str = "Standard"
    format_requirements: Optional[str] = None
    hard_constraints: Optional[str] = None
    confidence_scores: Dict[str, float] = Field(default_factory=dict)
