import re
import json
import logging

from pydantic import ValidationError

from src.app.models.prompt_models import CompletionRequest, PromptAnalysis
from src.app.utils import config
from src.app.utils.exceptions import ProviderError
from src.app.utils.prompts.meta_prompt import ANALYZER_PROMPT, ANALYZER_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"```(?:json)?\s*|\s*```")

DEFAULT_ANALYSIS = PromptAnalysis(
    use_case="write-blog",
    task="executive-summary",
    domain="general",
    audience="general-public",
    tone="professional",
    style="clear",
    creativity=0.7,
    responseLengthTokens=512,
    focusLevel="Standard",
    thinkingDepth="Standard",
    confidence_scores={"use_case": 0.5, "task": 0.5, "domain": 0.5},
)


def parse_analysis(raw_text: str) -> PromptAnalysis:
    cleaned = _CODE_FENCE.sub("", raw_text).strip()
    return PromptAnalysis.model_validate(json.loads(cleaned))


async def analyze_prompt(provider, raw_prompt: str) -> PromptAnalysis:
    """
    Suggest form values for a raw prompt.

    Args:
        provider: Completion provider with an async ``complete`` method.
        raw_prompt (str): The user's raw prompt.

    Returns:
        PromptAnalysis: The suggested values, or DEFAULT_ANALYSIS when the
        provider fails or its reply is not valid JSON.
    """
    request = CompletionRequest(
        prompt_text=ANALYZER_PROMPT.format(raw_prompt=raw_prompt),
        model=config.OPTIMIZER_MODEL,
        temperature=0.3,
        max_tokens=1000,
        system_prompt=ANALYZER_SYSTEM_PROMPT,
    )
    try:
        raw_text = await provider.complete(request)
    except ProviderError as pe:
        logger.warning(f"Prompt analysis failed: {str(pe)}")
        return DEFAULT_ANALYSIS.model_copy(deep=True)

    try:
        analysis = parse_analysis(raw_text)
    except (json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Failed to parse analysis result: {str(e)}")
        return DEFAULT_ANALYSIS.model_copy(deep=True)

    logger.info("Prompt analysis completed.")
    return analysis
