import asyncio
import logging
from typing import Optional

from openai import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    AsyncOpenAI,
    AuthenticationError,
    PermissionDeniedError,
    RateLimitError,
)

from src.app.models.prompt_models import CompletionRequest
from src.app.utils import config
from src.app.utils.exceptions import (
    MissingCredentialError,
    ProviderAuthError,
    ProviderError,
    ProviderMalformedResponseError,
    ProviderNetworkError,
    ProviderRateLimitError,
    ProviderTimeoutError,
)

logger = logging.getLogger(__name__)


class OpenAICompletionProvider:
    """Chat-completions client used for the optimizer and analyzer calls.

    Every failure is raised as a ProviderError subclass so callers only
    need one except clause to take their fallback path.
    """

    def __init__(self, api_key: str, timeout: float = config.PROVIDER_TIMEOUT_SECONDS,
                 client: Optional[AsyncOpenAI] = None):
        if not api_key:
            raise MissingCredentialError("OpenAI API key is not set in the environment variables.")
        self.timeout = timeout
        # Retries are left to the caller's fallback; one attempt per submission.
        self.client = client or AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0)

    @classmethod
    def from_env(cls) -> "OpenAICompletionProvider":
        return cls(api_key=config.OPENAI_API_KEY)

    async def complete(self, request: CompletionRequest) -> str:
        messages = []
        if request.system_prompt:
            messages.append({"role": "system", "content": request.system_prompt})
        messages.append({"role": "user", "content": request.prompt_text})

        logger.info(f"Calling OpenAI API with model {request.model}.")
        try:
            completion = await asyncio.wait_for(
                self.client.chat.completions.create(
                    model=request.model,
                    messages=messages,
                    temperature=request.temperature,
                    top_p=request.top_p,
                    max_tokens=request.max_tokens,
                ),
                timeout=self.timeout,
            )
        except (asyncio.TimeoutError, APITimeoutError) as e:
            raise ProviderTimeoutError(f"OpenAI call timed out after {self.timeout}s") from e
        except (AuthenticationError, PermissionDeniedError) as e:
            raise ProviderAuthError(str(e)) from e
        except RateLimitError as e:
            raise ProviderRateLimitError(str(e)) from e
        except APIConnectionError as e:
            raise ProviderNetworkError(str(e)) from e
        except APIStatusError as e:
            raise ProviderError(f"OpenAI API error {e.status_code}: {e.message}") from e

        try:
            content = completion.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise ProviderMalformedResponseError("Completion response has no message content") from e
        if not content or not content.strip():
            raise ProviderMalformedResponseError("Completion response was empty")

        logger.info("Completion successfully generated.")
        return content
