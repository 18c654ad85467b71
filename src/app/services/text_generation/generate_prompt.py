import asyncio
import logging
from typing import Any, Mapping, Optional, Set, Union

from pydantic import BaseModel

from src.app.models.prompt_models import (
    CompletionRequest,
    InputRecord,
    OptimizedResult,
    SessionRecord,
)
from src.app.services.text_generation.compose_meta_prompt import compose
from src.app.services.text_generation.fallback_prompt import build_fallback_result
from src.app.services.text_generation.model_catalog import ModelProfileCatalog, catalog as default_catalog
from src.app.services.text_generation.normalize_fields import normalize
from src.app.services.text_generation.parse_response import parse
from src.app.utils import config
from src.app.utils.exceptions import PersistenceError, ProviderError
from src.app.utils.prompts.meta_prompt import OPTIMIZER_SYSTEM_PROMPT

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler("optimize_prompt.log"),
        logging.StreamHandler()
    ]
)
logger = logging.getLogger(__name__)


class PromptOptimizer:
    """Runs one submission: normalize, compose, call the provider, parse, persist.

    ``provider`` needs an async ``complete(CompletionRequest) -> str``;
    ``store`` needs an async ``save(SessionRecord) -> dict``. Both are
    injected so tests and alternative backends can stand in for OpenAI and
    MongoDB.
    """

    def __init__(self, provider, store=None, catalog: Optional[ModelProfileCatalog] = None,
                 model: str = config.OPTIMIZER_MODEL,
                 temperature: float = config.OPTIMIZER_TEMPERATURE,
                 top_p: float = config.OPTIMIZER_TOP_P,
                 max_tokens: int = config.OPTIMIZER_MAX_TOKENS,
                 timeout: float = config.PROVIDER_TIMEOUT_SECONDS):
        self.provider = provider
        self.store = store
        self.catalog = catalog or default_catalog
        self.model = model
        self.temperature = temperature
        self.top_p = top_p
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._pending_writes: Set[asyncio.Task] = set()

    async def optimize(self, raw: Union[Mapping[str, Any], BaseModel, InputRecord]) -> OptimizedResult:
        record = normalize(raw)
        # Unknown models propagate; there is no profile to fall back on.
        profile = self.catalog.get_profile(record.target_model_id)
        logger.info(f"Optimizing prompt for target model {record.target_model_id}.")

        try:
            meta_prompt = compose(record, profile)
            request = CompletionRequest(
                prompt_text=meta_prompt.text,
                model=self.model,
                temperature=self.temperature,
                top_p=self.top_p,
                max_tokens=self.max_tokens,
                system_prompt=OPTIMIZER_SYSTEM_PROMPT,
            )
            raw_text = await asyncio.wait_for(self.provider.complete(request), timeout=self.timeout)
            result = parse(raw_text)
            logger.info("Prompt successfully optimized.")
        except asyncio.TimeoutError:
            logger.warning(f"Provider call timed out after {self.timeout}s; using local fallback.")
            result = build_fallback_result(record)
        except ProviderError as pe:
            logger.warning(f"Provider error ({type(pe).__name__}): {str(pe)}; using local fallback.")
            result = build_fallback_result(record)
        except Exception as e:
            logger.error(f"Unexpected error during optimization: {str(e)}; using local fallback.")
            result = build_fallback_result(record)

        self._schedule_save(record, result)
        return result

    def _schedule_save(self, record: InputRecord, result: OptimizedResult) -> None:
        if self.store is None:
            return
        session = SessionRecord(
            title=SessionRecord.make_title(record.raw_prompt),
            user_id=record.user_id,
            input=record,
            result=result,
        )
        task = asyncio.create_task(self._save_session(session))
        self._pending_writes.add(task)
        task.add_done_callback(self._pending_writes.discard)

    async def _save_session(self, session: SessionRecord) -> None:
        try:
            response = await self.store.save(session)
            if not response or not response.get("status"):
                message = (response or {}).get("message", "unknown error")
                raise PersistenceError(message)
            logger.info(f"Saved prompt session {response.get('inserted_id')}.")
        except Exception as e:
            logger.error(f"Failed to save prompt session: {str(e)}")

    async def wait_for_pending_writes(self) -> None:
        if self._pending_writes:
            await asyncio.gather(*list(self._pending_writes), return_exceptions=True)
