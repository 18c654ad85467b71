import logging
from typing import Dict, List, Mapping, Optional

from src.app.models.prompt_models import ModelProfile
from src.app.utils.exceptions import UnknownModelError
from src.app.utils.prompts.form_options import FORM_OPTIONS
from src.app.utils.prompts.model_profiles import DEFAULT_PROFILE, MODEL_PROFILES

logger = logging.getLogger(__name__)


class ModelProfileCatalog:
    """Read-only lookup of target-model guidance profiles.

    Profiles are plain data, so adding a model means adding an entry to
    the mapping handed to the constructor; composition code never branches
    on the model id.
    """

    def __init__(self, profiles: Mapping[str, Mapping] = None):
        source = MODEL_PROFILES if profiles is None else profiles
        self._profiles: Dict[str, ModelProfile] = {
            model_id: ModelProfile(**notes) for model_id, notes in source.items()
        }
        logger.info(f"Loaded {len(self._profiles)} target model profiles")

    def resolve_profile(self, model_id: Optional[str]) -> Optional[ModelProfile]:
        if not model_id:
            return None
        return self._profiles.get(model_id.strip())

    def get_profile(self, model_id: Optional[str]) -> ModelProfile:
        profile = self.resolve_profile(model_id)
        if profile is None:
            raise UnknownModelError(model_id or "")
        return profile

    def model_ids(self) -> List[str]:
        return list(self._profiles.keys())

    def describe(self) -> List[dict]:
        return [
            {
                "id": model_id,
                "label": profile.label,
                "provider": profile.provider,
                "max_output_tokens": profile.max_output_tokens,
            }
            for model_id, profile in self._profiles.items()
        ]

    def form_options(self) -> Dict[str, List[dict]]:
        """Choices offered by the form for the enumerated fields."""
        return {field: [dict(option) for option in options] for field, options in FORM_OPTIONS.items()}

    def __contains__(self, model_id: str) -> bool:
        return self.resolve_profile(model_id) is not None


DEFAULT_MODEL_PROFILE = ModelProfile(**DEFAULT_PROFILE)

catalog = ModelProfileCatalog()
