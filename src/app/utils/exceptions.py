class UnknownModelError(LookupError):
    """Target model identifier is not in the profile catalog."""

    def __init__(self, model_id: str):
        self.model_id = model_id
        super().__init__(f"Unknown target model: {model_id!r}")


class MissingCredentialError(RuntimeError):
    pass


class ProviderError(Exception):
    """Base class for completion provider failures. All of them trigger the local fallback."""


class ProviderTimeoutError(ProviderError):
    pass


class ProviderNetworkError(ProviderError):
    pass


class ProviderAuthError(ProviderError):
    pass


class ProviderRateLimitError(ProviderError):
    pass


class ProviderMalformedResponseError(ProviderError):
    pass


class PersistenceError(Exception):
    pass
