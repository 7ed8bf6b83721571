import os
from functools import lru_cache

from coverletter.ai.config import AIConfig, load_ai_config
from coverletter.ai.types import AIClient, AIConfigurationError

from coverletter.ai.providers.openai_provider import OpenAIProvider


# One provider (and one AsyncOpenAI connection pool) per distinct configuration.
@lru_cache(maxsize=4)
def _openai_provider(cfg: AIConfig, api_key: str) -> OpenAIProvider:
    return OpenAIProvider(
        model=cfg.model,
        api_key=api_key,
        temperature=cfg.temperature,
        max_tokens=cfg.max_tokens,
        top_p=cfg.top_p,
        frequency_penalty=cfg.frequency_penalty,
        presence_penalty=cfg.presence_penalty,
    )


def get_ai_client() -> AIClient:
    cfg = load_ai_config()

    if cfg.provider == "openai":
        return _openai_provider(cfg, (os.getenv("OPENAI_API_KEY") or "").strip())

    raise AIConfigurationError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
