import os
from dataclasses import dataclass

from coverletter.ai.types import AIConfigurationError


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    temperature: float
    max_tokens: int
    top_p: float
    frequency_penalty: float
    presence_penalty: float


def _env_number(name: str, default: str, cast):
    raw = os.getenv(name, default).strip() or default
    try:
        return cast(raw)
    except ValueError as exc:
        raise AIConfigurationError(f"{name} must be a number, got {raw!r}") from exc


def load_ai_config() -> AIConfig:
    provider = os.getenv("AI_PROVIDER", "openai").strip().lower()
    model = os.getenv("AI_MODEL", "gpt-4").strip()
    return AIConfig(
        provider=provider,
        model=model,
        temperature=_env_number("AI_TEMPERATURE", "0.7", float),
        max_tokens=_env_number("AI_MAX_TOKENS", "3000", int),
        top_p=_env_number("AI_TOP_P", "0.9", float),
        frequency_penalty=_env_number("AI_FREQUENCY_PENALTY", "0.1", float),
        presence_penalty=_env_number("AI_PRESENCE_PENALTY", "0.1", float),
    )
