from __future__ import annotations

import os
from typing import Optional, Sequence

from openai import AsyncOpenAI

from coverletter.ai.types import AIConfigurationError, ChatMessage


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


class OpenAIProvider:
    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
        max_retries: int = 2,
        temperature: float = 0.7,
        max_tokens: int = 3000,
        top_p: float = 0.9,
        frequency_penalty: float = 0.1,
        presence_penalty: float = 0.1,
    ):
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._top_p = top_p
        self._frequency_penalty = frequency_penalty
        self._presence_penalty = presence_penalty
        key = (api_key or os.getenv("OPENAI_API_KEY") or "").strip()
        if not key or _looks_like_placeholder(key):
            raise AIConfigurationError("OpenAI API key is not configured")

        try:
            timeout = float(os.getenv("OPENAI_TIMEOUT_S", str(timeout_s)))
            retries = int(os.getenv("OPENAI_MAX_RETRIES", str(max_retries)))
        except ValueError as exc:
            raise AIConfigurationError("OPENAI_TIMEOUT_S and OPENAI_MAX_RETRIES must be numbers") from exc

        self._client = AsyncOpenAI(
            api_key=key,
            base_url=(base_url or os.getenv("OPENAI_BASE_URL") or None),
            timeout=timeout,
            max_retries=retries,
        )

    @property
    def model(self) -> str:
        return self._model

    async def complete(self, messages: Sequence[ChatMessage]) -> str:
        payload = [{"role": m.role, "content": m.content} for m in messages]
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=payload,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            top_p=self._top_p,
            frequency_penalty=self._frequency_penalty,
            presence_penalty=self._presence_penalty,
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
