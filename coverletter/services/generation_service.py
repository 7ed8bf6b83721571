from __future__ import annotations

import logging
import random
import time
from datetime import datetime, timezone
from typing import Any

from coverletter.ai.factory import get_ai_client
from coverletter.ai.types import AIClient, AIConfigurationError, ChatMessage
from coverletter.analysis import extract_keywords, score_breakdown, suggest_refinement
from coverletter.core.config import settings
from coverletter.schemas.generate import (
    AnalyzeRequest,
    AnalyzeResponse,
    GenerateRequest,
    GenerateResponse,
    GenerationMetadata,
)
from coverletter.services.prompts import SYSTEM_PROMPT, build_cover_letter_prompt

logger = logging.getLogger(__name__)

# OpenAI error code -> (HTTP status, client-facing message)
_PROVIDER_ERRORS: dict[str, tuple[int, str]] = {
    "insufficient_quota": (429, "OpenAI API quota exceeded. Please try again later."),
    "invalid_api_key": (401, "Invalid OpenAI API key configuration."),
    "model_not_found": (503, "Requested AI model is not available."),
}


class GenerationError(RuntimeError):
    def __init__(
        self,
        message: str,
        *,
        code: str = "generation_failed",
        status_code: int = 500,
        details: str | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.details = details
        self.timestamp = datetime.now(timezone.utc)

    def to_detail(self) -> dict[str, Any]:
        detail: dict[str, Any] = {"error": str(self), "code": self.code}
        if self.details is not None:
            detail["details"] = self.details
            detail["timestamp"] = self.timestamp.isoformat()
        return detail


def _preview(text: str | None) -> str:
    if not text:
        return "None provided"
    limit = settings.log_preview_chars
    return text[:limit] + "..." if len(text) > limit else text


def _provider_error(exc: Exception) -> GenerationError:
    code = getattr(exc, "code", None)
    if isinstance(code, str) and code in _PROVIDER_ERRORS:
        status_code, message = _PROVIDER_ERRORS[code]
        return GenerationError(message, code=code, status_code=status_code)
    return GenerationError(
        "Failed to generate cover letter",
        code="generation_failed",
        status_code=500,
        details=str(exc) if settings.expose_error_details else "Internal server error",
    )


def _resolve_client(client: AIClient | None) -> AIClient:
    if client is not None:
        return client
    try:
        return get_ai_client()
    except AIConfigurationError as exc:
        logger.error("cover_letter_provider_unconfigured: %s", exc)
        raise GenerationError(
            "AI provider is not configured",
            code="llm_not_configured",
            status_code=500,
            details=str(exc) if settings.expose_error_details else None,
        ) from exc


async def generate_cover_letter(
    payload: GenerateRequest,
    *,
    client: AIClient | None = None,
    rng: random.Random | None = None,
) -> GenerateResponse:
    logger.info(
        "cover_letter_request job_description_len=%s tone=%s key_strength=%s refinement=%s",
        len(payload.job_description),
        payload.tone,
        bool(payload.key_strength),
        payload.refinement_type or "none",
    )
    logger.debug("cover_letter_request_preview job_description=%r", _preview(payload.job_description))

    keywords = extract_keywords(payload.job_description)
    prompt = build_cover_letter_prompt(
        payload.job_description,
        payload.tone,
        payload.key_strength,
        keywords,
        refinement_type=payload.refinement_type,
        existing_letter=payload.existing_letter,
    )

    ai_client = _resolve_client(client)
    started = time.perf_counter()
    try:
        letter = await ai_client.complete(
            [
                ChatMessage(role="system", content=SYSTEM_PROMPT),
                ChatMessage(role="user", content=prompt),
            ]
        )
    except Exception as exc:  # noqa: BLE001 - mapped onto a typed error below
        logger.exception("cover_letter_generation_failed prompt_len=%s", len(prompt))
        raise _provider_error(exc) from exc

    if not letter.strip():
        logger.warning("cover_letter_empty_response prompt_len=%s", len(prompt))
        raise GenerationError(
            "Generated letter content is empty",
            code="empty_response",
            status_code=500,
            details="Internal server error",
        )

    breakdown = score_breakdown(letter, keywords, rng=rng)
    suggestion = suggest_refinement(letter, keywords, breakdown.total, rng=rng)
    logger.info(
        "cover_letter_generated chars=%s words=%s keywords=%s score=%s latency_ms=%s",
        len(letter),
        breakdown.word_count,
        len(keywords),
        breakdown.total,
        int((time.perf_counter() - started) * 1000),
    )

    return GenerateResponse(
        letter_content=letter,
        keywords=keywords,
        impact_score=breakdown.total,
        refinement_suggestion=suggestion,
        metadata=GenerationMetadata(
            word_count=breakdown.word_count,
            character_count=len(letter),
            generated_at=datetime.now(timezone.utc),
            tone=payload.tone,
            keywords_found=len(keywords),
            refinement_type=payload.refinement_type,
        ),
    )


def analyze_letter(payload: AnalyzeRequest, *, rng: random.Random | None = None) -> AnalyzeResponse:
    keywords = extract_keywords(payload.job_description)
    breakdown = score_breakdown(payload.letter_content, keywords, rng=rng)
    suggestion = suggest_refinement(payload.letter_content, keywords, breakdown.total, rng=rng)
    logger.info(
        "cover_letter_analyzed words=%s keywords=%s score=%s",
        breakdown.word_count,
        len(keywords),
        breakdown.total,
    )
    return AnalyzeResponse(
        keywords=keywords,
        impact_score=breakdown.total,
        score_breakdown=breakdown,
        refinement_suggestion=suggestion,
    )
