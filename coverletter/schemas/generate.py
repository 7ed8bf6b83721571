from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from coverletter.analysis import ScoreBreakdown
from coverletter.core.config import settings
from coverletter.services.prompts import TONE_OPTIONS

RefinementType = Literal[
    "strengthen-opener",
    "achievement-focused",
    "make-more-compelling",
    "optimize-length",
]

DEFAULT_TONE = TONE_OPTIONS[0]


def _validate_job_description(value: str) -> str:
    if len(value.strip()) < settings.min_job_description_chars:
        raise ValueError(
            f"Job description must be at least {settings.min_job_description_chars} characters long"
        )
    return value


class GenerateRequest(BaseModel):
    job_description: str = Field(min_length=1, max_length=settings.max_job_description_chars)
    tone: str = Field(default=DEFAULT_TONE, max_length=200)
    key_strength: str | None = Field(default=None, max_length=5000)
    refinement_type: RefinementType | None = None
    existing_letter: str | None = Field(default=None, max_length=50000)

    @field_validator("job_description")
    @classmethod
    def _job_description_long_enough(cls, value: str) -> str:
        return _validate_job_description(value)

    @field_validator("tone")
    @classmethod
    def _tone_or_default(cls, value: str) -> str:
        return value.strip() or DEFAULT_TONE


class GenerationMetadata(BaseModel):
    word_count: int = Field(ge=0)
    character_count: int = Field(ge=0)
    generated_at: datetime
    tone: str
    keywords_found: int = Field(ge=0)
    refinement_type: RefinementType | None = None


class GenerateResponse(BaseModel):
    letter_content: str
    keywords: list[str] = Field(max_length=15)
    impact_score: int = Field(ge=60, le=95)
    refinement_suggestion: str = Field(min_length=1)
    metadata: GenerationMetadata


class AnalyzeRequest(BaseModel):
    job_description: str = Field(min_length=1, max_length=settings.max_job_description_chars)
    letter_content: str = Field(min_length=1, max_length=50000)

    @field_validator("job_description")
    @classmethod
    def _job_description_long_enough(cls, value: str) -> str:
        return _validate_job_description(value)


class AnalyzeResponse(BaseModel):
    keywords: list[str] = Field(max_length=15)
    impact_score: int = Field(ge=60, le=95)
    score_breakdown: ScoreBreakdown
    refinement_suggestion: str = Field(min_length=1)
