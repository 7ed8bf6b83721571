from fastapi import APIRouter, HTTPException

from coverletter.schemas.generate import (
    AnalyzeRequest,
    AnalyzeResponse,
    GenerateRequest,
    GenerateResponse,
)
from coverletter.services.prompts import TONE_OPTIONS
from coverletter.services.generation_service import (
    GenerationError,
    analyze_letter,
    generate_cover_letter,
)

router = APIRouter()


@router.post(
    "/generate",
    response_model=GenerateResponse,
    summary="Generate Cover Letter",
    description="Generate a cover letter for a job description and score it.",
)
async def generate(payload: GenerateRequest):
    try:
        return await generate_cover_letter(payload)
    except GenerationError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.to_detail()) from exc


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    summary="Analyze Cover Letter",
    description="Score an existing letter against a job description without calling the model.",
)
def analyze(payload: AnalyzeRequest):
    return analyze_letter(payload)


@router.get(
    "/tones",
    summary="Writing Tones",
    description="Tones offered to users. Any other tone string is still accepted by /generate.",
)
async def tones():
    return {"tones": list(TONE_OPTIONS), "default": TONE_OPTIONS[0]}
