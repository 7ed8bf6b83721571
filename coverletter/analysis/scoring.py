from __future__ import annotations

import random
from typing import Sequence

from pydantic import BaseModel, Field

from . import signals

BASE_SCORE = 60
MIN_SCORE = 60
MAX_SCORE = 95
JITTER_RANGE = 3

# (minimum ratio, points), checked top-down.
_KEYWORD_BUCKETS: tuple[tuple[float, int], ...] = (
    (0.8, 20),
    (0.6, 15),
    (0.4, 10),
    (0.2, 5),
)

_OPENING_POINTS = 3
_CLOSING_POINTS = 3
_PARAGRAPH_POINTS = 3
_QUANTIFIED_POINTS = 4
_ACTION_VERB_POINTS = 2

_rng = random.Random()


class ScoreBreakdown(BaseModel):
    base: int = BASE_SCORE
    keyword_bonus: int = Field(ge=0, le=20)
    length_bonus: int = Field(ge=0, le=15)
    structure_bonus: int = Field(ge=0, le=15)
    jitter: int = Field(ge=-JITTER_RANGE, le=JITTER_RANGE)
    keywords_found: int = Field(ge=0)
    word_count: int = Field(ge=0)
    total: int = Field(ge=MIN_SCORE, le=MAX_SCORE)


def keyword_bonus(found: int, total: int) -> int:
    if total == 0:
        return 0
    ratio = found / total
    for threshold, points in _KEYWORD_BUCKETS:
        if ratio >= threshold:
            return points
    return 0


def length_bonus(words: int) -> int:
    if 300 <= words <= 600:
        return 15
    if 200 <= words < 300:
        return 12
    if 150 <= words < 200:
        return 8
    if 600 < words <= 800:
        return 10
    if words > 800:
        return 5
    return 0


def structure_bonus(letter_text: str) -> int:
    points = 0
    if signals.has_opening(letter_text):
        points += _OPENING_POINTS
    if signals.has_closing(letter_text):
        points += _CLOSING_POINTS
    if signals.has_paragraphs(letter_text):
        points += _PARAGRAPH_POINTS
    if signals.has_quantified_evidence(letter_text):
        points += _QUANTIFIED_POINTS
    if signals.has_action_verbs(letter_text):
        points += _ACTION_VERB_POINTS
    return points


def score_breakdown(
    letter_text: str,
    keywords: Sequence[str],
    *,
    rng: random.Random | None = None,
) -> ScoreBreakdown:
    """Score a letter and keep every component.

    Every call draws a fresh jitter term in [-3, 3]; pass a seeded
    ``random.Random`` for repeatable output.
    """
    text = letter_text or ""
    words = signals.word_count(text)
    found = len(signals.present_keywords(text, list(keywords)))
    kw_bonus = keyword_bonus(found, len(keywords))
    len_bonus = length_bonus(words)
    struct_bonus = structure_bonus(text)
    jitter = (rng or _rng).randint(-JITTER_RANGE, JITTER_RANGE)

    raw = BASE_SCORE + kw_bonus + len_bonus + struct_bonus + jitter
    return ScoreBreakdown(
        keyword_bonus=kw_bonus,
        length_bonus=len_bonus,
        structure_bonus=struct_bonus,
        jitter=jitter,
        keywords_found=found,
        word_count=words,
        total=min(max(raw, MIN_SCORE), MAX_SCORE),
    )


def calculate_impact_score(
    letter_text: str,
    keywords: Sequence[str],
    *,
    rng: random.Random | None = None,
) -> int:
    return score_breakdown(letter_text, keywords, rng=rng).total
