from __future__ import annotations

import random
from typing import Sequence

from . import signals

LOW_SCORE_THRESHOLD = 70
SHORT_LETTER_WORDS = 200
MISSING_KEYWORDS_SHOWN = 3

SUGGEST_ACHIEVEMENTS = "Consider adding more specific achievements with quantifiable results"
SUGGEST_EXPAND = "Expand your letter with more detailed examples and explanations"
SUGGEST_METRICS = "Include specific metrics or numbers to strengthen your achievements"
SUGGEST_ACTION_VERBS = "Use more action verbs to make your accomplishments stand out"
SUGGEST_KEY_TERMS = "Try incorporating more key terms from the job description: {terms}"
FALLBACK_SUGGESTION = (
    "Your cover letter looks strong! Consider personalizing it further for the specific company."
)

_rng = random.Random()


def refinement_candidates(
    letter_text: str,
    keywords: Sequence[str],
    impact_score: int,
) -> list[str]:
    """Every suggestion whose rule fires, in rule order."""
    text = letter_text or ""
    candidates: list[str] = []

    if impact_score < LOW_SCORE_THRESHOLD:
        candidates.append(SUGGEST_ACHIEVEMENTS)
    if signals.word_count(text) < SHORT_LETTER_WORDS:
        candidates.append(SUGGEST_EXPAND)
    if not signals.has_quantified_evidence(text):
        candidates.append(SUGGEST_METRICS)
    if not signals.has_action_verbs(text, pattern=signals.SUGGESTION_ACTION_RE):
        candidates.append(SUGGEST_ACTION_VERBS)

    if keywords:
        missing = signals.missing_keywords(text, list(keywords))
        if len(missing) > len(keywords) * 0.5:
            candidates.append(
                SUGGEST_KEY_TERMS.format(terms=", ".join(missing[:MISSING_KEYWORDS_SHOWN]))
            )
    return candidates


def suggest_refinement(
    letter_text: str,
    keywords: Sequence[str],
    impact_score: int,
    *,
    rng: random.Random | None = None,
) -> str:
    candidates = refinement_candidates(letter_text, keywords, impact_score)
    if not candidates:
        return FALLBACK_SUGGESTION
    return (rng or _rng).choice(candidates)
