"""Regex-detectable letter features shared by the scorer and the suggestion rules.

Patterns match anywhere in the text (no word boundaries), so "led" also fires
inside "called".
"""

from __future__ import annotations

import re

OPENING_RE = re.compile(r"dear|hello|greetings", re.IGNORECASE)
CLOSING_RE = re.compile(r"sincerely|regards|best|thank you", re.IGNORECASE)
QUANTIFIED_RE = re.compile(
    r"\$|%|[0-9]+\s*(years?|months?|projects?|clients?|customers?|percent)",
    re.IGNORECASE,
)

SCORING_ACTION_VERBS = (
    "led", "managed", "developed", "created", "implemented",
    "increased", "reduced", "improved", "achieved", "delivered",
)
# The suggestion rule checks a shorter list than the scorer.
SUGGESTION_ACTION_VERBS = SCORING_ACTION_VERBS[:8]

SCORING_ACTION_RE = re.compile("|".join(SCORING_ACTION_VERBS), re.IGNORECASE)
SUGGESTION_ACTION_RE = re.compile("|".join(SUGGESTION_ACTION_VERBS), re.IGNORECASE)

PARAGRAPH_SEPARATOR = "\n\n"
MIN_PARAGRAPHS = 3


def word_count(text: str) -> int:
    return len(text.split())


def has_opening(text: str) -> bool:
    return OPENING_RE.search(text) is not None


def has_closing(text: str) -> bool:
    return CLOSING_RE.search(text) is not None


def has_paragraphs(text: str) -> bool:
    return len(text.split(PARAGRAPH_SEPARATOR)) >= MIN_PARAGRAPHS


def has_quantified_evidence(text: str) -> bool:
    return QUANTIFIED_RE.search(text) is not None


def has_action_verbs(text: str, *, pattern: re.Pattern[str] = SCORING_ACTION_RE) -> bool:
    return pattern.search(text) is not None


def present_keywords(text: str, keywords: list[str]) -> list[str]:
    lowered = text.lower()
    return [kw for kw in keywords if kw.lower() in lowered]


def missing_keywords(text: str, keywords: list[str]) -> list[str]:
    lowered = text.lower()
    return [kw for kw in keywords if kw.lower() not in lowered]
