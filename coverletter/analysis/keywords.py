from __future__ import annotations

import re
from collections import Counter

from .catalog import CATALOG_TERMS, STOP_WORDS

MAX_KEYWORDS = 15
MAX_FREQUENT_WORDS = 10
MIN_WORD_FREQUENCY = 2

_WORD_RE = re.compile(r"\b[a-z]{4,}\b", re.ASCII)


def catalog_matches(text: str) -> list[str]:
    lowered = (text or "").lower()
    return [term for term in CATALOG_TERMS if term.lower() in lowered]


def frequent_words(text: str, limit: int = MAX_FREQUENT_WORDS) -> list[str]:
    """Words of four or more letters seen at least twice, most frequent first.

    Ties keep first-seen order (Counter preserves insertion order and sorted is stable).
    """
    lowered = (text or "").lower()
    counts = Counter(word for word in _WORD_RE.findall(lowered) if word not in STOP_WORDS)
    ranked = sorted(
        ((word, count) for word, count in counts.items() if count >= MIN_WORD_FREQUENCY),
        key=lambda item: item[1],
        reverse=True,
    )
    return [word for word, _ in ranked[:limit]]


def extract_keywords(source_text: str) -> list[str]:
    if not source_text:
        return []

    keywords: list[str] = []
    seen: set[str] = set()
    for candidate in catalog_matches(source_text) + frequent_words(source_text):
        key = candidate.lower()
        if key in seen:
            continue
        seen.add(key)
        keywords.append(candidate)
    return keywords[:MAX_KEYWORDS]
