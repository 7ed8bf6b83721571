from .catalog import CATALOG_TERMS, KEYWORD_CATALOG, STOP_WORDS
from .keywords import MAX_KEYWORDS, extract_keywords
from .scoring import ScoreBreakdown, calculate_impact_score, score_breakdown
from .suggestions import FALLBACK_SUGGESTION, refinement_candidates, suggest_refinement

__all__ = [
    "CATALOG_TERMS",
    "KEYWORD_CATALOG",
    "STOP_WORDS",
    "MAX_KEYWORDS",
    "extract_keywords",
    "ScoreBreakdown",
    "calculate_impact_score",
    "score_breakdown",
    "FALLBACK_SUGGESTION",
    "refinement_candidates",
    "suggest_refinement",
]
