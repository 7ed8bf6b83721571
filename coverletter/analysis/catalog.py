from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

KEYWORD_CATALOG: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "technical": (
            "javascript", "python", "java", "react", "angular", "vue", "node.js", "typescript",
            "html", "css", "sql", "mongodb", "postgresql", "aws", "azure", "docker", "kubernetes",
            "git", "api", "rest", "graphql", "microservices", "devops", "ci/cd", "agile", "scrum",
        ),
        "business": (
            "marketing", "sales", "business development", "strategy", "analytics", "roi",
            "revenue", "growth", "customer acquisition", "retention", "conversion", "crm",
            "b2b", "b2c", "saas", "digital marketing", "seo", "sem", "social media",
        ),
        "soft": (
            "leadership", "communication", "collaboration", "teamwork", "problem solving",
            "critical thinking", "creativity", "adaptability", "time management", "organization",
            "presentation", "negotiation", "mentoring", "coaching", "cross-functional",
        ),
        "general": (
            "management", "development", "analysis", "research", "design", "implementation",
            "optimization", "innovation", "quality", "efficiency", "productivity", "project",
            "customer", "client", "stakeholder", "experience", "skills", "knowledge", "expertise",
        ),
    }
)

# Flattened in category order; extraction preserves this order.
CATALOG_TERMS: tuple[str, ...] = tuple(
    term for terms in KEYWORD_CATALOG.values() for term in terms
)

STOP_WORDS = frozenset(
    {
        "this", "that", "with", "from", "they", "have", "will", "been", "were", "their",
        "what", "your", "when", "where", "more", "some", "like", "into", "time", "very",
        "only", "know", "just", "first", "also", "after", "back", "other", "many", "than",
        "then", "them", "these", "most", "over", "such", "about", "would", "there", "could",
        "should",
    }
)
