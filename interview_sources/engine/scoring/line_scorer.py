"""Per-line relevance scoring.

Scoring factors for a single line:
- Each query term found as a substring: +10
- Line starts with "<term>:" (a field declaration): +20
- Term matches as a whole word: +5
- Coverage bonus: matched_terms / total_terms * 10, once per hit
- Each term found in the file's metadata title: +15, once per hit

Query terms are not deduplicated, so a repeated term counts every time.
"""

import re
from functools import lru_cache

from .constants import (
    COVERAGE_BONUS_MAX,
    FIELD_DECLARATION_BONUS,
    TERM_MATCH_SCORE,
    TITLE_TERM_BONUS,
    WORD_BOUNDARY_BONUS,
)


def tokenize_query(query: str) -> list[str]:
    """Lowercase the query and split on whitespace, dropping empty tokens."""
    return query.lower().split()


@lru_cache(maxsize=1024)
def _word_pattern(term: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(term)}\b", re.ASCII)


def score_terms(line_lower: str, terms: list[str]) -> tuple[float, int]:
    """Score term matches in one lowercased line.

    Returns:
        Tuple of (score, matched_term_count)
    """
    score = 0.0
    matched = 0
    for term in terms:
        if term not in line_lower:
            continue
        matched += 1
        score += TERM_MATCH_SCORE
        if line_lower.startswith(term + ":"):
            score += FIELD_DECLARATION_BONUS
        if _word_pattern(term).search(line_lower):
            score += WORD_BOUNDARY_BONUS
    return score, matched


def title_bonus(title: str | None, terms: list[str]) -> float:
    """Bonus for query terms appearing in the file's metadata title."""
    if not title:
        return 0.0
    title_lower = title.lower()
    return sum(TITLE_TERM_BONUS for term in terms if term in title_lower)


def score_line(line: str, terms: list[str], title: str | None = None) -> float:
    """Full score for a line; 0.0 when no term matches.

    Args:
        line: Raw line text
        terms: Tokenized query terms (non-empty)
        title: Metadata title of the file the line belongs to

    Returns:
        Relevance score for the line
    """
    if not terms:
        return 0.0
    score, matched = score_terms(line.lower(), terms)
    if matched == 0:
        return 0.0
    score += matched / len(terms) * COVERAGE_BONUS_MAX
    score += title_bonus(title, terms)
    return score
