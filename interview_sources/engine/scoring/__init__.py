"""Scoring engine for corpus search.

This package provides the scoring pieces used by the query engine:
- Line scoring with field-declaration and word-boundary boosts
- Glob filtering with a compiled-pattern cache
- The inverted keyword index over a fixed vocabulary

Usage:
    from interview_sources.engine.scoring import (
        build_keyword_index,
        matches_globs,
        score_line,
        tokenize_query,
    )
"""

from .constants import (
    ADVANCED_TOPICS,
    CONTEXT_LINES_AFTER,
    CONTEXT_LINES_BEFORE,
    DEDUP_BUCKET_SIZE,
    DEFAULT_MAX_RESULTS,
    KEYWORD_VOCABULARY,
    LOW_RELEVANCE_SCORE,
    MAX_RESULTS_LIMIT,
    MAX_SUGGESTED_QUERIES,
    RELATED_TERMS,
    SNIPPET_QUERY_SUFFIXES,
)
from .globs import compile_glob, glob_to_regex, matches_globs
from .keyword_index import build_keyword_index, compile_keyword_pattern
from .line_scorer import score_line, score_terms, title_bonus, tokenize_query

__all__ = [
    # Constants
    "ADVANCED_TOPICS",
    "CONTEXT_LINES_AFTER",
    "CONTEXT_LINES_BEFORE",
    "DEDUP_BUCKET_SIZE",
    "DEFAULT_MAX_RESULTS",
    "KEYWORD_VOCABULARY",
    "LOW_RELEVANCE_SCORE",
    "MAX_RESULTS_LIMIT",
    "MAX_SUGGESTED_QUERIES",
    "RELATED_TERMS",
    "SNIPPET_QUERY_SUFFIXES",
    # Globs
    "compile_glob",
    "glob_to_regex",
    "matches_globs",
    # Keyword index
    "build_keyword_index",
    "compile_keyword_pattern",
    # Line scoring
    "score_line",
    "score_terms",
    "title_bonus",
    "tokenize_query",
]
