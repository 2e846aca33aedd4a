"""Query engine: scored, windowed line search over indexed files.

Every line of every candidate file is scored independently. Each hit is
widened into an excerpt window, near-adjacent windows from the same file
collapse to their best representative, and the survivors are ranked.
"""

import logging
from collections.abc import Iterable, Sequence

from ..models.enums import SearchScope
from .core.document import IndexedFile, SearchResult
from .scoring.constants import (
    CONTEXT_LINES_AFTER,
    CONTEXT_LINES_BEFORE,
    DEDUP_BUCKET_SIZE,
    DEFAULT_MAX_RESULTS,
)
from .scoring.globs import matches_globs
from .scoring.line_scorer import score_line, tokenize_query

logger = logging.getLogger(__name__)


def filter_candidates(
    files: Iterable[IndexedFile],
    scope: SearchScope,
    file_globs: Sequence[str] | None = None,
) -> list[IndexedFile]:
    """Files allowed by the scope and, if given, by at least one glob."""
    candidates = []
    for file in files:
        if not scope.includes(file.file_type):
            continue
        if file_globs and not matches_globs(file.relative_path, file_globs):
            continue
        candidates.append(file)
    return candidates


def build_window(file: IndexedFile, line_index: int, score: float) -> SearchResult:
    """Excerpt around a 0-indexed hit line, clamped to the file."""
    start = max(0, line_index - CONTEXT_LINES_BEFORE)
    end = min(file.line_count - 1, line_index + CONTEXT_LINES_AFTER)
    return SearchResult(
        path=file.path,
        relative_path=file.relative_path,
        file_type=file.file_type,
        line_start=start + 1,
        line_end=end + 1,
        excerpt="\n".join(file.lines[start : end + 1]),
        score=score,
    )


def find_matches(file: IndexedFile, terms: list[str]) -> list[SearchResult]:
    """One windowed result per line with a non-zero score, in line order."""
    title = file.metadata.title
    results = []
    for i, line in enumerate(file.lines):
        score = score_line(line, terms, title)
        if score > 0:
            results.append(build_window(file, i, score))
    return results


def rank(results: Iterable[SearchResult]) -> list[SearchResult]:
    """Sort by score descending; ties keep encounter order."""
    return sorted(results, key=lambda r: r.score, reverse=True)


def deduplicate(results: Iterable[SearchResult]) -> list[SearchResult]:
    """Keep the best hit per (file, line_start // DEDUP_BUCKET_SIZE) bucket.

    Returns:
        Surviving results, ranked
    """
    seen: set[tuple[str, int]] = set()
    unique: list[SearchResult] = []
    for result in rank(results):
        key = (result.relative_path, result.line_start // DEDUP_BUCKET_SIZE)
        if key in seen:
            continue
        seen.add(key)
        unique.append(result)
    return unique


def search_files(
    files: Iterable[IndexedFile],
    query: str,
    max_results: int = DEFAULT_MAX_RESULTS,
    scope: SearchScope = SearchScope.DOCS_AND_EXAMPLES,
    file_globs: Sequence[str] | None = None,
) -> list[SearchResult]:
    """Top ``max_results`` windowed hits for ``query``.

    Args:
        files: Files in encounter order
        query: Free-text query; whitespace separated terms
        max_results: Number of results to keep
        scope: Classification filter
        file_globs: Optional glob patterns on relative paths

    Returns:
        Ranked results; empty for an empty query or no matches
    """
    terms = tokenize_query(query)
    if not terms:
        return []

    hits: list[SearchResult] = []
    for file in filter_candidates(files, SearchScope(scope), file_globs):
        hits.extend(find_matches(file, terms))

    results = rank(deduplicate(hits))[:max_results]
    logger.debug(f"Search '{query}' ({scope}): {len(hits)} hits, {len(results)} returned")
    return results
