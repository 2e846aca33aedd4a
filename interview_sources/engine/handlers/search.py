"""Search tool handlers.

Handles:
- search_sources: Ranked passages with suggested follow-up queries
- get_authoritative_snippets: One snippet per file for a topic, gathered
  from several phrasings of the same search
"""

import logging

from ...models import (
    AuthoritativeSnippet,
    AuthoritativeSnippetsResult,
    GetAuthoritativeSnippetsParams,
    SearchHit,
    SearchScope,
    SearchSourcesParams,
    SearchSourcesResult,
    ToolResult,
)
from ..scoring.constants import (
    ADVANCED_TOPICS,
    LOW_RELEVANCE_SCORE,
    MAX_RESULTS_LIMIT,
    MAX_SUGGESTED_QUERIES,
    RELATED_TERMS,
    SNIPPET_QUERY_SUFFIXES,
)
from .base import HandlerContext, count_tokens

logger = logging.getLogger(__name__)


def suggest_next_queries(query: str) -> list[str]:
    """Follow-up queries: the query as given plus one related term each."""
    terms = query.lower().split()
    suggestions: list[str] = []
    for term in terms:
        for related in RELATED_TERMS.get(term, ()):
            if related.lower() not in terms:
                suggestions.append(f"{query} {related}")
    return suggestions


async def handle_search_sources(
    params: SearchSourcesParams,
    ctx: HandlerContext,
) -> ToolResult:
    """Find relevant passages in the docs and examples.

    Returns:
        ToolResult with SearchSourcesResult data
    """
    results = ctx.index.search(
        params.query,
        max_results=params.max_results,
        scope=params.scope,
        file_globs=params.file_globs,
    )

    suggestions = suggest_next_queries(params.query)
    notes: list[str] = []

    if not results:
        notes.append("No results found. Try broader search terms or different scope.")
        terms = params.query.lower().split()
        suggestions.append(terms[0] if terms else "question")
    elif results[0].score < LOW_RELEVANCE_SCORE:
        notes.append("Results have low relevance scores. Consider refining your query.")

    output = SearchSourcesResult(
        results=[
            SearchHit(
                path=r.relative_path,
                line_start=r.line_start,
                line_end=r.line_end,
                excerpt=r.excerpt,
                score=r.score,
                file_type=r.file_type,
            )
            for r in results
        ],
        suggested_next_queries=suggestions[:MAX_SUGGESTED_QUERIES],
        notes=notes,
    )
    data = output.model_dump(mode="json")
    return ToolResult(
        data=data,
        input_tokens=count_tokens(params.query),
        output_tokens=count_tokens(str(data)),
    )


async def handle_get_authoritative_snippets(
    params: GetAuthoritativeSnippetsParams,
    ctx: HandlerContext,
) -> ToolResult:
    """Collect up to ``desired_count`` snippets, at most one per file.

    Searches the topic as given, then "<topic> example" and "<topic> usage",
    stopping as soon as enough distinct files have been found.
    """
    topic = params.topic
    snippets: list[AuthoritativeSnippet] = []
    seen_paths: set[str] = set()

    for suffix in SNIPPET_QUERY_SUFFIXES:
        results = ctx.index.search(
            f"{topic}{suffix}",
            max_results=min(params.desired_count * 2, MAX_RESULTS_LIMIT),
            scope=SearchScope.DOCS_AND_EXAMPLES,
        )
        for result in results:
            if result.relative_path in seen_paths:
                continue
            seen_paths.add(result.relative_path)

            file = ctx.index.get_file(result.relative_path)
            if file is not None and file.metadata.title:
                why = f"Example: {file.metadata.title}"
            else:
                why = f'Contains usage of "{topic}"'

            snippets.append(
                AuthoritativeSnippet(
                    path=result.relative_path,
                    line_start=result.line_start,
                    line_end=result.line_end,
                    excerpt=result.excerpt,
                    why_this_matters=why,
                    token_count=count_tokens(result.excerpt),
                )
            )
            if len(snippets) >= params.desired_count:
                break
        if len(snippets) >= params.desired_count:
            break

    coverage_gaps: list[str] = []
    if len(snippets) < params.desired_count:
        coverage_gaps.append(
            f'Only found {len(snippets)} snippets for "{topic}" '
            f"(requested {params.desired_count})"
        )

    topic_lower = topic.lower()
    for advanced in ADVANCED_TOPICS:
        if advanced in topic_lower:
            coverage_gaps.append(
                f'"{advanced}" may require additional configuration not covered in basic examples'
            )

    logger.debug(f"Authoritative snippets for '{topic}': {len(snippets)} found")
    data = AuthoritativeSnippetsResult(snippets=snippets, coverage_gaps=coverage_gaps).model_dump(
        mode="json"
    )
    return ToolResult(
        data=data,
        input_tokens=count_tokens(topic),
        output_tokens=sum(s.token_count for s in snippets),
    )
