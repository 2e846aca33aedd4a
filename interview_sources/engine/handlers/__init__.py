"""Tool handlers for the corpus index.

This package contains tool handlers organized by domain:
- search: search_sources, get_authoritative_snippets
- explain: explain_term
- corpus: get_citation, get_example, files_with_keyword, stats

Each handler is a standalone async function that takes:
- params: the validated Pydantic *Params model for the tool
- ctx: HandlerContext - Shared, read-only index

And returns:
- ToolResult with data, input_tokens, output_tokens
"""

from ...models import ToolName
from .base import HandlerContext, HandlerFunc, count_tokens
from .corpus import (
    handle_files_with_keyword,
    handle_get_citation,
    handle_get_example,
    handle_stats,
)
from .explain import handle_explain_term
from .search import handle_get_authoritative_snippets, handle_search_sources

HANDLERS: dict[ToolName, HandlerFunc] = {
    ToolName.SEARCH_SOURCES: handle_search_sources,
    ToolName.GET_AUTHORITATIVE_SNIPPETS: handle_get_authoritative_snippets,
    ToolName.EXPLAIN_TERM: handle_explain_term,
    ToolName.GET_CITATION: handle_get_citation,
    ToolName.GET_EXAMPLE: handle_get_example,
    ToolName.FILES_WITH_KEYWORD: handle_files_with_keyword,
    ToolName.STATS: handle_stats,
}

__all__ = [
    # Base
    "HandlerContext",
    "HandlerFunc",
    "count_tokens",
    "HANDLERS",
    # Search handlers
    "handle_search_sources",
    "handle_get_authoritative_snippets",
    # Explain handlers
    "handle_explain_term",
    # Corpus handlers
    "handle_get_citation",
    "handle_get_example",
    "handle_files_with_keyword",
    "handle_stats",
]
