"""Shared types and helpers for the tool handlers.

A handler is an async function of (validated params, HandlerContext) that
returns a ToolResult; lookup failures become error payloads, not exceptions.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Coroutine

from ...models import CitationInfo, ToolResult

if TYPE_CHECKING:
    from ..core.document import Citation
    from ..index import CorpusIndex


@dataclass(frozen=True)
class HandlerContext:
    """What every handler can see: the shared, read-only corpus index."""

    index: "CorpusIndex"


# Signature every entry in HANDLERS follows
HandlerFunc = Callable[
    [Any, HandlerContext],
    Coroutine[Any, Any, ToolResult],
]


def count_tokens(text: str) -> int:
    """Rough token estimate at ~4 characters per token (at least 1 for non-empty text)."""
    if not text:
        return 0
    return max(1, len(text) // 4)


def citation_info(citation: "Citation") -> CitationInfo:
    return CitationInfo(
        path=citation.path,
        line_start=citation.line_start,
        line_end=citation.line_end,
        excerpt=citation.excerpt,
        reason=citation.reason,
    )


def error_result(message: str, **extra: Any) -> ToolResult:
    """ToolResult for a failed lookup; the caller decides how to degrade."""
    return ToolResult(data={"error": message, **extra}, input_tokens=0, output_tokens=0)
