"""Pydantic models for the interview sources tool layer.

    from interview_sources.models.enums import FileType, SearchScope
    from interview_sources.models.responses import SearchSourcesResult
"""

# ============ ENUMS ============
from .enums import FileType, SearchScope, ToolName

# ============ REQUEST MODELS ============
from .requests import (
    ExplainTermParams,
    FilesWithKeywordParams,
    GetAuthoritativeSnippetsParams,
    GetCitationParams,
    GetExampleParams,
    SearchSourcesParams,
    StatsParams,
    ToolCallRequest,
)

# ============ RESPONSE MODELS ============
from .responses import (
    AuthoritativeSnippet,
    AuthoritativeSnippetsResult,
    CitationInfo,
    ExplainTermResult,
    IndexedFileInfo,
    SearchHit,
    SearchSourcesResult,
    StatsResult,
    TermExample,
    ToolResult,
)

__all__ = [
    # Enums
    "FileType",
    "SearchScope",
    "ToolName",
    # Request models
    "ExplainTermParams",
    "FilesWithKeywordParams",
    "GetAuthoritativeSnippetsParams",
    "GetCitationParams",
    "GetExampleParams",
    "SearchSourcesParams",
    "StatsParams",
    "ToolCallRequest",
    # Response models
    "AuthoritativeSnippet",
    "AuthoritativeSnippetsResult",
    "CitationInfo",
    "ExplainTermResult",
    "IndexedFileInfo",
    "SearchHit",
    "SearchSourcesResult",
    "StatsResult",
    "TermExample",
    "ToolResult",
]
