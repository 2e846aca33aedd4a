"""Request models (Pydantic *Params classes) for the tool handlers."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from .enums import SearchScope, ToolName


class ToolCallRequest(BaseModel):
    """A tools/call request after JSON-RPC unwrapping."""

    name: ToolName = Field(..., description="The tool to execute")
    arguments: dict[str, Any] = Field(default_factory=dict, description="Tool arguments")


class SearchSourcesParams(BaseModel):
    """Parameters for search_sources tool."""

    query: str = Field(..., description="Search query string")
    max_results: int = Field(
        default=8,
        ge=1,
        le=25,
        description="Maximum number of results to return",
    )
    scope: SearchScope = Field(
        default=SearchScope.DOCS_AND_EXAMPLES,
        description="Classification filter for candidate files",
    )
    file_globs: list[str] | None = Field(
        default=None,
        description="Optional glob patterns matched against relative paths",
    )


class GetAuthoritativeSnippetsParams(BaseModel):
    """Parameters for get_authoritative_snippets tool."""

    topic: str = Field(..., description="Topic or term to find snippets for")
    desired_count: int = Field(default=5, ge=1, le=12, description="Desired number of snippets")


class ExplainTermParams(BaseModel):
    """Parameters for explain_term tool."""

    term: str = Field(..., min_length=1, description="Term to explain")


class GetCitationParams(BaseModel):
    """Parameters for get_citation tool."""

    path: str = Field(..., description="File path relative to the corpus root")
    line_start: int = Field(..., description="First line (1-indexed)")
    line_end: int = Field(..., description="Last line (1-indexed, inclusive)")
    reason: str | None = Field(default=None, description="Why this citation supports a claim")


class GetExampleParams(BaseModel):
    """Parameters for get_example tool."""

    name: str | None = Field(default=None, description="Example base name without extension")
    path: str | None = Field(default=None, description="Relative path of any indexed file")

    @model_validator(mode="after")
    def _require_name_or_path(self) -> "GetExampleParams":
        if not self.name and not self.path:
            raise ValueError("either 'name' or 'path' is required")
        return self


class FilesWithKeywordParams(BaseModel):
    """Parameters for files_with_keyword tool."""

    keyword: str = Field(..., description="Vocabulary keyword (case-insensitive)")


class StatsParams(BaseModel):
    """Parameters for stats tool (none)."""
