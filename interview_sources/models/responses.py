"""Response models returned by the tool handlers."""

from typing import Any

from pydantic import BaseModel, Field

from .enums import FileType


class ToolResult(BaseModel):
    """Result of any tool execution, with token accounting."""

    data: dict[str, Any] = Field(default_factory=dict, description="Tool output payload")
    input_tokens: int = Field(default=0, ge=0, description="Tokens consumed from the input")
    output_tokens: int = Field(default=0, ge=0, description="Tokens in the returned payload")


class CitationInfo(BaseModel):
    """A verified (path, line range, excerpt) reference."""

    path: str = Field(..., description="File path relative to the corpus root")
    line_start: int = Field(..., ge=1, description="First line (1-indexed)")
    line_end: int = Field(..., ge=1, description="Last line (1-indexed, inclusive)")
    excerpt: str = Field(..., description="Exact text of the cited lines")
    reason: str | None = Field(default=None, description="Justification for the citation")


class SearchHit(BaseModel):
    """One windowed search result."""

    path: str = Field(..., description="File path relative to the corpus root")
    line_start: int = Field(..., ge=1, description="Window start line (1-indexed)")
    line_end: int = Field(..., ge=1, description="Window end line (1-indexed, inclusive)")
    excerpt: str = Field(..., description="Window text")
    score: float = Field(..., ge=0.0, description="Relevance score")
    file_type: FileType = Field(..., description="Classification of the source file")


class SearchSourcesResult(BaseModel):
    """Result of search_sources tool."""

    results: list[SearchHit] = Field(default_factory=list, description="Ranked hits")
    suggested_next_queries: list[str] = Field(
        default_factory=list, description="Follow-up queries built from related terms"
    )
    notes: list[str] = Field(default_factory=list, description="Hints about result quality")


class AuthoritativeSnippet(BaseModel):
    """A snippet chosen as an authoritative source for a topic."""

    path: str = Field(..., description="File path relative to the corpus root")
    line_start: int = Field(..., ge=1, description="Start line (1-indexed)")
    line_end: int = Field(..., ge=1, description="End line (1-indexed, inclusive)")
    excerpt: str = Field(..., description="Snippet text")
    why_this_matters: str = Field(..., description="Short reason this snippet is relevant")
    token_count: int = Field(default=0, ge=0, description="Token count of the excerpt")


class AuthoritativeSnippetsResult(BaseModel):
    """Result of get_authoritative_snippets tool."""

    snippets: list[AuthoritativeSnippet] = Field(default_factory=list)
    coverage_gaps: list[str] = Field(default_factory=list)


class TermExample(BaseModel):
    """A usage example backing a term explanation."""

    snippet: str = Field(..., description="Example text")
    citations: list[CitationInfo] = Field(default_factory=list)


class ExplainTermResult(BaseModel):
    """Result of explain_term tool."""

    term: str = Field(..., description="Term that was explained")
    explanation: str = Field(..., description="Explanation text")
    confirmed: bool = Field(..., description="Whether the term was found in the corpus")
    citations: list[CitationInfo] = Field(default_factory=list)
    examples: list[TermExample] = Field(default_factory=list)


class IndexedFileInfo(BaseModel):
    """Summary of an indexed file."""

    path: str = Field(..., description="File path relative to the corpus root")
    file_type: FileType = Field(..., description="Classification")
    line_count: int = Field(..., ge=0, description="Number of lines")
    title: str | None = Field(default=None, description="Metadata title")
    short_title: str | None = Field(default=None, description="Metadata short title")
    documentation: str | None = Field(default=None, description="Documentation link")
    example_start: int | None = Field(default=None, description="Example range start marker")
    example_end: int | None = Field(default=None, description="Example range end marker")
    content: str | None = Field(default=None, description="Full content (when requested)")


class StatsResult(BaseModel):
    """Result of stats tool."""

    total_files: int = Field(..., ge=0)
    examples: int = Field(..., ge=0)
    docs: int = Field(..., ge=0)
    templates: int = Field(..., ge=0)
    others: int = Field(..., ge=0)
    keyword_count: int = Field(..., ge=0)
