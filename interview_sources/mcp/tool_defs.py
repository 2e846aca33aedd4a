"""Tool definitions returned by the tools/list method.

Input schemas are generated from the Pydantic *Params models so the
advertised schema and the validation applied in tools/call cannot drift.
"""

from pydantic import BaseModel

from ..models import (
    ExplainTermParams,
    FilesWithKeywordParams,
    GetAuthoritativeSnippetsParams,
    GetCitationParams,
    GetExampleParams,
    SearchSourcesParams,
    StatsParams,
    ToolName,
)

# Mapping of tool name -> params model used to validate its arguments
TOOL_PARAMS: dict[ToolName, type[BaseModel]] = {
    ToolName.SEARCH_SOURCES: SearchSourcesParams,
    ToolName.GET_AUTHORITATIVE_SNIPPETS: GetAuthoritativeSnippetsParams,
    ToolName.EXPLAIN_TERM: ExplainTermParams,
    ToolName.GET_CITATION: GetCitationParams,
    ToolName.GET_EXAMPLE: GetExampleParams,
    ToolName.FILES_WITH_KEYWORD: FilesWithKeywordParams,
    ToolName.STATS: StatsParams,
}

TOOL_DESCRIPTIONS: dict[ToolName, str] = {
    ToolName.SEARCH_SOURCES: (
        "Find relevant passages in docassemble docs and examples. "
        "Returns file paths, line ranges and excerpts for citation."
    ),
    ToolName.GET_AUTHORITATIVE_SNIPPETS: (
        "Get citation-backed snippets for a topic, at most one per file. "
        "Runs several searches internally and dedupes."
    ),
    ToolName.EXPLAIN_TERM: (
        "Explain a YAML keyword, block or object class with citations and examples. "
        "Terms not found in the sources are reported as unconfirmed."
    ),
    ToolName.GET_CITATION: (
        "Verify a file path and line range against the indexed sources and return the exact text."
    ),
    ToolName.GET_EXAMPLE: "Load an example interview by name (or any indexed file by path).",
    ToolName.FILES_WITH_KEYWORD: "List indexed files that mention a known keyword.",
    ToolName.STATS: "Index statistics: file counts by classification and keyword count.",
}


def _input_schema(model: type[BaseModel]) -> dict:
    schema = model.model_json_schema()
    schema.pop("title", None)
    schema.setdefault("type", "object")
    schema.setdefault("properties", {})
    return schema


TOOL_DEFINITIONS: list[dict] = [
    {
        "name": name.value,
        "description": TOOL_DESCRIPTIONS[name],
        "inputSchema": _input_schema(model),
    }
    for name, model in TOOL_PARAMS.items()
]
