"""Corpus lookup handlers.

Handles:
- get_citation: Verify a (path, line range) and return its exact text
- get_example: Fetch an example by base name, or any file by path
- files_with_keyword: Files mentioning a vocabulary keyword
- stats: Index counts by classification
"""

from ...models import (
    FilesWithKeywordParams,
    GetCitationParams,
    GetExampleParams,
    IndexedFileInfo,
    StatsParams,
    StatsResult,
    ToolResult,
)
from ..core.document import IndexedFile
from .base import HandlerContext, citation_info, count_tokens, error_result


def file_info(file: IndexedFile, include_content: bool = False) -> IndexedFileInfo:
    meta = file.metadata
    return IndexedFileInfo(
        path=file.relative_path,
        file_type=file.file_type,
        line_count=file.line_count,
        title=meta.title,
        short_title=meta.short_title,
        documentation=meta.documentation,
        example_start=meta.example_start,
        example_end=meta.example_end,
        content=file.content if include_content else None,
    )


async def handle_get_citation(
    params: GetCitationParams,
    ctx: HandlerContext,
) -> ToolResult:
    """Re-derive a citation from the live file table.

    Returns:
        ToolResult with the citation, or ``valid: False`` and an error
    """
    citation = ctx.index.create_citation(
        params.path, params.line_start, params.line_end, params.reason
    )
    if citation is None:
        if ctx.index.get_file(params.path) is None:
            return error_result(f"File not found: {params.path}", valid=False)
        return error_result(
            f"Invalid line range {params.line_start}-{params.line_end} for {params.path}",
            valid=False,
        )

    data = {"valid": True, "citation": citation_info(citation).model_dump(mode="json")}
    return ToolResult(data=data, input_tokens=0, output_tokens=count_tokens(citation.excerpt))


async def handle_get_example(
    params: GetExampleParams,
    ctx: HandlerContext,
) -> ToolResult:
    """Fetch a file with its content, by example name or by relative path."""
    if params.name:
        file = ctx.index.get_example_by_name(params.name)
        missing = f"Example not found: {params.name}"
    else:
        file = ctx.index.get_file(params.path)
        missing = f"File not found: {params.path}"

    if file is None:
        return error_result(missing)

    info = file_info(file, include_content=True)
    return ToolResult(
        data=info.model_dump(mode="json"),
        input_tokens=0,
        output_tokens=count_tokens(file.content),
    )


async def handle_files_with_keyword(
    params: FilesWithKeywordParams,
    ctx: HandlerContext,
) -> ToolResult:
    files = ctx.index.files_with_keyword(params.keyword)
    data = {
        "keyword": params.keyword.lower(),
        "files": [file_info(f).model_dump(mode="json") for f in files],
        "count": len(files),
    }
    return ToolResult(data=data, input_tokens=0, output_tokens=count_tokens(str(data)))


async def handle_stats(
    params: StatsParams,
    ctx: HandlerContext,
) -> ToolResult:
    stats = ctx.index.get_stats()
    result = StatsResult(
        total_files=stats.total_files,
        examples=stats.examples,
        docs=stats.docs,
        templates=stats.templates,
        others=stats.others,
        keyword_count=stats.keyword_count,
    )
    return ToolResult(data=result.model_dump(), input_tokens=0, output_tokens=0)
