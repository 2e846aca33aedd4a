"""Enumeration types for the interview sources index."""

from enum import StrEnum


class ToolName(StrEnum):
    """Tools exposed over the JSON-RPC dispatcher."""

    SEARCH_SOURCES = "search_sources"
    GET_AUTHORITATIVE_SNIPPETS = "get_authoritative_snippets"
    EXPLAIN_TERM = "explain_term"
    GET_CITATION = "get_citation"
    GET_EXAMPLE = "get_example"
    FILES_WITH_KEYWORD = "files_with_keyword"
    STATS = "stats"


class FileType(StrEnum):
    """Role of a file in the corpus, fixed by the root it was found under."""

    EXAMPLE = "example"
    DOC = "doc"
    TEMPLATE = "template"
    OTHER = "other"


class SearchScope(StrEnum):
    """Classification filter applied to search candidates."""

    DOCS = "docs"
    EXAMPLES = "examples"
    DOCS_AND_EXAMPLES = "docs_and_examples"
    ALL = "all"

    def includes(self, file_type: FileType) -> bool:
        if self is SearchScope.DOCS:
            return file_type == FileType.DOC
        if self is SearchScope.EXAMPLES:
            return file_type == FileType.EXAMPLE
        if self is SearchScope.DOCS_AND_EXAMPLES:
            return file_type in (FileType.DOC, FileType.EXAMPLE)
        return True
