"""Document data structures for the corpus index.

All structures are frozen: once the index is built nothing can be
reassigned, and line sequences are stored as tuples.
"""

from dataclasses import dataclass, field

from ...models.enums import FileType


@dataclass(frozen=True)
class CorpusRoot:
    """A directory to ingest and the classification its files receive.

    Attributes:
        path: Directory path, relative to the corpus base (or absolute)
        file_type: Classification assigned to every file found under it
    """

    path: str
    file_type: FileType


@dataclass(frozen=True)
class FileMetadata:
    """Fields parsed from a file's leading ``metadata:`` block.

    Every field is optional; an empty record is valid.
    """

    title: str | None = None
    short_title: str | None = None
    documentation: str | None = None
    example_start: int | None = None
    example_end: int | None = None


@dataclass(frozen=True)
class IndexedFile:
    """A single ingested file.

    Attributes:
        path: Absolute path on disk
        relative_path: Path relative to the corpus base ('/'-separated, unique)
        content: Full text
        lines: Content split on newlines (line N is ``lines[N - 1]``)
        line_offsets: Character offset of the start of each line
        file_type: Classification assigned at ingestion
        metadata: Parsed declaration block fields
    """

    path: str
    relative_path: str
    content: str
    lines: tuple[str, ...]
    line_offsets: tuple[int, ...]
    file_type: FileType
    metadata: FileMetadata = field(default_factory=FileMetadata)

    @property
    def line_count(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class SearchResult:
    """A windowed hit produced by a query. Never cached.

    Attributes:
        path: Absolute path of the source file
        relative_path: Path relative to the corpus base
        file_type: Classification of the source file
        line_start: First line of the window (1-indexed)
        line_end: Last line of the window (1-indexed, inclusive)
        excerpt: Window text
        score: Relevance score
    """

    path: str
    relative_path: str
    file_type: FileType
    line_start: int
    line_end: int
    excerpt: str
    score: float


@dataclass(frozen=True)
class Citation:
    """A reference re-derived from the live file table."""

    path: str
    line_start: int
    line_end: int
    excerpt: str
    reason: str | None = None


@dataclass(frozen=True)
class IndexStats:
    total_files: int
    examples: int
    docs: int
    templates: int
    others: int
    keyword_count: int
