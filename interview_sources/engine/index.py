"""The corpus index: built once by ``initialize``, read-only afterwards.

CorpusIndex is a frozen dataclass whose tables are exposed through
read-only mapping views, so every consumer (query engine, citation
factory, stats, tool handlers) can share one instance without locking.
"""

import logging
import os
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from ..exceptions import CorpusRootNotFoundError
from ..models.enums import FileType, SearchScope
from .citations import create_citation, get_snippet
from .core.document import Citation, CorpusRoot, IndexedFile, IndexStats, SearchResult
from .core.ingest import DEFAULT_EXTENSIONS, ingest_roots
from .scoring.constants import DEFAULT_MAX_RESULTS
from .scoring.keyword_index import build_keyword_index
from .search import search_files

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CorpusIndex:
    """Immutable index of the reference corpus.

    Attributes:
        base_path: Absolute corpus base; relative paths are relative to it
        files: Relative path -> file, in ingestion order
        examples_by_name: Example base name -> file
        keyword_index: Lowercased keyword -> relative paths containing it
    """

    base_path: str
    files: Mapping[str, IndexedFile]
    examples_by_name: Mapping[str, IndexedFile]
    keyword_index: Mapping[str, frozenset[str]]

    # ============ QUERIES ============

    def search(
        self,
        query: str,
        max_results: int = DEFAULT_MAX_RESULTS,
        scope: SearchScope = SearchScope.DOCS_AND_EXAMPLES,
        file_globs: Sequence[str] | None = None,
    ) -> list[SearchResult]:
        return search_files(
            self.files.values(),
            query,
            max_results=max_results,
            scope=scope,
            file_globs=file_globs,
        )

    def get_file(self, relative_path: str) -> IndexedFile | None:
        return self.files.get(relative_path)

    def get_file_by_absolute_path(self, absolute_path: str) -> IndexedFile | None:
        relative_path = Path(os.path.relpath(absolute_path, self.base_path)).as_posix()
        return self.files.get(relative_path)

    def get_example_by_name(self, name: str) -> IndexedFile | None:
        return self.examples_by_name.get(name)

    def files_with_keyword(self, keyword: str) -> list[IndexedFile]:
        """Files whose content contains ``keyword`` (empty if unknown)."""
        paths = self.keyword_index.get(keyword.lower())
        if not paths:
            return []
        return [file for path, file in self.files.items() if path in paths]

    def all_examples(self) -> list[IndexedFile]:
        return [f for f in self.files.values() if f.file_type == FileType.EXAMPLE]

    def all_files(self) -> list[IndexedFile]:
        return list(self.files.values())

    # ============ CITATIONS ============

    def get_snippet(self, relative_path: str, line_start: int, line_end: int) -> str | None:
        return get_snippet(self.files, relative_path, line_start, line_end)

    def create_citation(
        self,
        relative_path: str,
        line_start: int,
        line_end: int,
        reason: str | None = None,
    ) -> Citation | None:
        return create_citation(self.files, relative_path, line_start, line_end, reason)

    # ============ STATS ============

    def get_stats(self) -> IndexStats:
        counts = {file_type: 0 for file_type in FileType}
        for file in self.files.values():
            counts[file.file_type] += 1
        return IndexStats(
            total_files=len(self.files),
            examples=counts[FileType.EXAMPLE],
            docs=counts[FileType.DOC],
            templates=counts[FileType.TEMPLATE],
            others=counts[FileType.OTHER],
            keyword_count=len(self.keyword_index),
        )


def initialize(
    base_path: str | Path,
    roots: Iterable[CorpusRoot] | None = None,
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
) -> CorpusIndex:
    """Ingest the corpus, extract metadata and build the keyword index.

    Args:
        base_path: Corpus base directory (must exist)
        roots: Sub-roots to ingest; defaults to the configured roots
        extensions: Accepted file extensions

    Returns:
        The completed, read-only CorpusIndex

    Raises:
        CorpusRootNotFoundError: If ``base_path`` is not a directory
    """
    base = Path(base_path).resolve()
    if not base.is_dir():
        raise CorpusRootNotFoundError(str(base))

    if roots is None:
        from ..config import settings

        roots = settings.corpus_roots

    logger.info(f"Initializing index from: {base}")
    ingested = ingest_roots(base, roots, tuple(extensions))
    keyword_index = build_keyword_index(ingested.files.values())

    index = CorpusIndex(
        base_path=str(base),
        files=MappingProxyType(dict(ingested.files)),
        examples_by_name=MappingProxyType(dict(ingested.examples_by_name)),
        keyword_index=keyword_index,
    )

    stats = index.get_stats()
    logger.info(
        f"Index initialized: {stats.total_files} files, {stats.examples} examples, "
        f"{stats.docs} docs, {stats.templates} templates, {stats.keyword_count} keywords"
    )
    if ingested.skipped:
        logger.warning(f"{ingested.skipped} files were skipped during ingestion")
    return index
