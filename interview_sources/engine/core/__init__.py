"""Engine core module.

This module contains the data structures and build-time pieces of the index:
- Document data structures (IndexedFile, SearchResult, Citation)
- File ingestion
- Metadata block extraction
"""

from .document import (
    Citation,
    CorpusRoot,
    FileMetadata,
    IndexedFile,
    IndexStats,
    SearchResult,
)
from .ingest import (
    DEFAULT_EXTENSIONS,
    IngestResult,
    compute_line_offsets,
    ingest_directory,
    ingest_roots,
    iter_corpus_files,
    load_file,
)
from .metadata import extract_metadata, find_metadata_block

__all__ = [
    # Document structures
    "Citation",
    "CorpusRoot",
    "FileMetadata",
    "IndexedFile",
    "IndexStats",
    "SearchResult",
    # Ingestion
    "DEFAULT_EXTENSIONS",
    "IngestResult",
    "compute_line_offsets",
    "ingest_directory",
    "ingest_roots",
    "iter_corpus_files",
    "load_file",
    # Metadata
    "extract_metadata",
    "find_metadata_block",
]
