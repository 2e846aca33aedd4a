"""File ingestion for the corpus index.

Walks each configured root, reads every file with an accepted extension
and turns it into an IndexedFile. Missing roots and unreadable files are
logged and skipped so a partial corpus can still be served.
"""

import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from ...models.enums import FileType
from .document import CorpusRoot, IndexedFile
from .metadata import extract_metadata

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".yml", ".yaml", ".md")


@dataclass
class IngestResult:
    """Mutable accumulator used only while the index is being built.

    Attributes:
        files: Relative path -> file, in encounter order
        examples_by_name: Base name (no extension) -> example file
        skipped: Files dropped for read errors or duplicate relative paths
    """

    files: dict[str, IndexedFile] = field(default_factory=dict)
    examples_by_name: dict[str, IndexedFile] = field(default_factory=dict)
    skipped: int = 0


def compute_line_offsets(lines: Iterable[str]) -> tuple[int, ...]:
    """Character offset of each line start, assuming '\\n' separators."""
    offsets: list[int] = []
    offset = 0
    for line in lines:
        offsets.append(offset)
        offset += len(line) + 1
    return tuple(offsets)


def iter_corpus_files(directory: Path, extensions: tuple[str, ...]) -> Iterator[Path]:
    """Yield files under ``directory`` (any depth) with an accepted extension.

    Entries are visited in sorted order; symlinks are not followed.
    Extensions match case-sensitively.
    """
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.error(f"Cannot list directory {directory}: {e}")
        return

    for entry in entries:
        if entry.is_symlink():
            logger.debug(f"Skipping symlink {entry}")
            continue
        if entry.is_dir():
            yield from iter_corpus_files(entry, extensions)
        elif entry.is_file() and entry.name.endswith(extensions):
            yield entry


def load_file(file_path: Path, base_path: Path, file_type: FileType) -> IndexedFile:
    """Read a file and build its IndexedFile.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    content = file_path.read_text(encoding="utf-8")
    lines = tuple(content.split("\n"))
    relative_path = Path(os.path.relpath(file_path, base_path)).as_posix()

    return IndexedFile(
        path=str(file_path),
        relative_path=relative_path,
        content=content,
        lines=lines,
        line_offsets=compute_line_offsets(lines),
        file_type=file_type,
        metadata=extract_metadata(content),
    )


def ingest_directory(
    result: IngestResult,
    directory: Path,
    base_path: Path,
    file_type: FileType,
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
) -> int:
    """Ingest one root into ``result``.

    Returns:
        Number of files registered from this root
    """
    if not directory.is_dir():
        logger.warning(f"Directory not found: {directory}")
        return 0

    added = 0
    for file_path in iter_corpus_files(directory, extensions):
        try:
            indexed = load_file(file_path, base_path, file_type)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error indexing file {file_path}: {e}")
            result.skipped += 1
            continue

        if indexed.relative_path in result.files:
            logger.warning(
                f"Skipping {file_path}: '{indexed.relative_path}' is already indexed"
            )
            result.skipped += 1
            continue

        result.files[indexed.relative_path] = indexed
        if file_type == FileType.EXAMPLE:
            result.examples_by_name[file_path.stem] = indexed
        added += 1

    logger.debug(f"Indexed {added} {file_type} files from {directory}")
    return added


def ingest_roots(
    base_path: Path,
    roots: Iterable[CorpusRoot],
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
) -> IngestResult:
    """Ingest every root, in order, relative to ``base_path``."""
    result = IngestResult()
    for root in roots:
        directory = Path(root.path)
        if not directory.is_absolute():
            directory = base_path / directory
        ingest_directory(result, directory, base_path, root.file_type, tuple(extensions))
    return result
