"""Inverted keyword index over the ingested corpus.

Built once after ingestion: every vocabulary keyword is matched as a
case-insensitive whole word against each file's full content.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from ..core.document import IndexedFile
from .constants import KEYWORD_VOCABULARY

logger = logging.getLogger(__name__)


def compile_keyword_pattern(keyword: str) -> re.Pattern[str]:
    """Compile a whole-word matcher for a vocabulary keyword.

    Pattern metacharacters in the keyword are escaped, and whitespace
    between words matches any run of whitespace.
    """
    words = keyword.split()
    body = r"\s+".join(re.escape(word) for word in words)
    return re.compile(rf"\b{body}\b", re.IGNORECASE)


def build_keyword_index(
    files: Iterable[IndexedFile],
    vocabulary: Iterable[str] = KEYWORD_VOCABULARY,
) -> Mapping[str, frozenset[str]]:
    """Map each lowercased keyword to the relative paths that contain it.

    Keywords that match no file are absent from the result.

    Args:
        files: Ingested files
        vocabulary: Keywords to index (case is folded)

    Returns:
        Read-only mapping keyword -> frozenset of relative paths
    """
    patterns = [(kw.lower(), compile_keyword_pattern(kw)) for kw in vocabulary]
    index: dict[str, set[str]] = {}

    for file in files:
        for keyword, pattern in patterns:
            if pattern.search(file.content):
                index.setdefault(keyword, set()).add(file.relative_path)

    logger.debug(f"Keyword index built: {len(index)} keywords matched")
    return MappingProxyType({kw: frozenset(paths) for kw, paths in index.items()})
