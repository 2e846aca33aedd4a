"""Citation factory.

Citations are always re-derived from the live file table: the excerpt is
cut from the stored lines of the file at call time, never copied from a
search result.
"""

from collections.abc import Mapping

from .core.document import Citation, IndexedFile


def clamp_range(file: IndexedFile, line_start: int, line_end: int) -> tuple[int, int] | None:
    """Clamp a 1-indexed inclusive range to the file.

    Returns:
        (start, end) within the file, or None if the range is inverted or
        empty after clamping
    """
    if line_start > line_end:
        return None
    start = max(1, line_start)
    end = min(file.line_count, line_end)
    if start > end:
        return None
    return start, end


def get_snippet(
    files: Mapping[str, IndexedFile],
    relative_path: str,
    line_start: int,
    line_end: int,
) -> str | None:
    """Exact text of lines ``line_start..line_end`` (clamped), or None."""
    file = files.get(relative_path)
    if file is None:
        return None
    bounds = clamp_range(file, line_start, line_end)
    if bounds is None:
        return None
    start, end = bounds
    return "\n".join(file.lines[start - 1 : end])


def create_citation(
    files: Mapping[str, IndexedFile],
    relative_path: str,
    line_start: int,
    line_end: int,
    reason: str | None = None,
) -> Citation | None:
    """Build a verified citation, or None for an unknown path or bad range.

    Args:
        files: Live file table keyed by relative path
        relative_path: Path of the cited file
        line_start: First line (1-indexed)
        line_end: Last line (1-indexed, inclusive)
        reason: Optional justification, stored verbatim

    Returns:
        Citation carrying the clamped range and exact excerpt
    """
    file = files.get(relative_path)
    if file is None:
        return None
    bounds = clamp_range(file, line_start, line_end)
    if bounds is None:
        return None
    start, end = bounds
    return Citation(
        path=relative_path,
        line_start=start,
        line_end=end,
        excerpt="\n".join(file.lines[start - 1 : end]),
        reason=reason,
    )
