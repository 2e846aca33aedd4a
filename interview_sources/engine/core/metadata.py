"""Best-effort extraction of the ``metadata:`` declaration block.

Each field is matched by its own pattern against the block text, so a
missing or malformed field never prevents the others from being read.
Values are stored as found, without validation.
"""

import re

from .document import FileMetadata

# Block header at the start of a line, followed by indented continuation lines
METADATA_BLOCK_PATTERN = re.compile(r"^metadata:\s*\n((?:[ \t]+[^\n]+\n?)*)", re.MULTILINE)

_TEXT_FIELD_PATTERNS = {
    "title": re.compile(r"title:\s*[\"']?([^\"'\n]+)[\"']?"),
    "short_title": re.compile(r"short title:\s*[\"']?([^\"'\n]+)[\"']?"),
    "documentation": re.compile(r"documentation:\s*[\"']?([^\"'\n]+)[\"']?"),
}

_INT_FIELD_PATTERNS = {
    "example_start": re.compile(r"example start:\s*(\d+)"),
    "example_end": re.compile(r"example end:\s*(\d+)"),
}


def find_metadata_block(content: str) -> str | None:
    """Return the indented body of the first ``metadata:`` block, if any."""
    match = METADATA_BLOCK_PATTERN.search(content)
    if match is None:
        return None
    return match.group(1)


def extract_metadata(content: str) -> FileMetadata:
    """Extract title, short title, documentation link and example markers.

    Args:
        content: Raw file content

    Returns:
        FileMetadata with whichever fields were found (empty if no block)
    """
    block = find_metadata_block(content)
    if not block:
        return FileMetadata()

    fields: dict[str, str | int] = {}
    for name, pattern in _TEXT_FIELD_PATTERNS.items():
        match = pattern.search(block)
        if match:
            fields[name] = match.group(1).strip()

    for name, pattern in _INT_FIELD_PATTERNS.items():
        match = pattern.search(block)
        if match:
            fields[name] = int(match.group(1))

    return FileMetadata(**fields)
