"""Glob filtering of candidate files by relative path.

Glob syntax: ``**`` matches any sequence including '/', ``*`` any sequence
without '/', ``?`` exactly one character. Everything else is literal.
Patterns are searched, not anchored, against the relative path.
"""

import re
from collections.abc import Iterable
from functools import lru_cache


def glob_to_regex(glob: str) -> str:
    """Translate a glob into a regular expression source string."""
    parts: list[str] = []
    i = 0
    while i < len(glob):
        char = glob[i]
        if char == "*":
            if glob.startswith("**", i):
                parts.append(".*")
                i += 2
                continue
            parts.append("[^/]*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
        i += 1
    return "".join(parts)


@lru_cache(maxsize=256)
def compile_glob(glob: str) -> re.Pattern[str]:
    """Compiled pattern for a glob, cached by the literal glob string."""
    return re.compile(glob_to_regex(glob))


def matches_globs(relative_path: str, globs: Iterable[str]) -> bool:
    """True if the path matches at least one glob."""
    return any(compile_glob(glob).search(relative_path) for glob in globs)
