"""Gitignore-style pattern matching for watched paths."""

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pathspec import PathSpec


def clean_patterns(patterns: "Iterable[str]") -> list[str]:
    """Strip patterns, dropping blanks and comments and keeping first occurrences.

    Args:
        patterns: Raw patterns, e.g. from the command line or configuration.

    Returns:
        Deduplicated patterns in their original order.
    """
    cleaned: list[str] = []
    seen: set[str] = set()
    for pattern in patterns:
        stripped = pattern.strip()
        if not stripped or stripped.startswith("#") or stripped in seen:
            continue
        seen.add(stripped)
        cleaned.append(stripped)
    return cleaned


def create_pathspec(patterns: "Iterable[str]") -> "PathSpec":
    """Create a PathSpec from gitignore-style patterns."""
    from pathspec import GitIgnoreSpec  # noqa: PLC0415

    return GitIgnoreSpec.from_lines(clean_patterns(patterns))


def matches_any(spec: "PathSpec", path: str | Path) -> bool:
    """Check whether a path matches any pattern of a PathSpec.

    Args:
        spec: Compiled patterns.
        path: Path to test, preferably relative to the watched root.

    Returns:
        True if the path is ignored by the patterns.
    """
    return spec.match_file(Path(path).as_posix())
