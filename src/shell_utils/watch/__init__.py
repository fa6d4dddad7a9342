"""Filesystem watching with newline-delimited JSON output."""

from ._ignore import clean_patterns, create_pathspec, matches_any
from ._watcher import (
    DEFAULT_DEBOUNCE_MS,
    ChangeRecord,
    change_name,
    make_watch_filter,
    resolve_roots,
    watch_paths,
)

__all__ = [
    "DEFAULT_DEBOUNCE_MS",
    "ChangeRecord",
    "change_name",
    "clean_patterns",
    "create_pathspec",
    "make_watch_filter",
    "matches_any",
    "resolve_roots",
    "watch_paths",
]
