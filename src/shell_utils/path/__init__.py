"""Cleaning of PATH-like strings."""

from ._clean import (
    clean_path,
    current_dir,
    expand_path,
    home_dir,
    join_paths,
    path_components,
    split_paths,
)
from ._syntax import NATIVE, POSIX, WINDOWS, PathSyntax

__all__ = [
    "NATIVE",
    "POSIX",
    "WINDOWS",
    "PathSyntax",
    "clean_path",
    "current_dir",
    "expand_path",
    "home_dir",
    "join_paths",
    "path_components",
    "split_paths",
]
