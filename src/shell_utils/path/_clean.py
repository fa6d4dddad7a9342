"""PATH-like string cleaning.

Cleaning splits a path list into entries, expands a leading ``~`` or ``.``
component of each entry, and keeps the first occurrence of every entry that
exists on the filesystem, in the original order.
"""

import os
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from ._syntax import CURDIR, HOME, NATIVE, PathSyntax

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

DirectoryLookup = Callable[[], str | None]
ExistsPredicate = Callable[[str], bool]


def home_dir() -> str | None:
    """Return the current user's home directory, or None if it is unknown.

    On POSIX a set, non-empty HOME wins; otherwise the passwd entry of the
    current user is used. An empty HOME counts as unset.
    """
    if os.name == "nt":
        try:
            return str(Path.home())
        except RuntimeError:
            return None

    home = os.environ.get("HOME")
    if home:
        return home

    import pwd  # noqa: PLC0415

    try:
        return pwd.getpwuid(os.getuid()).pw_dir
    except KeyError:
        return None


def current_dir() -> str | None:
    """Return the current working directory, or None if it is unavailable."""
    try:
        return os.getcwd()  # noqa: PTH109
    except OSError:
        return None


def split_paths(value: str, *, syntax: PathSyntax = NATIVE) -> list[str]:
    """Split a PATH-like string into its entries, in order."""
    return syntax.split(value)


def join_paths(paths: Iterable[str], *, syntax: PathSyntax = NATIVE) -> str:
    """Join paths into a PATH-like string.

    Raises:
        PathJoinError: If a path cannot be represented in a path list.
    """
    return syntax.join(paths)


def path_components(path: str, *, syntax: PathSyntax = NATIVE) -> list[str]:
    """Decompose a path into its components."""
    return syntax.components(path)


def expand_path(
    path: str,
    *,
    home: DirectoryLookup = home_dir,
    cwd: DirectoryLookup = current_dir,
    syntax: PathSyntax = NATIVE,
) -> str | None:
    """Expand a leading ``.`` or ``~`` component of a path.

    Only the first component is considered: ``./bin`` becomes ``<cwd>/bin``
    and ``~/bin`` becomes ``<home>/bin``, while ``a/~/b`` is left alone.
    Everything else is copied through component by component.

    Args:
        path: The path to expand.
        home: Lookup for the home directory.
        cwd: Lookup for the current working directory.
        syntax: Path syntax to decompose and rebuild the path with.

    Returns:
        The expanded path, or None if the lookup needed for the first
        component returned None.
    """
    expanded = ""
    for index, component in enumerate(syntax.components(path)):
        replacement: str | None = component
        if index == 0 and component == CURDIR:
            replacement = cwd()
        elif index == 0 and component == HOME:
            replacement = home()
        if replacement is None:
            return None
        expanded = syntax.push(expanded, replacement)
    return expanded


def clean_path(  # noqa: PLR0913
    value: str,
    *,
    exists: ExistsPredicate = os.path.exists,
    home: DirectoryLookup = home_dir,
    cwd: DirectoryLookup = current_dir,
    syntax: PathSyntax = NATIVE,
    logger: "FilteringBoundLogger | None" = None,
) -> str:
    """Clean a PATH-like string.

    Each entry is expanded with :func:`expand_path`. Entries that cannot be
    expanded are dropped. Of the remaining entries, only the first occurrence
    of each value is considered, and it is kept only if ``exists`` accepts it.
    A later duplicate is dropped even when the first occurrence did not exist.

    Args:
        value: The PATH-like string to clean.
        exists: Existence check applied to each first occurrence.
        home: Lookup for the home directory.
        cwd: Lookup for the current working directory.
        syntax: Path syntax of ``value`` and of the result.
        logger: Optional logger receiving a debug event per dropped entry.

    Returns:
        The cleaned PATH-like string.

    Raises:
        PathJoinError: If a kept entry cannot be represented in a path list,
            e.g. an expanded home directory containing the delimiter.
    """
    seen: set[tuple[str, ...]] = set()
    kept: list[str] = []

    for entry in syntax.split(value):
        expanded = expand_path(entry, home=home, cwd=cwd, syntax=syntax)
        if expanded is None:
            if logger is not None:
                logger.debug("path_entry_dropped", entry=entry, reason="unexpandable")
            continue
        # Entries are equal when their components are, so "/a/" repeats "/a"
        key = tuple(syntax.components(expanded))
        if key in seen:
            if logger is not None:
                logger.debug("path_entry_dropped", entry=entry, reason="duplicate")
            continue
        seen.add(key)
        if not exists(expanded):
            if logger is not None:
                logger.debug("path_entry_dropped", entry=entry, reason="missing")
            continue
        kept.append(expanded)

    return syntax.join(kept)
