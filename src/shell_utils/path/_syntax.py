"""Platform rules for PATH-like strings.

A PATH-like string is a list of filesystem paths separated by a platform
delimiter. POSIX uses ``:`` and forbids it inside entries. Windows uses ``;``
and allows it inside an entry only when the entry is wrapped in double quotes.
"""

import ntpath
import os
import posixpath
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from shell_utils.exceptions import PathJoinError

CURDIR = "."
"""Current-directory component."""

HOME = "~"
"""Home-directory component."""


@dataclass(frozen=True, slots=True)
class PathSyntax:
    """Path and path-list syntax of a platform.

    Attributes:
        name: Short platform name, used in error messages.
        delimiter: Separator between entries of a path list.
        sep: Primary separator between path components.
        altsep: Alternative component separator, if any.
        quoted_entries: Whether path-list entries may be wrapped in double
            quotes to protect an embedded delimiter.
        splitdrive: Function splitting a path into (drive, rest).
    """

    name: str
    delimiter: str
    sep: str
    altsep: str | None
    quoted_entries: bool
    splitdrive: Callable[[str], tuple[str, str]]

    def split(self, value: str) -> list[str]:
        """Split a path-list string into its entries.

        An empty string yields a single empty entry.
        """
        if not self.quoted_entries:
            return value.split(self.delimiter)

        entries: list[str] = []
        current: list[str] = []
        in_quote = False
        for char in value:
            if char == '"':
                in_quote = not in_quote
            elif char == self.delimiter and not in_quote:
                entries.append("".join(current))
                current = []
            else:
                current.append(char)
        entries.append("".join(current))
        return entries

    def join(self, paths: Iterable[str]) -> str:
        """Join paths into a path-list string.

        Raises:
            PathJoinError: If a path cannot be represented in the list.
        """
        encoded: list[str] = []
        for path in paths:
            if self.quoted_entries:
                if '"' in path:
                    msg = f"path contains a double quote and cannot be joined: {path!r}"
                    raise PathJoinError(msg, path=path, delimiter=self.delimiter)
                if self.delimiter in path:
                    path = f'"{path}"'  # noqa: PLW2901
            elif self.delimiter in path:
                msg = (
                    f"path contains the separator {self.delimiter!r} "
                    f"and cannot be joined: {path!r}"
                )
                raise PathJoinError(msg, path=path, delimiter=self.delimiter)
            encoded.append(path)
        return self.delimiter.join(encoded)

    def components(self, path: str) -> list[str]:
        """Decompose a path into its components.

        The first component is the anchor (drive and/or root) when the path
        has one. Empty components are dropped, and so is every ``.`` except
        one that starts a path with no anchor. ``..`` is kept as-is.
        """
        drive, rest = self.splitdrive(path)
        if self.altsep:
            rest = rest.replace(self.altsep, self.sep)

        anchor = drive + self.sep if rest.startswith(self.sep) else drive
        parts: list[str] = [anchor] if anchor else []
        for name in rest.split(self.sep):
            if not name:
                continue
            if name == CURDIR and parts:
                continue
            parts.append(name)
        return parts

    def push(self, base: str, component: str) -> str:
        """Append a component to a path, inserting a separator when needed."""
        if not base:
            return component
        # A bare drive ("C:") takes the next component without a separator.
        _, rest = self.splitdrive(base)
        seps = (self.sep, self.altsep) if self.altsep else (self.sep,)
        if rest and not rest.endswith(seps):
            return f"{base}{self.sep}{component}"
        return base + component


POSIX = PathSyntax(
    name="posix",
    delimiter=":",
    sep="/",
    altsep=None,
    quoted_entries=False,
    splitdrive=posixpath.splitdrive,
)

WINDOWS = PathSyntax(
    name="windows",
    delimiter=";",
    sep="\\",
    altsep="/",
    quoted_entries=True,
    splitdrive=ntpath.splitdrive,
)

NATIVE = WINDOWS if os.name == "nt" else POSIX
"""Syntax of the running platform."""
