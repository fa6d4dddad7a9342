"""File watcher using watchfiles.

Changes under the watched paths are written to a text stream as
newline-delimited JSON, one object per change:

    {"change":"modified","path":"/work/src/app.py","timestamp":"..."}

The watcher blocks until interrupted or until its stop event is set.
"""

import sys
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import orjson

from shell_utils.exceptions import WatchError

from ._ignore import create_pathspec, matches_any

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence
    from threading import Event

    from pathspec import PathSpec
    from structlog.typing import FilteringBoundLogger
    from watchfiles import Change

DEFAULT_DEBOUNCE_MS = 1600


def change_name(change: "Change") -> str:
    """Return the record name of a watchfiles change type."""
    from watchfiles import Change as WatchChange  # noqa: PLC0415

    change_names = {
        WatchChange.added: "added",
        WatchChange.modified: "modified",
        WatchChange.deleted: "deleted",
    }
    return change_names.get(change, "unknown")


@dataclass(frozen=True, slots=True)
class ChangeRecord:
    """A single filesystem change, as written to the output stream.

    Attributes:
        change: Kind of change: added, modified or deleted.
        path: Absolute path of the changed file or directory.
        timestamp: ISO 8601 time (UTC) at which the change was reported.
    """

    change: str
    path: str
    timestamp: str

    @classmethod
    def from_change(
        cls, change: "Change", path: str, *, now: datetime | None = None
    ) -> "ChangeRecord":
        """Build the record for a watchfiles change.

        Args:
            change: The watchfiles change type.
            path: Absolute path reported by watchfiles.
            now: Time of the change. Defaults to the current UTC time.
        """
        reported = now if now is not None else datetime.now(UTC)
        return cls(
            change=change_name(change), path=path, timestamp=reported.isoformat()
        )

    def to_json(self) -> str:
        """Serialize the record as a single line of JSON.

        Raises:
            orjson.JSONEncodeError: If the path is not valid Unicode.
        """
        return orjson.dumps(self).decode("utf-8")


def resolve_roots(paths: "Iterable[str | Path]") -> list[Path]:
    """Resolve the paths to watch, failing on the first one that does not exist.

    Raises:
        WatchError: If a path does not exist.
    """
    roots: list[Path] = []
    for path in paths:
        root = Path(path)
        if not root.exists():
            msg = f"No such file or directory: {path}"
            raise WatchError(msg, path=str(path))
        roots.append(root.resolve())
    return roots


def make_watch_filter(
    roots: "Sequence[Path]", spec: "PathSpec"
) -> "Callable[[Change, str], bool]":
    """Build a watchfiles filter that drops paths matched by ``spec``.

    Paths are matched relative to the first root that contains them.
    """

    def should_watch(_change: "Change", changed_path: str) -> bool:
        changed = Path(changed_path)
        for root in roots:
            if changed.is_relative_to(root) and changed != root:
                return not matches_any(spec, changed.relative_to(root))
        return not matches_any(spec, changed)

    return should_watch


def watch_paths(  # noqa: PLR0913
    paths: "Iterable[str | Path]",
    *,
    recursive: bool = True,
    ignore_patterns: "Iterable[str]" = (),
    debounce_ms: int = DEFAULT_DEBOUNCE_MS,
    stream: TextIO | None = None,
    logger: "FilteringBoundLogger | None" = None,
    stop_event: "Event | None" = None,
) -> int:
    """Watch paths for changes and write each change as a JSON line.

    This is a blocking function that runs until interrupted or until
    ``stop_event`` is set. A change that cannot be serialized is logged and
    skipped; the watch carries on.

    Args:
        paths: Files or directories to watch.
        recursive: Whether to watch subdirectories.
        ignore_patterns: Gitignore-style patterns of paths not to report.
        debounce_ms: Time to group changes before reporting them.
        stream: Output stream. Defaults to standard output.
        logger: Logger for watch events and errors. Defaults to a standard
            error logger.
        stop_event: Event that ends the watch when set.

    Returns:
        The number of records written.

    Raises:
        WatchError: If a path does not exist.
    """
    from watchfiles import watch  # noqa: PLC0415

    roots = resolve_roots(paths)
    if logger is None:
        from shell_utils.utils import create_logger  # noqa: PLC0415

        logger = create_logger(command="watch")
    out = stream if stream is not None else sys.stdout

    patterns = list(ignore_patterns)
    watch_filter = (
        make_watch_filter(roots, create_pathspec(patterns)) if patterns else None
    )

    logger.info(
        "watch_started",
        paths=[str(root) for root in roots],
        recursive=recursive,
        ignore=patterns,
    )

    written = 0
    for changes in watch(
        *roots,
        watch_filter=watch_filter,
        debounce=debounce_ms,
        recursive=recursive,
        stop_event=stop_event,
        raise_interrupt=False,
    ):
        for change, changed_path in sorted(changes):
            try:
                line = ChangeRecord.from_change(change, changed_path).to_json()
            except orjson.JSONEncodeError as e:
                logger.error("change_not_encodable", path=changed_path, error=str(e))
                continue
            print(line, file=out, flush=True)  # noqa: T201
            written += 1

    logger.info("watch_stopped", records=written)
    return written
