# pyright: reportUnusedCallResult=false
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing
"""watch command."""

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter

from shell_utils.cli._context import CLIContext
from shell_utils.exceptions import WatchError
from shell_utils.watch import watch_paths

from ._shared import ExitCode, exit_with_error

app = App(
    name="watch",
    help="Watch paths and print each change as a line of JSON.",
    help_on_error=True,
)


@app.default
def watch(
    *paths: Annotated[Path, Parameter(help="Files or directories to watch.")],
    recursive: Annotated[
        bool | None,
        Parameter(
            negative="--no-recursive",
            help="Watch subdirectories (config: watch.recursive, default true).",
        ),
    ] = None,
    ignore: Annotated[
        list[str] | None,
        Parameter(
            help="Gitignore-style pattern of paths not to report; repeatable. "
            "Added to the watch.ignore config patterns."
        ),
    ] = None,
    debounce: Annotated[
        int | None,
        Parameter(
            help="Milliseconds to group changes before reporting them "
            "(config: watch.debounce_ms, default 1600)."
        ),
    ] = None,
) -> None:
    """Watch files and directories until interrupted.

    Each change is printed to standard output as one JSON object with the
    keys change, path and timestamp.
    """
    if not paths:
        exit_with_error("no paths to watch", ExitCode.USAGE_ERROR)

    ctx = CLIContext.get_current()
    settings = ctx.config.watch
    logger = ctx.command_logger("watch")

    try:
        watch_paths(
            paths,
            recursive=settings.recursive if recursive is None else recursive,
            ignore_patterns=[*settings.ignore, *(ignore or [])],
            debounce_ms=settings.debounce_ms if debounce is None else debounce,
            logger=logger,
        )
    except WatchError as e:
        exit_with_error(str(e), ExitCode.COMMAND_ERROR)
