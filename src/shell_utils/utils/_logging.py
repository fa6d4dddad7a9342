"""structlog loggers for shell-utils commands.

Loggers are built per run with ``structlog.wrap_logger`` and never touch the
global structlog configuration. They write to standard error or append to a
log file, so standard output carries only command results.
"""

import logging
import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TextIO, cast

import structlog

if TYPE_CHECKING:
    from collections.abc import Iterator

    from structlog.typing import FilteringBoundLogger, Processor

LogFormatType = Literal["json", "text"]

DEBUG_ENV = "SHELL_UTILS_DEBUG"


def log_level(name: str) -> int:
    """Return the stdlib level for a level name such as ``"info"``.

    A non-empty ``SHELL_UTILS_DEBUG`` forces DEBUG. Unknown names give WARNING.
    """
    if os.environ.get(DEBUG_ENV):
        return logging.DEBUG
    return logging.getLevelNamesMapping().get(name.upper(), logging.WARNING)


def _processors(log_format: LogFormatType) -> "list[Processor]":
    chain: list[Processor] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "json":
        chain += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        chain.append(structlog.dev.ConsoleRenderer(colors=False))
    return chain


def create_logger(
    stream: TextIO | None = None,
    *,
    level: str = "warning",
    log_format: LogFormatType = "text",
    command: str = "",
) -> "FilteringBoundLogger":
    """Create a logger that writes one line per event to ``stream``.

    ``stream`` defaults to standard error. A non-empty ``command`` is bound to
    every event.
    """
    logger = cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.PrintLogger(stream if stream is not None else sys.stderr),
            processors=_processors(log_format),
            wrapper_class=structlog.make_filtering_bound_logger(log_level(level)),
            context_class=dict,
        ),
    )
    return logger.bind(command=command) if command else logger


@contextmanager
def cli_logger(
    *,
    level: str = "warning",
    log_format: LogFormatType = "text",
    log_file: str = "",
    command: str = "",
) -> "Iterator[FilteringBoundLogger]":
    """Provide the logger for one CLI run.

    With ``log_file`` set, events are appended to that file, whose directory
    is created if needed. The file is closed when the block exits. Without
    it, events go to standard error.
    """
    if not log_file:
        yield create_logger(level=level, log_format=log_format, command=command)
        return

    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as stream:
        yield create_logger(
            stream, level=level, log_format=log_format, command=command
        )
