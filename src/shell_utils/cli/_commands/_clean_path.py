# pyright: reportUnusedCallResult=false
"""clean-path command."""

import os
from typing import Annotated

from cyclopts import App, Parameter

from shell_utils.cli._context import CLIContext
from shell_utils.exceptions import PathJoinError
from shell_utils.path import clean_path as clean_path_value

from ._shared import ExitCode, exit_with_error, to_printable

app = App(name="clean-path", help="Clean a PATH-like string.", help_on_error=True)


@app.default
def clean_path(
    path: Annotated[
        str | None,
        Parameter(
            help="The PATH-like string to clean. Defaults to the value of the "
            "environment variable named by --variable."
        ),
    ] = None,
    *,
    variable: Annotated[
        str | None,
        Parameter(
            name=["--variable", "-e"],
            help="Environment variable to clean when PATH is not given "
            "(config: clean_path.variable, default PATH).",
        ),
    ] = None,
) -> None:
    """Remove duplicate, missing and unexpandable entries from a PATH-like string.

    A leading ~ or . in an entry is expanded to the home or current directory.
    The first occurrence of each entry is kept, in the original order.
    """
    ctx = CLIContext.get_current()
    logger = ctx.command_logger("clean-path")

    name = variable or ctx.config.clean_path.variable
    value = path if path is not None else os.environ.get(name)
    if value is None:
        exit_with_error(
            f"no PATH given and ${name} is not set", ExitCode.USAGE_ERROR
        )

    try:
        cleaned = clean_path_value(value, logger=logger)
    except PathJoinError as e:
        logger.debug("clean_path_failed", path=e.path)
        exit_with_error(str(e), ExitCode.COMMAND_ERROR)

    print(to_printable(cleaned))  # noqa: T201
