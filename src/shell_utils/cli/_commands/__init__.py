"""shell-utils CLI commands."""
# pyright: reportUnusedCallResult=false

from typing import TYPE_CHECKING

from ._clean_path import app as clean_path_app
from ._shared import ExitCode, exit_with_error, get_error_console, to_printable
from ._watch import app as watch_app

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "ExitCode",
    "clean_path_app",
    "exit_with_error",
    "get_error_console",
    "register_commands",
    "to_printable",
    "watch_app",
]


def register_commands(app: "App") -> None:
    app.command(clean_path_app)
    app.command(watch_app)
