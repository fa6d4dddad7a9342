"""The command-line interface for shell-utils."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

import os
from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console
from rich.markup import escape

from shell_utils import __version__
from shell_utils.config import Config, load_config
from shell_utils.exceptions import ConfigError
from shell_utils.utils import cli_logger

from ._commands import ExitCode, exit_with_error, get_error_console, register_commands
from ._context import CLIContext

HELP = "Shell utilities: PATH cleaning and filesystem watching."

STRICT_CONFIG_ENV = "SHELL_UTILS_STRICT_CONFIG"


def _load_settings(
    config_file: Path | None, overrides: dict[str, object]
) -> tuple[Config, str | None]:
    """Load settings, falling back to defaults on a bad user config.

    Problems with an explicit ``--config`` file, or any problem while
    SHELL_UTILS_STRICT_CONFIG=1, end the run with a usage error.
    """
    try:
        return load_config(config_file=config_file, overrides=overrides), None
    except ConfigError as e:
        if config_file is not None or os.environ.get(STRICT_CONFIG_ENV) == "1":
            exit_with_error(f"config: {e}", ExitCode.USAGE_ERROR)
        get_error_console().print(
            f"[yellow]Warning:[/yellow] config: {escape(str(e))} (using defaults)",
            soft_wrap=True,
        )
        return Config(), str(e)


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    """Create the shell-utils application.

    Global options live on the meta app, so run it with ``app.meta(tokens)``.
    """
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="shell-utils",
        help=HELP,
        version=__version__,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.default
    def _usage() -> None:  # pyright: ignore[reportUnusedFunction]
        app.help_print(console=error_console)
        raise SystemExit(ExitCode.USAGE_ERROR)

    @app.meta.default
    def _run(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[bool, Parameter(help="Log debug events to stderr")] = False,
        quiet: Annotated[bool, Parameter(help="Only log errors")] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
    ) -> None:
        """Load settings and a logger, then dispatch to a command.

        Args:
            tokens: Command line after the global options.
            verbose: Log debug events to stderr.
            quiet: Only log errors.
            config: Config file to use instead of the user config file.
        """
        overrides: dict[str, object] = {}
        if verbose:
            overrides["logging"] = {"level": "debug"}
        elif quiet:
            overrides["logging"] = {"level": "error"}

        settings, config_error = _load_settings(config, overrides)
        with cli_logger(
            level=settings.logging.level.value,
            log_format=settings.logging.format.value,  # type: ignore[arg-type]
            log_file=settings.logging.file,
        ) as logger:
            CLIContext.set_current(
                CLIContext(
                    config=settings,
                    verbose=verbose,
                    quiet=quiet,
                    config_error=config_error,
                    logger=logger,
                )
            )
            try:
                app(tokens)
            finally:
                CLIContext.reset()

    register_commands(app)
    return app


app = create_app()


def main() -> None:
    """Entry point of the ``shell-utils`` script."""
    create_app().meta()
