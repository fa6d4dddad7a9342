# pyright: reportUnusedCallResult=false
"""Per-run CLI state shared with the commands.

The meta app stores a CLIContext in a context variable before dispatching,
and commands read it back with ``CLIContext.get_current()``.
"""

import contextvars
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from shell_utils.config import Config

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

_active: "contextvars.ContextVar[CLIContext | None]" = contextvars.ContextVar(
    "shell_utils_cli_context", default=None
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Settings, global flags and logger of the current run.

    Attributes:
        config: Settings loaded for this run.
        verbose: ``--verbose`` was given.
        quiet: ``--quiet`` was given.
        config_error: Why the settings fell back to defaults, if they did.
        logger: Logger for the run; it never writes to standard output.
    """

    config: Config = field(repr=False)
    verbose: bool = False
    quiet: bool = False
    config_error: str | None = None
    logger: "FilteringBoundLogger | None" = field(default=None, repr=False)

    @classmethod
    def get_current(cls) -> "CLIContext":
        """Return the active context, or one with default settings."""
        active = _active.get()
        return active if active is not None else cls(config=Config())

    @classmethod
    def set_current(cls, ctx: "CLIContext") -> None:
        _active.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Forget the active context."""
        _active.set(None)

    def command_logger(self, command: str) -> "FilteringBoundLogger":
        """Return the run's logger bound to ``command``.

        Without a run logger, a standard error logger at the configured level
        and format is created.
        """
        if self.logger is not None:
            return self.logger.bind(command=command)

        from shell_utils.utils import create_logger  # noqa: PLC0415

        return create_logger(
            level=self.config.logging.level.value,
            log_format=self.config.logging.format.value,  # type: ignore[arg-type]
            command=command,
        )
