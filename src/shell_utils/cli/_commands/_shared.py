"""Exit codes and error output shared by the commands."""

from enum import IntEnum
from typing import TYPE_CHECKING, Never

if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "ExitCode",
    "exit_with_error",
    "get_error_console",
    "to_printable",
]


class ExitCode(IntEnum):
    """Process exit status of a shell-utils run."""

    SUCCESS = 0
    USAGE_ERROR = 1
    COMMAND_ERROR = 2


def get_error_console() -> "Console":
    """Return a console that prints to standard error."""
    from rich.console import Console

    return Console(stderr=True)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.COMMAND_ERROR,
    *,
    console: "Console | None" = None,
) -> Never:
    """Report ``message`` as an error and leave with ``code``.

    The message is printed unwrapped, with markup escaped, to ``console`` or to
    standard error.
    """
    from rich.markup import escape

    if console is None:
        console = get_error_console()

    console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    raise SystemExit(code)


def to_printable(text: str) -> str:
    """Replace characters that cannot be encoded as UTF-8 with U+FFFD.

    Undecodable bytes smuggled in as surrogate escapes (from ``os.environ``
    or ``sys.argv``) each become one replacement character.
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "surrogatepass")
    return raw.decode("utf-8", "replace")
