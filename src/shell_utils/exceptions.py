"""Errors raised by shell-utils.

Every error derives from ShellUtilsError and carries the details a caller
needs to report it as attributes.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ShellUtilsError(Exception):
    """Root of the shell-utils error family."""


class PathJoinError(ShellUtilsError):
    """A path that cannot be written into a PATH-like string.

    Attributes:
        path: The entry that could not be joined.
        delimiter: The list delimiter of the target syntax.
    """

    def __init__(self, message: str, *, path: str, delimiter: str) -> None:
        super().__init__(message)
        self.path = path
        self.delimiter = delimiter


class WatchError(ShellUtilsError):
    """A watch target that does not exist."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class ConfigError(ShellUtilsError):
    """Configuration that cannot be used."""


class ConfigFileError(ConfigError):
    """A config file that cannot be read or is not valid TOML.

    Attributes:
        path: The config file.
        line: 1-based line of a TOML syntax error, if known.
        column: 1-based column of a TOML syntax error, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        path: "Path",
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.line = line
        self.column = column


class ConfigValueError(ConfigError):
    """A setting whose value the config models reject.

    Attributes:
        key: Dotted name of the setting, e.g. ``watch.debounce_ms``.
        value: The rejected value, or None for an unknown setting.
    """

    def __init__(self, message: str, *, key: str, value: object = None) -> None:
        super().__init__(message)
        self.key = key
        self.value = value
