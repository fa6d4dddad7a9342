"""Typed shell-utils settings.

Settings come in three sections, each a frozen pydantic model::

    [logging]     level, format, file
    [clean_path]  variable
    [watch]       recursive, debounce_ms, ignore

Unknown sections and keys are rejected so that typos surface as errors
instead of being silently ignored.
"""

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(StrEnum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


class _Section(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


class LoggingConfig(_Section):
    """Log level, rendering and destination. An empty ``file`` means stderr."""

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.TEXT
    file: str = ""


class CleanPathConfig(_Section):
    """Environment variable cleaned when ``clean-path`` gets no argument."""

    variable: str = Field(default="PATH", min_length=1, pattern=r"^[^=\x00]+$")


class WatchConfig(_Section):
    """Defaults for the ``watch`` command."""

    recursive: bool = True
    debounce_ms: int = Field(default=1600, ge=0)
    ignore: tuple[str, ...] = ()

    @field_validator("ignore", mode="before")
    @classmethod
    def _split_pattern_string(cls, value: object) -> object:
        # Environment overrides arrive as one comma-separated string
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        return value


class Config(_Section):
    """All shell-utils settings. ``Config()`` is the built-in default."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    clean_path: CleanPathConfig = Field(default_factory=CleanPathConfig)
    watch: WatchConfig = Field(default_factory=WatchConfig)
