"""Utilities shared across shell-utils."""

from ._logging import LogFormatType, cli_logger, create_logger, log_level

__all__ = ["LogFormatType", "cli_logger", "create_logger", "log_level"]
