import logging

import structlog

from shell_utils.cli import CLIContext
from shell_utils.config import Config


class TestCLIContext:
    def test_default_context_when_unset(self) -> None:
        ctx = CLIContext.get_current()

        assert ctx.verbose is False
        assert ctx.quiet is False
        assert ctx.config_error is None
        assert ctx.config.clean_path.variable == "PATH"

    def test_set_and_reset(self) -> None:
        ctx = CLIContext(config=Config(), verbose=True)

        CLIContext.set_current(ctx)
        assert CLIContext.get_current() is ctx

        CLIContext.reset()
        assert CLIContext.get_current() is not ctx

    def test_command_logger_binds_command(self) -> None:
        with structlog.testing.capture_logs() as logs:
            ctx = CLIContext(config=Config(), logger=structlog.get_logger())
            ctx.command_logger("watch").warning("something")

        assert logs == [
            {"event": "something", "log_level": "warning", "command": "watch"}
        ]

    def test_command_logger_without_logger_uses_config(self) -> None:
        config = Config.model_validate({"logging": {"level": "error"}})
        ctx = CLIContext(config=config)

        logger = ctx.command_logger("clean-path")

        assert logger.is_enabled_for(logging.ERROR)
        assert not logger.is_enabled_for(logging.WARNING)
