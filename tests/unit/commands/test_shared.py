"""Unit tests for the shared CLI utilities module."""

from io import StringIO

import pytest
from rich.console import Console

from shell_utils.cli._commands._shared import (
    ExitCode,
    exit_with_error,
    get_error_console,
    to_printable,
)


class TestExitCode:
    def test_exit_code_values_are_unique(self) -> None:
        values = [code.value for code in ExitCode]
        assert len(values) == len(set(values))

    def test_exit_code_is_int_subclass(self) -> None:
        assert issubclass(ExitCode, int)
        assert ExitCode.SUCCESS == 0
        assert ExitCode.USAGE_ERROR == 1
        assert ExitCode.COMMAND_ERROR == 2

    def test_exit_code_usable_with_system_exit(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            raise SystemExit(ExitCode.COMMAND_ERROR)
        assert exc_info.value.code == 2


class TestGetErrorConsole:
    def test_writes_to_stderr(self) -> None:
        console = get_error_console()
        assert console.stderr is True


class TestExitWithError:
    def test_prints_error_prefix(self) -> None:
        string_io = StringIO()
        console = Console(file=string_io, force_terminal=False)

        with pytest.raises(SystemExit):
            exit_with_error("Something went wrong", console=console)

        output = string_io.getvalue()
        assert "Error:" in output
        assert "Something went wrong" in output

    def test_defaults_to_command_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            exit_with_error("Test error", console=Console(file=StringIO()))
        assert exc_info.value.code == ExitCode.COMMAND_ERROR

    def test_uses_given_code(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            exit_with_error(
                "Usage error", ExitCode.USAGE_ERROR, console=Console(file=StringIO())
            )
        assert exc_info.value.code == ExitCode.USAGE_ERROR

    def test_message_markup_is_escaped(self) -> None:
        string_io = StringIO()
        console = Console(file=string_io, force_terminal=False)

        with pytest.raises(SystemExit):
            exit_with_error("no [bold]PATH[/bold] given", console=console)

        assert "no [bold]PATH[/bold] given" in string_io.getvalue()

    def test_long_path_is_not_wrapped(self) -> None:
        string_io = StringIO()
        console = Console(file=string_io, force_terminal=False, width=20)
        message = "cannot join /a/very/long/path/that/does/not/fit"

        with pytest.raises(SystemExit):
            exit_with_error(message, console=console)

        assert message in string_io.getvalue()

    def test_writes_to_stderr_by_default(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit):
            exit_with_error("to stderr")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "to stderr" in captured.err


class TestToPrintable:
    def test_plain_text_unchanged(self) -> None:
        assert to_printable("/usr/bin:/bin") == "/usr/bin:/bin"

    def test_non_ascii_unchanged(self) -> None:
        assert to_printable("/home/jürgen/bin") == "/home/jürgen/bin"

    def test_escaped_byte_becomes_replacement_character(self) -> None:
        assert to_printable("/tmp/\udcff/bin") == "/tmp/�/bin"

    def test_lone_surrogate_is_replaced(self) -> None:
        result = to_printable("/tmp/\ud800")

        assert result.startswith("/tmp/")
        assert "\ud800" not in result
        _ = result.encode("utf-8")
