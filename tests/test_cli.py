"""Tests for the command line."""

import logging

import pytest
from rich.logging import RichHandler
from typer.testing import CliRunner

from termcells.cli.app import create_app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def package_logger():
    """The termcells logger, restored after the test."""
    log = logging.getLogger("termcells")
    handlers, level = list(log.handlers), log.level
    yield log
    log.handlers[:] = handlers
    log.setLevel(level)


class TestLabelCommand:
    """Tests for `termcells label`."""

    def test_left(self, runner: CliRunner, app) -> None:
        result = runner.invoke(app, ["label", "Hello World", "--width", "5"])
        assert result.exit_code == 0
        assert result.output == "Hell…\n"

    def test_right(self, runner: CliRunner, app) -> None:
        result = runner.invoke(app, ["label", "Hello World", "-w", "5", "-a", "right"])
        assert result.exit_code == 0
        assert result.output == "…orld\n"

    def test_align_case_insensitive(self, runner: CliRunner, app) -> None:
        result = runner.invoke(app, ["label", "abcdefgh", "-w", "7", "--align", "CENTER"])
        assert result.exit_code == 0
        assert result.output == "…bcdef…\n"

    def test_center_ellipsis(self, runner: CliRunner, app) -> None:
        result = runner.invoke(app, ["label", "abcdefgh", "-w", "7", "--center-ellipsis"])
        assert result.exit_code == 0
        assert result.output == "abc…fgh\n"

    def test_frame(self, runner: CliRunner, app) -> None:
        result = runner.invoke(app, ["label", "abc", "-w", "6", "-a", "center", "--frame"])
        assert result.exit_code == 0
        assert result.output == "│ abc  │\n"

    def test_colors(self, runner: CliRunner, app) -> None:
        result = runner.invoke(app, ["label", "hi", "-w", "2", "--fg", "red", "--bg", "#000080"])
        assert result.exit_code == 0
        assert "\x1b[31;48;2;0;0;128mhi\x1b[0m" in result.output

    def test_bad_color(self, runner: CliRunner, app) -> None:
        result = runner.invoke(app, ["label", "hi", "--fg", "mauve"])
        assert result.exit_code == 1
        assert "Cannot parse color" in result.output

    def test_bad_ellipsis(self, runner: CliRunner, app) -> None:
        result = runner.invoke(app, ["label", "hi", "--ellipsis", "..."])
        assert result.exit_code == 1
        assert "single character" in result.output

    def test_quiet_by_default(self, runner: CliRunner, app, package_logger: logging.Logger) -> None:
        result = runner.invoke(app, ["label", "x", "-w", "3"])
        assert result.exit_code == 0
        assert package_logger.level == logging.WARNING
        assert not any(isinstance(h, RichHandler) for h in package_logger.handlers)


class TestVerbose:
    """Tests for `--verbose` debug logging."""

    def test_enables_debug(self, runner: CliRunner, app, package_logger: logging.Logger) -> None:
        result = runner.invoke(app, ["--verbose", "label", "x", "-w", "3"])
        assert result.exit_code == 0
        assert package_logger.level == logging.DEBUG
        assert sum(isinstance(h, RichHandler) for h in package_logger.handlers) == 1

    def test_debug_records_from_screen(
        self, runner: CliRunner, app, package_logger: logging.Logger, caplog: pytest.LogCaptureFixture
    ) -> None:
        result = runner.invoke(app, ["--verbose", "screen", "Hello", "-w", "3"], input="\n")
        assert result.exit_code == 0
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
        assert any(m.startswith("Binding grid to backend surface") for m in messages)
        assert "Terminal session closed" in messages

    def test_repeat_does_not_stack_handlers(self, runner: CliRunner, app, package_logger: logging.Logger) -> None:
        runner.invoke(app, ["--verbose", "label", "x"])
        runner.invoke(app, ["--verbose", "label", "x"])
        assert sum(isinstance(h, RichHandler) for h in package_logger.handlers) == 1


class TestCellsCommand:
    """Tests for `termcells cells`."""

    def test_table(self, runner: CliRunner, app) -> None:
        result = runner.invoke(app, ["cells", "Hello World", "-w", "5", "-c"])
        assert result.exit_code == 0
        for char in "He…ld":
            assert char in result.output


class TestScreenCommand:
    """Tests for `termcells screen`."""

    def test_draws_and_restores(self, runner: CliRunner, app) -> None:
        result = runner.invoke(app, ["screen", "Hello", "-w", "3"], input="\n")
        assert result.exit_code == 0
        assert result.output.startswith("\x1b[?1049h")
        assert "He…" in result.output
        assert "press Enter to exit" in result.output
        assert result.output.endswith("\x1b[?1049l")
