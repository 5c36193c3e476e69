"""Tests for httpboom.__main__ CLI entrypoint behavior."""

from typer.testing import CliRunner

from httpboom import __main__ as main_module


runner = CliRunner()


def test_main_help_lists_commands():
    """The module entrypoint exposes the CLI commands."""
    result = runner.invoke(main_module.app, ["--help"])
    assert result.exit_code == 0
    assert "show" in result.output
    assert "codes" in result.output


def test_main_verbose_flag():
    """--verbose is accepted before a subcommand."""
    result = runner.invoke(main_module.app, ["--verbose", "version"])
    assert result.exit_code == 0
    assert "httpboom version 0.1.0" in result.output
