"""Regression tests for the optional Rich dependency.

The usage path and error reporting must keep working when Rich is not
importable, falling back to plain ``print`` on stderr.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from goenv.cli import exit_codes
from goenv.cli.app import cli, main
from goenv.cli.console import console, get_rich_console


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def test_console_is_none_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    assert get_rich_console() is None


def test_plain_error_line_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    console.error("mkdir /x: permission denied")

    assert capsys.readouterr().err == "error: mkdir /x: permission denied\n"


def test_rich_error_is_single_unwrapped_line(
    capsys: pytest.CaptureFixture[str],
) -> None:
    message = "unable to initialize new environment, path exists " + "x" * 200

    console.error(message)

    err = capsys.readouterr().err
    assert err.strip() == f"error: {message}"


def test_rich_markup_in_message_is_escaped(
    capsys: pytest.CaptureFixture[str],
) -> None:
    console.error("[Errno 13] Permission denied: '/x/[bold]'")

    err = capsys.readouterr().err
    assert "[Errno 13] Permission denied: '/x/[bold]'" in err


def test_help_works_without_rich(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["--help"]) == exit_codes.GENERAL_ERROR
    assert "usage: goenv" in capsys.readouterr().out


def test_cli_error_works_without_rich(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    existing = tmp_path / "env"
    existing.mkdir()
    monkeypatch.setattr(sys, "argv", ["goenv", str(existing), "x.org/y"])

    with pytest.raises(SystemExit) as exc_info:
        cli()

    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    assert capsys.readouterr().err == (
        "error: unable to initialize new environment, path exists\n"
    )


def test_rich_leaves_emoji_codes_untouched(
    capsys: pytest.CaptureFixture[str],
) -> None:
    message = "[Errno 20] Not a directory: '/tmp/:smile:/env'"

    console.error(message)

    assert capsys.readouterr().err.strip() == f"error: {message}"


def test_cli_error_keeps_emoji_codes_in_paths(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    blocker = tmp_path / ":smile:"
    blocker.write_text("data")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "argv", ["goenv", str(blocker / "env"), "x.org/y"])

    with pytest.raises(SystemExit) as exc_info:
        cli()

    err = capsys.readouterr().err
    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    assert err.startswith("error: ")
    assert ":smile:" in err
    assert blocker.read_text() == "data"
