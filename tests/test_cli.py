"""
CLI tests.

These validate argument wiring, help output and exit codes. Demos are built
with --no-run so the event loop is never entered.
"""

from __future__ import annotations

from typing import Any

import pytest

import interphase.cli as cli_module
from interphase.errors import InterphaseError


def _run_help(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(argv)
    assert excinfo.value.code == 0


def test_cli_root_help(capsys: pytest.CaptureFixture[str]) -> None:
    _run_help(["--help"])
    out = capsys.readouterr().out.lower()
    assert "usage:" in out
    assert "interphase" in out


def test_cli_demo_help_lists_demos(capsys: pytest.CaptureFixture[str]) -> None:
    _run_help(["demo", "--help"])
    out = capsys.readouterr().out
    assert "scrolling" in out
    assert "buttons" in out


@pytest.mark.parametrize("demo", ["scrolling", "buttons"])
def test_cli_demo_builds_without_running(demo: str, qapp: Any) -> None:
    assert cli_module.main(["demo", demo, "--no-run", "--log-level", "WARNING"]) == 0


def test_cli_demo_returns_2_on_interphase_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], qapp: Any
) -> None:
    def _boom() -> None:
        raise InterphaseError("nope")

    monkeypatch.setitem(cli_module.DEMOS, "scrolling", _boom)

    rc = cli_module.main(["demo", "scrolling", "--no-run"])
    out = capsys.readouterr().out
    assert rc == 2
    assert "ERROR: nope" in out
