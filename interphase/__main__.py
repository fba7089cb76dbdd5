"""
Module entrypoint for the Interphase CLI.

This file exists so that `python -m interphase ...` works when the
console-script wrapper is not installed. It delegates to the CLI module.
"""

from __future__ import annotations

from interphase.cli import main


def _run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    _run()
