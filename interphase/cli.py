"""
Command-line interface for Interphase.

Notes
-----
The CLI is intentionally thin. It configures logging and the Qt application,
then hands a demo widget tree to the event loop.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from interphase.application import ensure_application
from interphase.demos import DEMOS
from interphase.errors import InterphaseError
from interphase.logging_config import setup_logging
from interphase.settings import load_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser.
    """
    parser = argparse.ArgumentParser(
        prog="interphase",
        description="Declarative widget trees over Qt",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    demo_p = sub.add_parser("demo", help="Build and run one of the bundled demo windows")
    demo_p.add_argument("demo", choices=sorted(DEMOS), help="Demo to run")
    demo_p.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Settings JSON file. Defaults to $INTERPHASE_SETTINGS, then built-in defaults.",
    )
    demo_p.add_argument(
        "--log-level",
        default=None,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Override the log level from settings.",
    )
    demo_p.add_argument(
        "--no-run",
        action="store_true",
        help="Build the demo tree and exit without entering the event loop.",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    CLI entry point.

    Parameters
    ----------
    argv:
        Optional argument vector. If None, argparse uses sys.argv.

    Returns
    -------
    int
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "demo":
        settings = load_settings(args.settings)
        setup_logging(args.log_level or settings.log_level)
        ensure_application(settings)

        try:
            window = DEMOS[args.demo]()
        except InterphaseError as exc:
            print(f"ERROR: {exc}")
            return 2

        if args.no_run:
            logger.info("Built %s demo; not running", args.demo)
            window.destroy()
            return 0

        window.show_all()
        return window.run()

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
