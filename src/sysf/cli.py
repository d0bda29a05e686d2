"""Command-line entry point.

  sysf                      start the interactive loop
  sysf a.sf b.sf            run files in one session
  sysf -i prelude.sf        run files, then continue interactively
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from sysf.config import Settings
from sysf.driver.repl import Repl, Session

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sysf",
        description="Interactive type checker and normalizer for System F.",
    )
    parser.add_argument("files", nargs="*", type=Path, help="source files to run")
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="start the interactive loop after running the files",
    )
    parser.add_argument("--log-level", help="logging level (default: WARNING)")
    parser.add_argument(
        "--recursion-limit",
        type=int,
        help="Python recursion limit used while checking and reducing",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = Settings.from_env()
        if args.log_level is not None:
            settings = replace(settings, log_level=args.log_level)
        if args.recursion_limit is not None:
            settings = replace(settings, recursion_limit=args.recursion_limit)
    except ValueError as e:
        print(f"sysf: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(level=settings.level, format="%(levelname)s %(name)s: %(message)s")
    sys.setrecursionlimit(max(sys.getrecursionlimit(), settings.recursion_limit))

    session = Session()
    for path in args.files:
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as e:
            print(f"sysf: cannot read {path}: {e.strerror}", file=sys.stderr)
            return 1
        logger.info("running %s", path)
        session.execute(source)

    if args.interactive or not args.files:
        Repl(session, settings).run()
    return 0


__all__ = ["build_parser", "main"]
