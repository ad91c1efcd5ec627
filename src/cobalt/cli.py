"""Command line entry point.

Usage::

    cobalt [ROOT] [--keep-going] [-v]

Builds the site whose ``cobalt.toml`` lives in ROOT (default: the current
directory). Exits with status 1 after printing the error if anything fails.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from cobalt import __version__
from cobalt.build import build_site
from cobalt.errors import CobaltError


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cobalt",
        description="Compile Cobalt sources into HTML pages.",
    )
    parser.add_argument("root", nargs="?", default=".", help="Site root containing cobalt.toml")
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Skip files that fail to compile instead of stopping",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every step")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _report_error(message: str) -> None:
    print(f"error: {message}\nCompiler exiting.", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        report = build_site(args.root, keep_going=args.keep_going)
    except CobaltError as e:
        _report_error(str(e))
        return 1

    if not report.ok:
        _report_error(f"{len(report.failed)} of {len(report.failed) + len(report.written)} files failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
