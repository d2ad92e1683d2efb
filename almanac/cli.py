"""Console program that runs the worked examples.

Usage:
    almanac [--list] [--log-level L] [--workers N] [--locale L] [EXAMPLE ...]

With no EXAMPLE the pay-day example runs. Example output goes to stdout;
diagnostics go to stderr through logging.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from almanac import __version__
from almanac.config import Settings
from almanac.errors import AlmanacError
from almanac.examples import DEFAULT_EXAMPLE, EXAMPLES

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="almanac",
        description="Run calendrical and concurrency examples.",
    )
    parser.add_argument("examples", nargs="*", metavar="EXAMPLE", help="examples to run")
    parser.add_argument("--list", action="store_true", help="list the examples and exit")
    parser.add_argument("--log-level", help="logging level (env: ALMANAC_LOG_LEVEL)")
    parser.add_argument("--workers", type=int, help="pool size (env: ALMANAC_WORKERS)")
    parser.add_argument("--locale", help="locale for localized output (env: ALMANAC_LOCALE)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def list_examples() -> None:
    width = max(len(name) for name in EXAMPLES)
    for name, example in EXAMPLES.items():
        summary = (example.__doc__ or "").strip().split("\n")[0]
        print(f"{name:<{width}}  {summary}")


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, configure logging and run the selected examples.

    Returns:
        0 on success, 1 if an example failed, 2 on a usage error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env().override(
            log_level=args.log_level, workers=args.workers, locale=args.locale
        )
    except AlmanacError as exc:
        print(f"almanac: {exc}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(
        level=settings.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("settings: %r", settings)

    if args.list:
        list_examples()
        return EXIT_OK

    names = args.examples or [DEFAULT_EXAMPLE]
    unknown = [name for name in names if name not in EXAMPLES]
    if unknown:
        print(f"almanac: unknown example(s): {', '.join(unknown)}", file=sys.stderr)
        print(f"available: {', '.join(EXAMPLES)}", file=sys.stderr)
        return EXIT_USAGE

    status = EXIT_OK
    for name in names:
        logger.info("running %s", name)
        try:
            EXAMPLES[name](settings)
        except AlmanacError:
            logger.exception("example %s failed", name)
            status = EXIT_FAILURE
    return status


__all__ = ["main", "build_parser", "list_examples"]
