"""Command-line front door for pathdiff.

Parses CLI options, resolves colour and theme preferences, and runs one
comparison of two paths. Maps engine failures onto process exit statuses.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .compare import ComparisonScheduler
from .config import load_no_color, load_theme_name
from .errors import ComparisonAborted, ComparisonFault, MixedPathTypesError
from .log import setup_logging
from .report import ReportSink
from .ui_theme import available_theme_names, resolve_theme

EXIT_MIXED_TYPES = 1
# Distinct from argparse's usage-error status 2.
EXIT_FAULT = 3

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathdiff",
        usage="%(prog)s [flags] path1 path2",
        description=(
            "Compare two files or two directories and report differences. "
            "Report lines are not printed in any specific order and may vary "
            "across runs as comparisons run in parallel."
        ),
    )
    parser.add_argument("paths", nargs="*", metavar="path", help="Two files or two directories to compare.")
    parser.add_argument("-r", "--recursive", action="store_true", help="Recursively compare directories.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Report color theme ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def _stdout_is_tty() -> bool:
    isatty = getattr(sys.stdout, "isatty", None)
    try:
        return bool(isatty is not None and isatty())
    except ValueError:
        return False


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and compare the two given paths.

    Exits 0 after a completed comparison or when usage is printed (including a
    wrong number of paths), 1 when a file is compared with a directory, and 3
    when any comparison task fails (I/O or otherwise).
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if len(args.paths) != 2:
        parser.print_help()
        return

    no_color = args.no_color or load_no_color() or not _stdout_is_tty()
    theme = resolve_theme(args.theme or load_theme_name(), no_color=no_color)
    sink = ReportSink(sys.stdout, theme)
    scheduler = ComparisonScheduler(sink, recursive=args.recursive)

    path_a, path_b = args.paths
    try:
        scheduler.compare_paths(path_a, path_b)
    except MixedPathTypesError as exc:
        print(exc)
        raise SystemExit(EXIT_MIXED_TYPES) from exc
    except ComparisonFault as exc:
        logger.error("internal fault: %r", exc.error, exc_info=exc.error)
        raise SystemExit(EXIT_FAULT) from exc
    except ComparisonAborted as exc:
        logger.error("%s", exc)
        raise SystemExit(EXIT_FAULT) from exc


if __name__ == "__main__":
    main()
