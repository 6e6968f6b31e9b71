"""histogram-lite CLI entry point.

Usage: histogram-lite [--verbose] {chars,words,compare} ...
"""
import argparse
import logging
import sys

from histogram_lite.core.histogram import Histogram
from histogram_lite.reporting.report import format_comparison, format_report

log = logging.getLogger(__name__)


def _add_chars_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "chars",
        help="Histogram of the characters in one or more strings.",
    )
    p.add_argument("texts", nargs="+", help="Strings to split into characters.")
    p.add_argument(
        "--top", type=int, default=10,
        help="Number of most frequent items to list (default: 10)",
    )


def _add_words_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "words",
        help="Histogram of whitespace-separated words in a file or stdin.",
    )
    p.add_argument(
        "file", nargs="?", default="-",
        help="Input file, or - for stdin (default: -)",
    )
    p.add_argument(
        "--top", type=int, default=10,
        help="Number of most frequent items to list (default: 10)",
    )
    p.add_argument(
        "--casefold", action="store_true",
        help="Count words case-insensitively.",
    )


def _add_compare_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "compare",
        help="Compare the character histograms of two strings.",
    )
    p.add_argument("a", help="First string.")
    p.add_argument("b", help="Second string.")


def _run_chars(args: argparse.Namespace) -> None:
    hist = Histogram().add_string_chars(*args.texts)
    print(format_report(hist, label="Characters", top=args.top))


def _count_words(hist: Histogram, lines) -> None:
    for line in lines:
        hist.add(*line.split())


def _run_words(args: argparse.Namespace) -> None:
    hist = Histogram()
    if args.casefold:
        hist.key(lambda word: word.casefold())
    if args.file == "-":
        _count_words(hist, sys.stdin)
    else:
        with open(args.file, encoding="utf-8") as fh:
            _count_words(hist, fh)
    log.debug("Read %d words, %d distinct", hist.total(), hist.size())
    print(format_report(hist, label="Words", top=args.top))


def _run_compare(args: argparse.Namespace) -> None:
    a = Histogram().add_string_chars(args.a)
    b = Histogram().add_string_chars(args.b)
    print(format_comparison(a, b))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="histogram-lite",
        description="Frequency histograms with entropy and set comparison.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_chars_parser(subparsers)
    _add_words_parser(subparsers)
    _add_compare_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "chars":
        _run_chars(args)
    elif args.command == "words":
        _run_words(args)
    elif args.command == "compare":
        _run_compare(args)
