from __future__ import annotations

"""Command line entry point.

``ditawiki convert SRC -o OUT`` indexes a directory of DITA topics, converts
every topic with a unique title into a wiki page and writes the pages as JSON.
``ditawiki map SRC`` only prints the title mapping and its errors.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ditawiki.core.exceptions import DitawikiError
from ditawiki.core.importers import TopicIndexer
from ditawiki.core.mapping import create_mapping
from ditawiki.core.services import ConversionService
from ditawiki.logging_config import setup_logging
from ditawiki.version import get_app_version

logger = logging.getLogger(__name__)

__all__ = ["build_parser", "main"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ditawiki",
        description="Convert a directory of DITA topics into federated-wiki pages.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_app_version()}")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to the console")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors to the console")

    sub = parser.add_subparsers(dest="command", required=True)

    convert = sub.add_parser("convert", help="Convert topics and write JSON pages")
    convert.add_argument("source", help="Directory holding the DITA topics")
    convert.add_argument("-o", "--output", required=True, help="Output directory for the pages")
    convert.add_argument("-w", "--workers", type=int, default=None,
                         help="Worker threads (default: from conversion.yml)")
    convert.add_argument("--strict", action="store_true",
                         help="Abort on the first topic that cannot be parsed")

    mapping = sub.add_parser("map", help="Print the title -> slug mapping")
    mapping.add_argument("source", help="Directory holding the DITA topics")
    return parser


def _console_level(args: argparse.Namespace) -> Optional[int]:
    if args.verbose:
        return logging.DEBUG
    if args.quiet:
        return logging.ERROR
    return None


def _run_convert(args: argparse.Namespace) -> int:
    service = ConversionService(workers=args.workers)
    report = service.convert_directory(args.source, args.output, strict=args.strict)

    for error in report.mapping_errors:
        print(f"mapping: {error}", file=sys.stderr)
    for slug, errors in report.diagnostics.items():
        for error in errors:
            print(f"{slug}: {error}", file=sys.stderr)
    for slug, error in report.fatal.items():
        print(f"{slug}: FATAL {error}", file=sys.stderr)

    print(
        f"{len(report.pages)} page(s) written to {args.output}; "
        f"{report.diagnostic_count} diagnostic(s), {len(report.fatal)} fatal, "
        f"{len(report.mapping_errors)} mapping error(s)"
    )
    return 0 if report.ok else 1


def _run_map(args: argparse.Namespace) -> int:
    index = TopicIndexer().index_directory(args.source)
    mapping, errors = create_mapping(index)
    for topic in mapping.topics_sorted():
        slug = mapping.slug_for(topic)
        print(f"{topic.filename}\t{slug if slug is not None else '-'}\t{topic.title}")
    for error in errors:
        print(f"mapping: {error}", file=sys.stderr)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(_console_level(args))
    logger.info("ditawiki %s: %s %s", get_app_version(), args.command, args.source)

    try:
        if args.command == "convert":
            return _run_convert(args)
        return _run_map(args)
    except DitawikiError as exc:
        logger.error("%s failed: %s", args.command, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
