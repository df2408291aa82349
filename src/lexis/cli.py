"""Command line front end: scan a source file and print the token report."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from lexis.config import ScanConfig
from lexis.report import error_tokens, format_errors, has_errors, render_report
from lexis.scanner import Scanner
from lexis.serialization import to_json
from lexis.sources import read_keywords_or_default, read_source_or_empty


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexis", description="Scan a Java-like source file into tokens"
    )
    parser.add_argument("path", type=Path, help="Path to the source file")
    parser.add_argument(
        "-k",
        "--keywords",
        type=Path,
        help="Reserved word list, one per line (default: Java keywords)",
    )
    parser.add_argument(
        "--errors-only", action="store_true", help="Print only error tokens"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print tokens as a JSON array"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = ScanConfig()
    if args.keywords is not None:
        config = config.with_keywords(read_keywords_or_default(args.keywords))

    source = read_source_or_empty(args.path)
    tokens = Scanner(source, config=config, source_file=str(args.path)).scan()

    if args.json:
        print(to_json(error_tokens(tokens) if args.errors_only else tokens, indent=2))
    elif args.errors_only:
        for line in format_errors(tokens):
            print(line)
    else:
        sys.stdout.write(render_report(tokens))

    return 1 if has_errors(tokens) else 0


if __name__ == "__main__":
    raise SystemExit(main())
