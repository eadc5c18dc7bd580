"""Lists the URLs the Wayback Machine has captured under a domain."""

from __future__ import annotations

import argparse
import sys

from . import console
from .archive import DEFAULT_TIMEOUT, Archive
from .errors import ArchiveError


def build_parser() -> argparse.ArgumentParser:
    """Returns the CLI argument parser."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "query", help="domain or URL prefix to look up, for example example.com"
    )
    parser.add_argument(
        "--params", action="store_true", help="only show URLs with a query string"
    )
    parser.add_argument(
        "--ext",
        metavar="EXT",
        help="only show URLs with a query string and this extension, e.g. .php",
    )
    parser.add_argument(
        "--json", action="store_true", help="print the result as a JSON document"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="request timeout in seconds (default: %(default)s)",
    )
    parser.add_argument(
        "--strict", action="store_true", help="fail on HTTP error statuses"
    )
    return parser


def run(args: argparse.Namespace) -> None:
    """Fetches, filters and prints URLs.

    :raises ArchiveError: fetching or encoding the URLs failed
    """
    archive = Archive(args.query, timeout=args.timeout, check_status=args.strict)
    result = archive.fetch_urls()
    if args.params:
        result = result.has_params()
    if args.ext is not None:
        result = result.filter_by_extension(args.ext)
    if args.json:
        console.display_json(result)
    else:
        console.display_urls(result)


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint."""
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except ArchiveError as exc:
        console.display_error(str(exc))
        sys.exit(1)
