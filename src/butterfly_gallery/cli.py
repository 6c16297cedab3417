"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from butterfly_gallery import __version__
from butterfly_gallery.config import get_settings
from butterfly_gallery.extraction import is_recent_date
from butterfly_gallery.flows.scan import OBSERVATIONS_PATH, scan_all_pages, store
from butterfly_gallery.gallery import chunk_rows, collection_stats, page_window, paginate
from butterfly_gallery.schemas import Observation, SearchParams
from butterfly_gallery.search import filter_observations


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="butterfly-gallery",
        description="Scrape butterfly gallery pages into searchable observation records",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    scan_parser = subparsers.add_parser("scan", help="Scan gallery pages and save observations")
    scan_parser.add_argument(
        "--force",
        action="store_true",
        help="Rescan even if saved observations are still fresh",
    )

    search_parser = subparsers.add_parser("search", help="Search saved observations")
    search_parser.add_argument("--species", type=str, default=None, help="Scientific/common name")
    search_parser.add_argument("--location", type=str, default=None, help="e.g. Florida or AZ")
    search_parser.add_argument("--from", dest="date_from", default=None, help="YYYY-MM-DD")
    search_parser.add_argument("--to", dest="date_to", default=None, help="YYYY-MM-DD")
    search_parser.add_argument("--page", type=int, default=1, help="Result page (default: 1)")
    search_parser.add_argument(
        "--page-size",
        type=int,
        default=None,
        help="Results per page (default: page_size from settings)",
    )

    subparsers.add_parser("stats", help="Show extraction statistics for saved observations")

    return parser


def _load_observations() -> list[Observation] | None:
    observations = store.read_observations(OBSERVATIONS_PATH)
    if observations is None:
        print("No observations found. Run 'butterfly-gallery scan' first.", file=sys.stderr)
    return observations


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Data dir: {settings.data_dir}")
    return 0


def cmd_scan(args: argparse.Namespace) -> int:
    """Handle the 'scan' command."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings}")

    result = scan_all_pages(force=args.force)
    errors = result.get("errors", {})
    for url, error in errors.items():
        print(f"Error: {url}: {error}", file=sys.stderr)

    print(f"{result['observations']} observations available.")
    # Every page failing means nothing new was collected.
    if result["pages"] and len(errors) == result["pages"]:
        return 1
    return 0


def cmd_search(args: argparse.Namespace) -> int:
    """Handle the 'search' command."""
    settings = get_settings()
    try:
        params = SearchParams(
            species=args.species,
            location=args.location,
            date_from=args.date_from,
            date_to=args.date_to,
        )
    except ValidationError as exc:
        print(f"Error: invalid search: {exc}", file=sys.stderr)
        return 2

    observations = _load_observations()
    if observations is None:
        return 1

    matches = filter_observations(observations, params)
    page = paginate(matches, args.page, args.page_size or settings.page_size)

    suffix = " (filtered)" if not params.is_empty else ""
    print(f"{page.summary} matching species{suffix}")
    for i, row in enumerate(chunk_rows(page.items, settings.images_per_row)):
        if i:
            print()
        for obs in row:
            print(_format_row(obs, settings.recency_days))
    if page.total_pages > 1:
        pages = " ".join(
            f"[{n}]" if n == page.page else str(n)
            for n in page_window(page.page, page.total_pages)
        )
        print(f"Page {page.page} of {page.total_pages}: {pages}")
    return 0


def _format_row(obs: Observation, recency_days: int) -> str:
    if obs.observed_on is None:
        when, recent = "undated", " "
    else:
        when = obs.observed_on.isoformat()
        recent = "*" if is_recent_date(obs.observed_on, recency_days) else " "
    where = obs.location or obs.source_page
    return f"{recent} {when:10}  {obs.species} - {obs.common_name}  [{where}]"


def cmd_stats(_args: argparse.Namespace) -> int:
    """Handle the 'stats' command."""
    observations = _load_observations()
    if observations is None:
        return 1

    stats = collection_stats(observations)
    print(f"Total images: {stats.total}")
    print(f"With date: {stats.with_date}")
    print(f"With coordinates: {stats.with_coordinates}")
    print("Images by page:")
    for name, count in sorted(stats.by_source_page.items()):
        print(f"  {name}: {count}")
    print("Extraction methods:")
    for method, count in sorted(stats.by_extraction_method.items()):
        print(f"  {method}: {count}")
    print(f"Unknown species/names: {stats.unidentified}/{stats.total}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "scan": cmd_scan,
        "search": cmd_search,
        "stats": cmd_stats,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
