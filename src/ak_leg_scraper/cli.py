"""Command-line interface for the Alaska Legislature roster scraper."""

import argparse
from pathlib import Path

from ak_leg_scraper.config import DEFAULT_TARGET, REQUEST_TIMEOUT
from ak_leg_scraper.models import STATUS_NO_MATCH
from ak_leg_scraper.scraper import LegislatorScraper
from ak_leg_scraper.target import KNOWN_TARGETS, SiteTarget

# Exit codes used with --strict
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NO_MATCH = 2


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ak-leg-scraper",
        description="Scrape legislator contact records from the Alaska Legislature website.",
    )
    parser.add_argument(
        "--target",
        "-t",
        choices=sorted(KNOWN_TARGETS),
        default=DEFAULT_TARGET,
        help=f"Roster page to scrape (default: {DEFAULT_TARGET})",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output JSON file (default: senators.json or representatives.json)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=REQUEST_TIMEOUT,
        help=f"HTTP timeout in seconds (default: {REQUEST_TIMEOUT})",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero on fetch/write failure (1) or when nothing matched (2)",
    )
    parser.add_argument(
        "--list-targets",
        action="store_true",
        help="List known roster pages and exit",
    )

    args = parser.parse_args(argv)

    if args.list_targets:
        print("Known Alaska Legislature roster pages:")
        print()
        for key in sorted(KNOWN_TARGETS):
            t = KNOWN_TARGETS[key]
            print(f"    {key:8s} {t.title:16s} {t.url}  -> {t.output_file}")
        return EXIT_OK

    scraper = LegislatorScraper(
        target=SiteTarget.from_name(args.target),
        output_path=args.output,
        timeout=args.timeout,
    )
    result = scraper.run()

    if not args.strict or result.ok:
        return EXIT_OK
    if result.status == STATUS_NO_MATCH:
        return EXIT_NO_MATCH
    return EXIT_FAILURE
