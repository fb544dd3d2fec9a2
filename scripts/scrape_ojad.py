#!/usr/bin/env python3
"""Scrape dictionary-form pitch accents for whole OJAD categories.

Usage:
    # Scrape nouns, adjectives and verbs into data/ojad_words.jsonl.gz
    python scripts/scrape_ojad.py

    # Only verbs, uncompressed output
    python scripts/scrape_ojad.py --category verb --out data/verbs.jsonl

    # Summarize an existing output file
    python scripts/scrape_ojad.py --summary data/ojad_words.jsonl.gz

A category whose page request fails is skipped; the others are still saved
and the script exits with status 1.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add scripts directory to path
sys.path.insert(0, str(Path(__file__).parent))

from ojad_accent.config import (
    DEFAULT_CATEGORIES,
    DEFAULT_LOG_PATH,
    DEFAULT_OUTPUT_PATH,
    PAGE_DELAY,
)
from ojad_accent.logs import get_logger, set_console_level, setup_file_logging
from ojad_accent.reporter import print_summary
from ojad_accent.scraper import ScrapeStats, scrape_categories
from ojad_accent.storage import load_words, save_words


CATEGORY_NAMES = [c.name for c in DEFAULT_CATEGORIES]


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Scrape pitch accent data from OJAD",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--out", "-o",
        type=Path,
        default=DEFAULT_OUTPUT_PATH,
        help="Output JSON-lines file, gzip if the name contains .gz "
             f"(default: {DEFAULT_OUTPUT_PATH.name})",
    )
    parser.add_argument(
        "--category", "-c",
        action="append",
        choices=CATEGORY_NAMES,
        default=None,
        help="Category to scrape (repeatable, default: all)",
    )
    parser.add_argument(
        "--delay", "-d",
        type=float,
        default=PAGE_DELAY,
        help=f"Seconds between page requests (default: {PAGE_DELAY})",
    )
    parser.add_argument(
        "--summary", "-s",
        type=Path,
        default=None,
        metavar="FILE",
        help="Print a summary of an existing output file and exit",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=DEFAULT_LOG_PATH,
        help="Debug log file",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every record and skipped row to the console",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    if args.summary:
        print_summary(load_words(args.summary))
        return 0

    setup_file_logging(args.log_file)
    set_console_level(logging.DEBUG if args.verbose else logging.INFO)
    logger = get_logger()

    selected = args.category or CATEGORY_NAMES
    categories = [c for c in DEFAULT_CATEGORIES if c.name in selected]

    stats = ScrapeStats()
    results = scrape_categories(
        categories,
        delay=args.delay,
        stats=stats,
        progress=not args.no_progress,
    )

    written = save_words(results.records, args.out)
    logger.info(f"Saved {written:,} records to {args.out}")
    logger.info(stats.report())

    for name, count in results.counts.items():
        logger.info(f"  {name}: {count:,}")
    for name, error in results.failures.items():
        logger.error(f"  {name}: FAILED ({error})")

    print_summary(results.records)

    return 0 if results.ok else 1


if __name__ == "__main__":
    sys.exit(main())
