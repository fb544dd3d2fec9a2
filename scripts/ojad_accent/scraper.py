"""Bulk scraper for the OJAD search index.

Walks every result page of an OJAD category query (nouns, verbs,
adjectives...) and collects one WordRecord per dictionary-form accent
pattern.

Features:
- Fixed delay between page requests to stay polite with the server
- Fail-fast per category: a failed page request aborts that category
- Per-category isolation when scraping several categories
- Progress metrics
"""

import http.client
import time
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from tqdm import tqdm

from .config import DEFAULT_CATEGORIES, DEFAULT_HEADERS, PAGE_DELAY, REQUEST_TIMEOUT, Category
from .errors import FetchError
from .logs import get_logger
from .models import WordRecord
from .parser import extract_row, find_word_rows, get_total_pages, parse_document


Fetcher = Callable[[str], bytes]


# ============================================================================
# Data Classes
# ============================================================================

@dataclass
class ScrapeStats:
    """Statistics for scraping progress."""
    pages: int = 0
    rows: int = 0
    records: int = 0
    skipped_rows: int = 0
    empty_pages: int = 0
    start_time: float = field(default_factory=time.time)

    def rate(self) -> float:
        """Pages per second."""
        elapsed = time.time() - self.start_time
        return self.pages / elapsed if elapsed > 0 else 0

    def report(self) -> str:
        """Generate progress report."""
        elapsed = time.time() - self.start_time

        lines = [
            f"Progress: {self.pages:,} pages processed",
            f"  Rows: {self.rows:,}",
            f"  Records: {self.records:,}",
            f"  Rows without records: {self.skipped_rows:,}",
            f"  Empty pages: {self.empty_pages:,}",
            f"  Rate: {self.rate():.2f} pages/sec",
            f"  Elapsed: {elapsed/60:.1f} minutes",
        ]
        return "\n".join(lines)


@dataclass
class CategoryResults:
    """Outcome of scraping several categories."""
    records: List[WordRecord] = field(default_factory=list)
    counts: Dict[str, int] = field(default_factory=dict)
    failures: Dict[str, FetchError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures


# ============================================================================
# HTTP Request
# ============================================================================

def fetch_url(
    url: str,
    headers: Optional[Dict[str, str]] = None,
    timeout: float = REQUEST_TIMEOUT,
) -> bytes:
    """Fetch a URL and return the response body.

    Raises:
        FetchError: On a non-success status or network failure.
    """
    logger = get_logger()
    req = urllib.request.Request(url, headers=headers or DEFAULT_HEADERS)

    try:
        with urllib.request.urlopen(req, timeout=timeout) as response:
            return response.read()
    except urllib.error.HTTPError as e:
        logger.error(f"HTTP {e.code} for {url}")
        raise FetchError(url, status=e.code, reason=str(e.reason)) from e
    except (http.client.HTTPException, OSError) as e:
        # URLError, timeouts and connection drops while reading the body
        reason = getattr(e, "reason", None) or e
        logger.error(f"Request failed: {url} - {reason}")
        raise FetchError(url, reason=str(reason)) from e


def page_url(url: str, page: int) -> str:
    """URL of a result page; page 1 is the query URL itself."""
    if page == 1:
        return url
    return f"{url}/page:{page}"


# ============================================================================
# Main Scraping Functions
# ============================================================================

def scrape_category(
    url: str,
    part_of_speech: str,
    fetch: Fetcher = fetch_url,
    delay: float = PAGE_DELAY,
    stats: Optional[ScrapeStats] = None,
    progress: bool = False,
) -> List[WordRecord]:
    """Scrape every result page of one OJAD query.

    Args:
        url: Query URL of the first result page.
        part_of_speech: Tag attached to every record.
        fetch: Callable returning the body of a URL, raising FetchError.
        delay: Seconds to wait before each request after the first.
        stats: Optional stats object updated in place.
        progress: Show a progress bar over pages.

    Returns:
        Records in page order, then row order within each page.

    Raises:
        FetchError: If any page request fails. Nothing is returned for the
            category in that case.
    """
    logger = get_logger()
    stats = stats if stats is not None else ScrapeStats()

    logger.info(f"Fetching search results for {url}")
    first_doc = parse_document(fetch(url))

    total_pages = get_total_pages(first_doc)
    logger.info(f"Found {total_pages} total pages")

    words: List[WordRecord] = []
    pages = tqdm(
        range(1, total_pages + 1),
        desc=part_of_speech or "pages",
        unit="page",
        disable=not progress,
    )

    for page in pages:
        if page == 1:
            doc = first_doc
        else:
            time.sleep(delay)
            doc = parse_document(fetch(page_url(url, page)))

        stats.pages += 1
        rows = find_word_rows(doc)
        if not rows:
            logger.warning(f"No data rows found on page {page}")
            stats.empty_pages += 1
            continue

        logger.debug(f"Found {len(rows)} table rows on page {page}")

        for row in rows:
            records = extract_row(row, part_of_speech)
            stats.rows += 1
            if not records:
                stats.skipped_rows += 1
                continue
            for record in records:
                logger.debug(str(record))
            words.extend(records)
            stats.records += len(records)

    logger.info(f"Completed scraping all {total_pages} pages: {len(words):,} records")
    return words


def scrape_categories(
    categories: Sequence[Category] = DEFAULT_CATEGORIES,
    fetch: Fetcher = fetch_url,
    delay: float = PAGE_DELAY,
    stats: Optional[ScrapeStats] = None,
    progress: bool = False,
) -> CategoryResults:
    """Scrape several categories in order.

    A failed category is recorded in ``failures`` and contributes no
    records; the others are unaffected. Records are not deduplicated
    across categories.
    """
    logger = get_logger()
    results = CategoryResults()

    for category in categories:
        try:
            words = scrape_category(
                category.url,
                category.part_of_speech,
                fetch=fetch,
                delay=delay,
                stats=stats,
                progress=progress,
            )
        except FetchError as e:
            logger.error(f"Category {category.name} aborted: {e}")
            results.failures[category.name] = e
            continue

        results.records.extend(words)
        results.counts[category.name] = len(words)

    return results
