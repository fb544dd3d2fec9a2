"""Collector configuration."""

from pathlib import Path
from typing import NamedTuple


OJAD_BASE = "https://www.gavo.t.u-tokyo.ac.jp/ojad"
SEARCH_URL = f"{OJAD_BASE}/search/index"

# Rate limiting: pause between page requests of one category
PAGE_DELAY = 0.4  # seconds
REQUEST_TIMEOUT = 30  # seconds

DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (compatible; ojad-accent-scraper/0.1; research)",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "ja,en;q=0.5",
}

# Paths
DATA_DIR = Path(__file__).parent.parent.parent / "data"
DEFAULT_OUTPUT_PATH = DATA_DIR / "ojad_words.jsonl.gz"
DEFAULT_LOG_PATH = DATA_DIR / "ojad_scraper.log"


class Category(NamedTuple):
    """One OJAD search query and the part of speech its results get."""
    name: str
    url: str
    part_of_speech: str


def category_url(category: str, limit: int = 100) -> str:
    """Build the search index URL for an OJAD category id."""
    return f"{SEARCH_URL}/category:{category}/limit:{limit}"


DEFAULT_CATEGORIES = [
    Category("noun", category_url("6"), "noun"),
    Category("i_adjective", category_url("4"), "adjective"),
    Category("na_adjective", category_url("5"), "adjective"),
    Category("verb", category_url("verb"), "verb"),
]
