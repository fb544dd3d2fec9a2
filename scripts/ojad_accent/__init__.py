"""OJAD pitch accent collection module."""

from .errors import FetchError, OJADError
from .models import WordRecord
from .parser import (
    extract_row,
    get_total_pages,
    parse_accented_word,
    parse_document,
    parse_midashi,
)
from .reporter import print_summary, summarize
from .scraper import ScrapeStats, fetch_url, scrape_categories, scrape_category
from .storage import load_words, save_words

__all__ = [
    "FetchError",
    "OJADError",
    "WordRecord",
    "extract_row",
    "get_total_pages",
    "parse_accented_word",
    "parse_document",
    "parse_midashi",
    "print_summary",
    "summarize",
    "ScrapeStats",
    "fetch_url",
    "scrape_categories",
    "scrape_category",
    "load_words",
    "save_words",
]
