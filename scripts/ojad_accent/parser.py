"""Parse OJAD search result pages.

A results page lists words in ``#word_table``. Each word row carries a
headline (midashi) cell and one or more ``accented_word`` spans showing the
dictionary form with its pitch accent. An ``accented_word`` looks like this
(the word is heiban):

    <span class="accented_word">
        <span class="mola_-3">
            <span class="inner"><span class="char">ひ</span><span class="char">ょ</span></span>
        </span>
        <span class=" accent_plain mola_-2">
            <span class="inner"><span class="char">う</span></span>
        </span>
        <span class=" accent_plain mola_-1">
            <span class="inner"><span class="char">じ</span></span>
        </span>
    </span>

If the word has an accent, the mora where the pitch peaks carries the
``accent_top`` class.
"""

import re
from typing import List, Optional, Tuple, Union

from bs4 import BeautifulSoup, Tag

from .logs import get_logger
from .models import WordRecord


# Separators for masu/desu forms and い/な adjective stems, e.g. "あく・あける"
MIDASHI_SEP_RE = re.compile(r"(?:\[な\])?・")
PAGE_NUMBER_RE = re.compile(r"^[0-9]+$")

WORD_ROW_SELECTOR = '#word_table tr[id^="word_"]'
HEADLINE_SELECTOR = "td .midashi .midashi_wrapper .midashi_word"
JISHO_ACCENT_SELECTOR = "td .katsuyo_jisho_js .katsuyo_proc p .katsuyo_accent .accented_word"
MORA_SELECTOR = 'span[class*="mola_"]'
CHAR_SELECTOR = ".inner .char"
ACCENT_TOP_CLASS = "accent_top"


def parse_document(content: Union[bytes, str], encoding: str = "utf-8") -> BeautifulSoup:
    """Parse a raw HTML response into a navigable document.

    OJAD serves UTF-8, so raw bytes are decoded as such rather than sniffed.
    """
    if isinstance(content, bytes):
        return BeautifulSoup(content, "html.parser", from_encoding=encoding)
    return BeautifulSoup(content, "html.parser")


def parse_midashi(headline: str) -> str:
    """Return the dictionary-form part of a headline.

    Examples:
        "あく・あける" → "あく"
        "きれい[な]・です" → "きれい"
        "ひょうじ" → "ひょうじ"
    """
    return MIDASHI_SEP_RE.split(headline, maxsplit=1)[0]


def parse_accented_word(node: Tag) -> Tuple[Tuple[str, ...], int]:
    """Extract morae and accent position from an ``accented_word`` node.

    Args:
        node: The ``accented_word`` element.

    Returns:
        (morae, accent_idx) where accent_idx is the 1-based position of the
        ``accent_top`` mora, or 0 for heiban. Returns ((), 0) when the node
        has no mora spans.
    """
    morae = []
    accent_idx = 0
    peaks = 0

    for i, mora_span in enumerate(node.select(MORA_SELECTOR), start=1):
        # A mora may be written with several characters (ひょ)
        chars = mora_span.select(CHAR_SELECTOR)
        morae.append("".join(char.get_text() for char in chars))

        if ACCENT_TOP_CLASS in mora_span.get("class", []):
            peaks += 1
            if accent_idx == 0:
                accent_idx = i

    if peaks > 1:
        get_logger().warning(
            f"{peaks} accent peaks in {''.join(morae)}, using mora {accent_idx}"
        )

    return tuple(morae), accent_idx


def get_total_pages(doc: Union[BeautifulSoup, Tag]) -> int:
    """Return the page count advertised by the ``#paginator`` region.

    Non-numeric links such as 次へ are ignored. Documents without a
    paginator are a single page.
    """
    paginator = doc.select_one("#paginator")
    if paginator is None:
        return 1

    max_page = 1
    for link in paginator.select("a"):
        text = link.get_text().strip()
        if PAGE_NUMBER_RE.match(text):
            max_page = max(max_page, int(text))

    return max_page


def find_word_rows(doc: Union[BeautifulSoup, Tag]) -> List[Tag]:
    """Return the word rows of the results table, in document order."""
    return doc.select(WORD_ROW_SELECTOR)


def find_headline(row: Tag) -> Optional[str]:
    """Return the raw headline text of a row, or None if it has no headline cell."""
    cell = row.select_one(HEADLINE_SELECTOR)
    if cell is None:
        return None
    return cell.get_text().strip()


def find_accent_patterns(row: Tag) -> List[Tag]:
    """Return the dictionary-form ``accented_word`` nodes of a row.

    Verbs can list several accent patterns for the same headline.
    """
    return row.select(JISHO_ACCENT_SELECTOR)


def extract_row(row: Tag, part_of_speech: str = "") -> List[WordRecord]:
    """Build one WordRecord per accent pattern found in a word row.

    Rows without a headline are skipped. Rows without accent patterns
    yield nothing.
    """
    logger = get_logger()

    headline = find_headline(row)
    if headline is None:
        logger.info(f"Row {row.get('id', '?')} has no headline, skipping")
        return []

    kanji = parse_midashi(headline)
    records = []

    for pattern in find_accent_patterns(row):
        morae, accent_idx = parse_accented_word(pattern)
        if not morae:
            logger.debug(f"Empty accent pattern for {kanji}, skipping")
            continue
        records.append(WordRecord(kanji, morae, accent_idx, part_of_speech))

    return records
