"""Builders for OJAD-shaped HTML used across the tests."""

from typing import List, Optional, Sequence


def mora_span(chars: str, offset: int, top: bool = False) -> str:
    classes = f"accent_top mola_-{offset}" if top else f" accent_plain mola_-{offset}"
    inner = "".join(f'<span class="char">{c}</span>' for c in chars)
    return f'<span class="{classes}"><span class="inner">{inner}</span></span>'


def accented_word(morae: Sequence[str], accent: int = 0, extra_peaks: Sequence[int] = ()) -> str:
    """Render an accented_word span with the peak on mora ``accent`` (1-based)."""
    n = len(morae)
    spans = [
        mora_span(m, n - i, top=(i + 1 == accent or i + 1 in extra_peaks))
        for i, m in enumerate(morae)
    ]
    return f'<span class="accented_word">{"".join(spans)}</span>'


def word_row(row_id: int, headline: Optional[str], patterns: List[str]) -> str:
    """Render a word_table row. ``headline=None`` omits the headline cell."""
    midashi = ""
    if headline is not None:
        midashi = (
            '<td class="midashi"><div class="midashi">'
            '<div class="midashi_wrapper">'
            f'<p class="midashi_word">{headline}</p>'
            "</div></div></td>"
        )
    accents = "".join(
        f'<p><span class="katsuyo_accent">{p}</span></p>' for p in patterns
    )
    jisho = (
        '<td class="katsuyo"><div class="katsuyo_jisho_js">'
        f'<div class="katsuyo_proc">{accents}</div>'
        "</div></td>"
    )
    return f'<tr id="word_{row_id}">{midashi}{jisho}</tr>'


def paginator(labels: Sequence[str]) -> str:
    links = "".join(f'<a href="#">{label}</a>' for label in labels)
    return f'<div id="paginator">{links}</div>'


def results_page(rows: Sequence[str], pages: Optional[Sequence[str]] = None) -> str:
    nav = paginator(pages) if pages is not None else ""
    table = ""
    if rows:
        table = f'<table id="word_table"><tbody>{"".join(rows)}</tbody></table>'
    return f"<html><body>{nav}{table}</body></html>"
