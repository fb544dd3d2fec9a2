"""Tests for record summaries."""

from ojad_accent.models import WordRecord
from ojad_accent.reporter import print_summary, summarize


WORDS = [
    WordRecord("雨", ("あ", "め"), 1, "noun"),
    WordRecord("雨", ("あ", "め"), 1, "noun"),
    WordRecord("表示", ("ひょ", "う", "じ"), 0, "noun"),
    WordRecord("あく", ("あ", "く"), 2, "verb"),
]


def test_summarize():
    summary = summarize(WORDS)
    assert summary["total"] == 4
    assert summary["unique"] == 3
    assert summary["heiban"] == 1
    assert summary["accented"] == 3
    assert summary["avg_morae"] == 2.25
    assert summary["by_pos"] == {"noun": 3, "verb": 1}
    assert summary["by_accent"] == {1: 2, 0: 1, 2: 1}


def test_summarize_empty():
    assert summarize([]) == {}


def test_print_summary(capsys):
    summary = print_summary(WORDS)
    out = capsys.readouterr().out
    assert "Total records: 4 (3 unique)" in out
    assert "noun: 3" in out
    assert summary["total"] == 4


def test_print_summary_empty(capsys):
    assert print_summary([]) == {}
    assert "No records" in capsys.readouterr().out
