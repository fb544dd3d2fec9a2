"""Tests for the scrape_ojad.py command-line script."""

import logging

import pytest

import scrape_ojad
from ojad_accent.errors import FetchError
from ojad_accent.models import WordRecord
from ojad_accent.scraper import CategoryResults
from ojad_accent.storage import load_words, save_words


WORDS = [WordRecord("雨", ("あ", "め"), 1, "noun")]


@pytest.fixture
def fake_scrape(monkeypatch):
    calls = {}

    def fake(categories, delay, stats, progress):
        calls["categories"] = [c.name for c in categories]
        calls["delay"] = delay
        calls["progress"] = progress
        return calls["results"]

    calls["results"] = CategoryResults(records=list(WORDS), counts={"noun": 1})
    monkeypatch.setattr(scrape_ojad, "scrape_categories", fake)
    return calls


def test_scrape_selected_categories(tmp_path, fake_scrape):
    out = tmp_path / "words.jsonl.gz"
    code = scrape_ojad.main([
        "--out", str(out),
        "--category", "verb",
        "--category", "noun",
        "--delay", "0",
        "--no-progress",
        "--log-file", str(tmp_path / "scrape.log"),
    ])

    assert code == 0
    # Category order follows the default list, not the command line
    assert fake_scrape["categories"] == ["noun", "verb"]
    assert fake_scrape["delay"] == 0
    assert fake_scrape["progress"] is False
    assert load_words(out) == WORDS


def test_failure_exit_code_still_saves(tmp_path, fake_scrape):
    fake_scrape["results"] = CategoryResults(
        records=list(WORDS),
        counts={"noun": 1},
        failures={"verb": FetchError("https://example.test", status=500)},
    )
    out = tmp_path / "words.jsonl"

    code = scrape_ojad.main(["--out", str(out), "--log-file", str(tmp_path / "scrape.log")])

    assert code == 1
    assert load_words(out) == WORDS


def test_summary_mode(tmp_path, capsys, fake_scrape):
    path = tmp_path / "words.jsonl"
    save_words(WORDS, path)

    assert scrape_ojad.main(["--summary", str(path)]) == 0
    assert "Total records: 1" in capsys.readouterr().out
    assert "categories" not in fake_scrape


def test_unknown_category_rejected():
    with pytest.raises(SystemExit):
        scrape_ojad.parse_args(["--category", "adverb"])


def test_verbose_lowers_console_level(tmp_path, fake_scrape):
    from ojad_accent.logs import get_logger, set_console_level

    try:
        scrape_ojad.main([
            "--out", str(tmp_path / "words.jsonl"),
            "--log-file", str(tmp_path / "scrape.log"),
            "--verbose",
        ])
        levels = [
            h.level for h in get_logger().handlers
            if not isinstance(h, logging.FileHandler)
        ]
        assert levels and all(level == logging.DEBUG for level in levels)
    finally:
        set_console_level(logging.INFO)
