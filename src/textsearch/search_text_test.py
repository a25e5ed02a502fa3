from pathlib import Path
import sys

import pytest

from textsearch import search_text
from textsearch.searcher import TextSearcher


def test_format_hits_plain():
    searcher = TextSearcher("The quick brown fox.\nThe fox ran.")
    assert search_text.format_hits(searcher, "fox", 1, html=False) == [
        "fox: 2 hit(s)",
        "  brown fox. The",
        "  The fox ran",
    ]


def test_format_hits_html():
    searcher = TextSearcher("a <b> c")
    assert search_text.format_hits(searcher, "b", 0, html=True) == [
        "b: 1 hit(s)",
        "  <strong>b</strong>",
    ]


def test_format_hits_no_match():
    searcher = TextSearcher("nothing here")
    assert search_text.format_hits(searcher, "fox", 2, html=False) == [
        "fox: 0 hit(s)"
    ]


def test_main_prints_hits(tmp_path: Path, monkeypatch, capsys) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("The quick brown fox. The fox ran.")
    monkeypatch.setattr(
        sys,
        "argv",
        ["search_text", "--text", str(path), "--word", "fox", "ran", "--context", "1"],
    )
    search_text.main()
    out = capsys.readouterr().out.splitlines()
    assert out[1] == "Indexed 7 word occurrences"
    assert out[2:] == [
        "fox: 2 hit(s)",
        "  brown fox. The",
        "  The fox ran",
        "ran: 1 hit(s)",
        "  fox ran.",
    ]


def test_main_missing_file(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(
        sys,
        "argv",
        ["search_text", "--text", str(tmp_path / "nope.txt"), "--word", "x"],
    )
    with pytest.raises(FileNotFoundError):
        search_text.main()


def test_main_rejects_negative_context(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "doc.txt"
    path.write_text("some words")
    monkeypatch.setattr(
        sys,
        "argv",
        ["search_text", "--text", str(path), "--word", "some", "--context", "-1"],
    )
    with pytest.raises(SystemExit):
        search_text.main()
