from pathlib import Path

import pytest

from textsearch.searcher import TextSearcher


def _write(tmp_path: Path, text: str, encoding: str = "utf-8") -> Path:
    path = tmp_path / "doc.txt"
    path.write_bytes(text.encode(encoding))
    return path


def test_from_file(tmp_path: Path) -> None:
    path = _write(tmp_path, "The quick brown fox. The fox ran.")
    searcher = TextSearcher.from_file(path)
    assert searcher.search("fox", 1) == ["brown fox. The", "The fox ran"]


def test_from_file_accepts_str_path(tmp_path: Path) -> None:
    path = _write(tmp_path, "alpha beta")
    assert TextSearcher.from_file(str(path)).search("beta", 0) == ["beta"]


def test_from_file_preserves_newlines(tmp_path: Path) -> None:
    path = _write(tmp_path, "first line\nsecond line\n")
    searcher = TextSearcher.from_file(path)
    assert searcher.search("line", 1) == ["first line\nsecond", "second line\n"]


def test_from_file_with_encoding(tmp_path: Path) -> None:
    path = _write(tmp_path, "café au lait", encoding="latin-1")
    searcher = TextSearcher.from_file(path, encoding="latin-1")
    assert searcher.index.text == "café au lait"
    assert searcher.search("au", 1) == ["café au lait"]


def test_from_file_missing(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        TextSearcher.from_file(tmp_path / "missing.txt")


def test_from_file_undecodable(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_bytes(b"ok \xff\xfe bytes")
    with pytest.raises(UnicodeDecodeError):
        TextSearcher.from_file(path)


def test_search_delegates_to_index() -> None:
    searcher = TextSearcher("One two three")
    assert searcher.search("TWO", 5) == ["One two three"]
    assert len(searcher.index) == 3
    with pytest.raises(ValueError):
        searcher.search("two", -2)
