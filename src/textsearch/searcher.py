"""File-backed entry point: read a document once, then answer context queries."""

from pathlib import Path

from textsearch.index import OccurrenceIndex


class TextSearcher:
    def __init__(self, text: str) -> None:
        self._index = OccurrenceIndex(text)

    @classmethod
    def from_file(cls, path: Path | str, encoding: str = "utf-8") -> "TextSearcher":
        """Index the full contents of a text file.

        Read and decode errors propagate; no searcher is built in that case.
        """
        return cls(Path(path).read_text(encoding=encoding))

    @property
    def index(self) -> OccurrenceIndex:
        return self._index

    def search(self, query_word: str, context_words: int) -> list[str]:
        """Return one context string per occurrence of query_word in the file."""
        return self._index.search(query_word, context_words)
