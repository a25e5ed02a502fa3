"""In-memory word occurrence index with context-window lookup.

The index is built once from a text and never changes afterwards. Occurrences
are stored as two parallel offset arrays indexed by ordinal, and each word
maps to the ordinals of its occurrences in text order. Context windows are
derived from neighbouring occurrences' offsets, so a query never re-scans the
text.
"""

from collections.abc import Iterable, Iterator
import html as _html
import string

import numpy as np
import polars as pl

from textsearch.data_models.occurrence import Occurrence
from textsearch.tokenizer import find_word_occurrences

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_OCCURRENCE_SCHEMA = {
    "ordinal": pl.Int64,
    "form": pl.String,
    "start_offset": pl.Int64,
    "end_offset": pl.Int64,
}

_COUNT_SCHEMA = {
    "form": pl.String,
    "n_total": pl.Int64,
}


def canonicalize_word(form: str) -> str:
    """Lowercase ASCII letters only; other characters pass through unchanged."""
    return form.translate(_ASCII_LOWER)


def index_occurrences(
    text: str, occurrences: Iterable[Occurrence]
) -> dict[str, list[int]]:
    """Group occurrence ordinals by canonical form.

    Occurrences must be given in ordinal order; each bucket then comes out in
    text order without sorting.
    """
    by_word: dict[str, list[int]] = {}
    for occ in occurrences:
        form = canonicalize_word(text[occ.start_offset : occ.end_offset])
        by_word.setdefault(form, []).append(occ.ordinal)
    return by_word


def _frozen_array(values: Iterable[int]) -> np.ndarray:
    arr = np.fromiter(values, dtype=np.int64)
    arr.flags.writeable = False
    return arr


def _check_context_words(context_words: int) -> None:
    if isinstance(context_words, bool) or not isinstance(
        context_words, (int, np.integer)
    ):
        raise TypeError(
            f"context_words must be an int, got {type(context_words).__name__}"
        )
    if context_words < 0:
        raise ValueError(f"context_words must be non-negative, got {context_words}")


class OccurrenceIndex:
    def __init__(self, text: str) -> None:
        occurrences = find_word_occurrences(text)
        by_word = index_occurrences(text, occurrences)

        self._text = text
        self._starts = _frozen_array(o.start_offset for o in occurrences)
        self._ends = _frozen_array(o.end_offset for o in occurrences)
        self._ordinals_by_word = {
            word: _frozen_array(ordinals) for word, ordinals in by_word.items()
        }

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._starts)

    def __contains__(self, word: object) -> bool:
        return (
            isinstance(word, str) and canonicalize_word(word) in self._ordinals_by_word
        )

    def occurrence(self, ordinal: int) -> Occurrence:
        if not 0 <= ordinal < len(self):
            raise IndexError(f"Occurrence ordinal out of range: {ordinal}")
        return Occurrence(
            ordinal=ordinal,
            start_offset=int(self._starts[ordinal]),
            end_offset=int(self._ends[ordinal]),
        )

    @property
    def occurrences(self) -> Iterator[Occurrence]:
        for ordinal in range(len(self)):
            yield self.occurrence(ordinal)

    def words(self) -> list[str]:
        """Return all canonical word forms, sorted."""
        return sorted(self._ordinals_by_word)

    def count(self, word: str) -> int:
        hits = self._ordinals_by_word.get(canonicalize_word(word))
        return 0 if hits is None else len(hits)

    def _windows(
        self, query_word: str, context_words: int
    ) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return (hit ordinals, context start offsets, context end offsets)."""
        _check_context_words(context_words)
        empty = np.empty(0, dtype=np.int64)
        hits = self._ordinals_by_word.get(canonicalize_word(query_word))
        if hits is None:
            return empty, empty, empty

        n = len(self)
        # any width >= n already clamps both sides; keeps the arithmetic in int64
        width = min(int(context_words), n)
        lo = hits - width
        hi = hits + width
        starts = np.where(lo < 0, 0, self._starts[np.maximum(lo, 0)])
        ends = np.where(hi >= n, len(self._text), self._ends[np.minimum(hi, n - 1)])
        return hits, starts, ends

    def search_spans(
        self, query_word: str, context_words: int
    ) -> list[tuple[int, int]]:
        """Return the (start, end) character range of each hit's context."""
        _, starts, ends = self._windows(query_word, context_words)
        return list(zip(starts.tolist(), ends.tolist(), strict=True))

    def search(self, query_word: str, context_words: int) -> list[str]:
        """Return each occurrence of query_word with context_words words each side.

        Matching is case-insensitive; the returned text is copied verbatim from
        the indexed text, punctuation and casing included. Context is clamped
        to the start and end of the document.
        """
        return [
            self._text[start:end]
            for start, end in self.search_spans(query_word, context_words)
        ]

    def search_highlighted(self, query_word: str, context_words: int) -> list[str]:
        """Like search, but HTML-escaped with each hit wrapped in <strong>."""
        hits, starts, ends = self._windows(query_word, context_words)
        results = []
        for hit, start, end in zip(
            hits.tolist(), starts.tolist(), ends.tolist(), strict=True
        ):
            hit_start = int(self._starts[hit])
            hit_end = int(self._ends[hit])
            results.append(
                _html.escape(self._text[start:hit_start])
                + "<strong>"
                + _html.escape(self._text[hit_start:hit_end])
                + "</strong>"
                + _html.escape(self._text[hit_end:end])
            )
        return results

    def to_polars(self) -> pl.DataFrame:
        """One row per occurrence, in ordinal order."""
        if not len(self):
            return pl.DataFrame(schema=_OCCURRENCE_SCHEMA)
        starts = self._starts.tolist()
        ends = self._ends.tolist()
        return pl.DataFrame(
            {
                "ordinal": list(range(len(self))),
                "form": [
                    canonicalize_word(self._text[s:e])
                    for s, e in zip(starts, ends, strict=True)
                ],
                "start_offset": starts,
                "end_offset": ends,
            },
            schema=_OCCURRENCE_SCHEMA,
        )

    def count_by_form(self) -> pl.DataFrame:
        """Occurrence counts per canonical form, most frequent first."""
        if not self._ordinals_by_word:
            return pl.DataFrame(schema=_COUNT_SCHEMA)
        return pl.DataFrame(
            {
                "form": list(self._ordinals_by_word),
                "n_total": [len(v) for v in self._ordinals_by_word.values()],
            },
            schema=_COUNT_SCHEMA,
        ).sort(["n_total", "form"], descending=[True, False])
