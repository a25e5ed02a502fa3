"""Split raw text into word occurrences in a single left-to-right pass.

A word is a maximal run of ASCII letters, ASCII digits and apostrophes.
Every other character, including non-ASCII letters, is a boundary.
"""

from enum import Enum
import string

from textsearch.data_models.occurrence import Occurrence

_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "'")


class LexState(str, Enum):
    outside = "outside"
    inside = "inside"


def is_word_char(ch: str) -> bool:
    return ch in _WORD_CHARS


def _add_occurrence(occurrences: list[Occurrence], start: int, end: int) -> None:
    # ordinal is the position the occurrence is about to take
    occurrences.append(
        Occurrence(ordinal=len(occurrences), start_offset=start, end_offset=end)
    )


def find_word_occurrences(text: str) -> list[Occurrence]:
    """Return every word occurrence in text, ordinals assigned in text order."""
    occurrences: list[Occurrence] = []
    state = LexState.outside
    word_start = -1

    for offset, ch in enumerate(text):
        word_char = is_word_char(ch)
        if state is LexState.outside:
            if word_char:
                state = LexState.inside
                word_start = offset
        elif not word_char:
            state = LexState.outside
            _add_occurrence(occurrences, word_start, offset)

    # end of text closes a pending word
    if state is LexState.inside:
        _add_occurrence(occurrences, word_start, len(text))
    return occurrences
