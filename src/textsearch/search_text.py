"""Print every occurrence of one or more words with surrounding context.

Usage:
    python -m textsearch.search_text \\
        --text book.txt --word fox dog [--context 3] [--encoding utf-8] [--html]
"""

import argparse
from pathlib import Path

from textsearch.searcher import TextSearcher


def format_hits(
    searcher: TextSearcher, word: str, context: int, html: bool
) -> list[str]:
    """Return printable lines for one query word: a header, then one line per hit."""
    if html:
        hits = searcher.index.search_highlighted(word, context)
    else:
        hits = searcher.search(word, context)
    lines = [f"{word}: {len(hits)} hit(s)"]
    lines.extend(f"  {' '.join(hit.split())}" for hit in hits)
    return lines


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Search a text file for words in context"
    )
    parser.add_argument("--text", required=True, help="Path to the text file to index")
    parser.add_argument("--word", nargs="+", required=True, help="Word(s) to look up")
    parser.add_argument(
        "--context", type=int, default=3, help="Words of context on each side"
    )
    parser.add_argument("--encoding", default="utf-8")
    parser.add_argument(
        "--html", action="store_true", help="HTML-escape and bold each hit"
    )
    args = parser.parse_args()

    if args.context < 0:
        parser.error(f"--context must be non-negative, got {args.context}")

    text_path = Path(args.text)
    if not text_path.exists():
        raise FileNotFoundError(f"No text file found at {text_path}.")

    print(f"Loading text from {text_path}...")
    searcher = TextSearcher.from_file(text_path, encoding=args.encoding)
    print(f"Indexed {len(searcher.index)} word occurrences")

    for word in args.word:
        for line in format_hits(searcher, word, args.context, args.html):
            print(line)


if __name__ == "__main__":
    main()
