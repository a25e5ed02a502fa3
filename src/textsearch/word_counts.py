"""Print the most frequent word forms in a text file.

Usage:
    python -m textsearch.word_counts --text book.txt [--top-n 20] [--encoding utf-8]
"""

import argparse
from pathlib import Path

import polars as pl

from textsearch.index import OccurrenceIndex
from textsearch.searcher import TextSearcher


def top_forms(index: OccurrenceIndex, top_n: int) -> pl.DataFrame:
    """Return up to top_n rows of (form, n_total, share), most frequent first."""
    counts = index.count_by_form()
    total = len(index)
    return counts.head(top_n).with_columns(
        (pl.col("n_total") / total if total else pl.lit(0.0)).alias("share")
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Count word forms in a text file")
    parser.add_argument("--text", required=True, help="Path to the text file to index")
    parser.add_argument("--top-n", type=int, default=20)
    parser.add_argument("--encoding", default="utf-8")
    args = parser.parse_args()

    text_path = Path(args.text)
    if not text_path.exists():
        raise FileNotFoundError(f"No text file found at {text_path}.")

    print(f"Loading text from {text_path}...")
    index = TextSearcher.from_file(text_path, encoding=args.encoding).index
    print(f"Indexed {len(index)} occurrences of {len(index.words())} forms")

    for row in top_forms(index, args.top_n).iter_rows(named=True):
        print(f"  {row['form']:<20} {row['n_total']:>8}  {row['share']:.2%}")


if __name__ == "__main__":
    main()
