"""
command-line entry point for the word ranker.

usage:
    python scripts/rank_words.py --in wordlist.txt --out wordlist_ranked.txt
    python scripts/rank_words.py --plural-penalty 0 --no-dedupe -v
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import Config
from .errors import RankerError
from .pipeline import rank_wordlist


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="reorder a word list by letter-frequency heuristics"
    )
    parser.add_argument(
        "--in",
        dest="input_path",
        type=Path,
        default=Path("wordlist.txt"),
        help="input word list, one word per line (default: wordlist.txt)"
    )
    parser.add_argument(
        "--out",
        dest="output_path",
        type=Path,
        default=Path("wordlist_ranked.txt"),
        help="output file for the reordered list (default: wordlist_ranked.txt)"
    )
    parser.add_argument(
        "--len",
        dest="length",
        type=int,
        default=5,
        help="word length to analyze (default: 5)"
    )
    parser.add_argument(
        "--letter-weight",
        type=float,
        default=1.0,
        help="multiplier for the global letter frequency component (default: 1.0)"
    )
    parser.add_argument(
        "--position-weight",
        type=float,
        default=1.0,
        help="multiplier for the per-position frequency component (default: 1.0)"
    )
    parser.add_argument(
        "--unique-weight",
        type=float,
        default=0.0,
        help="[deprecated] bonus per unique letter, prefer --letter-weight (default: 0)"
    )
    parser.add_argument(
        "--plural-penalty",
        type=float,
        default=0.75,
        help="penalty for likely plurals, 0 disables (default: 0.75)"
    )
    parser.add_argument(
        "--dedupe",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="remove duplicate words before scoring (default: on)"
    )
    parser.add_argument(
        "--lower",
        dest="lowercase",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="normalize words to lowercase (default: on)"
    )
    parser.add_argument(
        "--top",
        type=int,
        default=5,
        help="how many top words to show with --verbose (default: 5)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="print extra info"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = Config(**vars(args))
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if config.verbose:
        print(f"loading {config.input_path}...")

    try:
        result = rank_wordlist(config)
    except RankerError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if config.verbose:
        n = len(result.ranked)
        print(f"  corpus size: {n:,}")
        print(f"  top {min(config.top, n)} words:")
        for i, ws in enumerate(result.ranked[:config.top]):
            print(f"    {i+1}. '{ws.word}' (score={ws.score:.4f})")

    print(f"reordered {len(result.ranked)} words from {result.input_path} → {result.output_path}")
    return 0
