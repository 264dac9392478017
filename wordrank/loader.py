"""
word list loader.

reads a one-word-per-line file and keeps only clean candidates:
- blank lines are dropped
- words with non-alpha or non-ascii characters are dropped
- words of the wrong length are dropped
- (optionally) later duplicates are dropped

rejected lines are counted, never treated as errors.
"""

from __future__ import annotations

from pathlib import Path

from .errors import EmptyCorpusError, NoInputError


def is_alpha_ascii(s: str) -> bool:
    """True if s is non-empty and made only of ascii letters."""
    return s.isascii() and s.isalpha()


def _new_stats() -> dict[str, int]:
    return {
        "total": 0,
        "kept": 0,
        "blank": 0,
        "non_alpha_or_non_ascii": 0,
        "wrong_length": 0,
        "duplicates": 0,
    }


def read_words(
    path: Path,
    length: int,
    lowercase: bool = True,
    stats: dict[str, int] | None = None,
) -> list[str]:
    """
    read candidate words of a given length from path.

    args:
        path: word list, one word per line
        length: required word length
        lowercase: normalize case before validating
        stats: optional dict to accumulate filtering counts into

    returns:
        words in file order (duplicates included)
    """
    if stats is None:
        stats = _new_stats()

    words: list[str] = []
    try:
        # undecodable bytes become U+FFFD, which the ascii check rejects;
        # only \n ends a line, a stray \r stays inside the word
        with open(path, "r", encoding="utf-8", errors="replace", newline="\n") as f:
            for line in f:
                stats["total"] += 1
                w = line.strip()
                if not w:
                    stats["blank"] += 1
                    continue
                if lowercase:
                    w = w.lower()
                if not is_alpha_ascii(w):
                    stats["non_alpha_or_non_ascii"] += 1
                    continue
                if len(w) != length:
                    stats["wrong_length"] += 1
                    continue
                words.append(w)
    except OSError as e:
        raise NoInputError(f"cannot read {path}: {e}") from e

    if not words:
        raise EmptyCorpusError(f"no words of length {length} found in {path}")

    stats["kept"] = len(words)
    return words


def deduplicate(words: list[str]) -> list[str]:
    """drop repeated words, keeping the first occurrence of each."""
    seen: set[str] = set()
    out: list[str] = []
    for w in words:
        if w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


def load_corpus(
    path: Path,
    length: int,
    *,
    lowercase: bool = True,
    dedupe: bool = True,
    verbose: bool = False,
) -> tuple[list[str], dict[str, int]]:
    """
    read, filter and (optionally) deduplicate a word list.

    returns:
        words: the corpus to analyze
        stats: dict with filtering statistics
    """
    stats = _new_stats()
    words = read_words(path, length, lowercase=lowercase, stats=stats)

    if dedupe:
        before = len(words)
        words = deduplicate(words)
        stats["duplicates"] = before - len(words)
        stats["kept"] = len(words)

    if verbose:
        print("  filtering stats:")
        print(f"    total lines:             {stats['total']:,}")
        print(f"    kept:                    {stats['kept']:,}")
        print(f"    blank:                   {stats['blank']:,}")
        print(f"    non-alpha / non-ascii:   {stats['non_alpha_or_non_ascii']:,}")
        print(f"    wrong length (!={length}):     {stats['wrong_length']:,}")
        if dedupe:
            print(f"    duplicates:              {stats['duplicates']:,}")

    return words, stats
