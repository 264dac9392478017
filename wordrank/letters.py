"""
letter helpers shared by the frequency analyzer and the scorer.
"""

from __future__ import annotations

ALPHABET_SIZE = 26


def letter_index(ch: str) -> int | None:
    """map 'a'..'z' to 0..25; anything else has no index."""
    idx = ord(ch) - ord("a")
    if 0 <= idx < ALPHABET_SIZE:
        return idx
    return None


def skip_trailing_s(word: str, i: int) -> bool:
    """
    True if word[i] is a final 's' that should be ignored.

    a trailing 's' is treated as pluralization noise unless the
    character before it is also 's' ("fades" skips, "bliss" does not).
    """
    n = len(word)
    if i != n - 1:
        return False
    if word[i] != "s":
        return False
    if n >= 2 and word[n - 2] == "s":
        return False
    return True


def unique_letter_count_respecting_rule(word: str) -> int:
    """count unique letters, ignoring a trailing 's' per skip_trailing_s."""
    seen = set()
    for i, ch in enumerate(word):
        if skip_trailing_s(word, i):
            continue
        idx = letter_index(ch)
        if idx is not None:
            seen.add(idx)
    return len(seen)
