"""
letter frequency tables for a corpus.

two signals are built in a single pass:
- letter_freq[l]: number of words containing letter l at least once
- pos_counts[i, l]: number of words with letter l at position i

a trailing 's' is ignored for both unless preceded by another 's'.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from .letters import ALPHABET_SIZE, letter_index, skip_trailing_s


@dataclass
class FrequencyTables:
    """results from compute_frequencies."""

    # presence counts, shape (26,)
    letter_freq: NDArray[np.int64]

    # per-position counts, shape (length, 26)
    pos_counts: NDArray[np.int64]

    def probabilities(self, n: int) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        """
        convert both tables to probabilities in [0, 1].

        dividing by corpus size doesn't change the ordering, it just keeps
        the two signals on a comparable scale.
        """
        letter_prob = self.letter_freq.astype(np.float64) / n
        pos_prob = self.pos_counts.astype(np.float64) / n
        return letter_prob, pos_prob


def compute_frequencies(words: list[str], length: int) -> FrequencyTables:
    """
    count global letter presence and per-position letters.

    args:
        words: filtered corpus, every word exactly `length` characters
        length: word length

    returns:
        FrequencyTables with both count arrays
    """
    letter_freq = np.zeros(ALPHABET_SIZE, dtype=np.int64)
    pos_counts = np.zeros((length, ALPHABET_SIZE), dtype=np.int64)

    for w in words:
        seen = np.zeros(ALPHABET_SIZE, dtype=bool)
        for i in range(length):
            if skip_trailing_s(w, i):
                continue
            idx = letter_index(w[i])
            if idx is None:
                continue
            pos_counts[i, idx] += 1
            seen[idx] = True
        # presence, not occurrences: at most 1 per word
        letter_freq += seen

    return FrequencyTables(letter_freq=letter_freq, pos_counts=pos_counts)
