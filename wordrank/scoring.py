"""
score and rank words from their letter frequencies.

score(w) = letter_weight * sum over unique letters of letter_prob[l]
         + position_weight * sum over positions of pos_prob[i, w[i]]
         (+ unique_weight * unique letter count, if set)
         (- plural_penalty, if w looks like a plural)

the trailing 's' rule applies to every term.
"""

from dataclasses import dataclass

from .frequencies import FrequencyTables
from .letters import letter_index, skip_trailing_s, unique_letter_count_respecting_rule
from .plurals import is_likely_plural


@dataclass(frozen=True)
class WordScore:
    word: str
    score: float


def score_words(
    words: list[str],
    tables: FrequencyTables,
    *,
    letter_weight: float = 1.0,
    position_weight: float = 1.0,
    unique_weight: float = 0.0,
    plural_penalty: float = 0.75,
) -> list[WordScore]:
    """
    compute a WordScore for every word, in corpus order.

    args:
        words: the corpus the tables were built from
        tables: output of compute_frequencies
        letter_weight: multiplier for the global presence component
        position_weight: multiplier for the per-position component
        unique_weight: legacy bonus per unique letter (0 disables)
        plural_penalty: subtracted from likely plurals (<= 0 disables)

    returns:
        list of WordScore, same order as words
    """
    letter_prob, pos_prob = tables.probabilities(len(words))

    out: list[WordScore] = []
    for w in words:
        seen: set[int] = set()
        letter_sum = 0.0
        pos_sum = 0.0
        for i, ch in enumerate(w):
            if skip_trailing_s(w, i):
                continue
            idx = letter_index(ch)
            if idx is None:
                continue
            # repeats count once per occurrence here
            pos_sum += float(pos_prob[i, idx])
            # ...but only once for the global component
            if idx not in seen:
                seen.add(idx)
                letter_sum += float(letter_prob[idx])

        score = letter_weight * letter_sum + position_weight * pos_sum
        if unique_weight != 0:
            score += unique_weight * unique_letter_count_respecting_rule(w)
        if plural_penalty > 0 and is_likely_plural(w):
            score -= plural_penalty
        out.append(WordScore(word=w, score=score))

    return out


def rank_scores(scores: list[WordScore]) -> list[WordScore]:
    """sort by score descending, then word ascending (stable)."""
    return sorted(scores, key=lambda s: (-s.score, s.word))
