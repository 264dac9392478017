"""
wordrank: letter-frequency word list ranker

reorders a word list (e.g. for wordle-style solvers) so words made of
common letters in common positions come first.
"""

from .config import Config
from .errors import EmptyCorpusError, NoInputError, OutputError, RankerError
from .loader import load_corpus
from .frequencies import compute_frequencies
from .plurals import is_likely_plural
from .scoring import WordScore, rank_scores, score_words
from .writer import write_words
from .pipeline import rank_wordlist

__all__ = [
    "Config",
    "RankerError",
    "NoInputError",
    "EmptyCorpusError",
    "OutputError",
    "load_corpus",
    "compute_frequencies",
    "is_likely_plural",
    "WordScore",
    "score_words",
    "rank_scores",
    "write_words",
    "rank_wordlist",
]
