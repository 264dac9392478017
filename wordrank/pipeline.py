"""
end-to-end ranking run: load -> analyze -> score -> sort -> write.
"""

from dataclasses import dataclass
from pathlib import Path

from .config import Config, DEFAULT_CONFIG
from .frequencies import FrequencyTables, compute_frequencies
from .loader import load_corpus
from .scoring import WordScore, rank_scores, score_words
from .writer import write_words


@dataclass
class RankResult:
    """everything a caller might want to report about a run."""

    ranked: list[WordScore]
    tables: FrequencyTables
    stats: dict[str, int]
    input_path: Path
    output_path: Path


def rank_wordlist(config: Config = DEFAULT_CONFIG) -> RankResult:
    """
    rank the words in config.input_path and write them to config.output_path.

    raises NoInputError / EmptyCorpusError / OutputError on failure.
    """
    words, stats = load_corpus(
        config.input_path,
        config.length,
        lowercase=config.lowercase,
        dedupe=config.dedupe,
        verbose=config.verbose,
    )

    tables = compute_frequencies(words, config.length)
    scores = score_words(
        words,
        tables,
        letter_weight=config.letter_weight,
        position_weight=config.position_weight,
        unique_weight=config.unique_weight,
        plural_penalty=config.plural_penalty,
    )
    ranked = rank_scores(scores)

    write_words(config.output_path, ranked)

    return RankResult(
        ranked=ranked,
        tables=tables,
        stats=stats,
        input_path=config.input_path.resolve(),
        output_path=config.output_path.resolve(),
    )
