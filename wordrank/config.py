"""
configuration for the word ranker.

every knob the command line exposes lives here with its default,
so a run is fully described by one Config instance.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """ranker configuration — tweak these as needed."""

    # source list (one word per line) and destination for the ranked list
    input_path: Path = Path("wordlist.txt")
    output_path: Path = Path("wordlist_ranked.txt")

    # only words of exactly this length are analyzed
    length: int = 5

    # multipliers on the two frequency signals
    letter_weight: float = 1.0
    position_weight: float = 1.0

    # legacy flat bonus per unique letter (0 disables)
    unique_weight: float = 0.0

    # subtracted from words that look like simple plurals (0 disables)
    plural_penalty: float = 0.75

    # corpus normalization
    dedupe: bool = True
    lowercase: bool = True

    # console output
    verbose: bool = False
    top: int = 5

    def __post_init__(self):
        """ensure paths are Path objects and the length makes sense."""
        self.input_path = Path(self.input_path)
        self.output_path = Path(self.output_path)
        if self.length < 1:
            raise ValueError(f"word length must be positive, got: {self.length}")
        if self.top < 0:
            raise ValueError(f"top must be non-negative, got: {self.top}")


# default config instance
DEFAULT_CONFIG = Config()
