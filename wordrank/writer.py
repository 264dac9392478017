"""
write the ranked list back to disk.
"""

from pathlib import Path
from typing import Iterable

from .errors import OutputError
from .scoring import WordScore


def write_words(path: Path, scores: Iterable[WordScore]) -> int:
    """
    write one word per line (newline-terminated), overwriting path.

    returns:
        number of words written
    """
    count = 0
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            for ws in scores:
                f.write(ws.word + "\n")
                count += 1
    except OSError as e:
        raise OutputError(f"cannot write {path}: {e}") from e
    return count
