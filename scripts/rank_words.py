#!/usr/bin/env python3
"""
reorder a word list by letter frequency.

usage:
    python scripts/rank_words.py --in wordlist.txt --out wordlist_ranked.txt

see `--help` for the scoring knobs.
"""

import sys
from pathlib import Path

# add parent dir to path so we can import wordrank
sys.path.insert(0, str(Path(__file__).parent.parent))

from wordrank.cli import main


if __name__ == "__main__":
    sys.exit(main())
