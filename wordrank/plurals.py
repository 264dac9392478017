"""
plural detection heuristic.

this is only used to nudge scores down, never to drop words, so it
favors precision over recall: a few singulars ending in 's' get
flagged (and third-person verbs like "runs" do too), which is fine.
"""


def is_likely_plural(word: str) -> bool:
    """guess whether word is a simple english plural (first rule wins)."""
    if len(word) < 4:
        # too short to call
        return False

    # singulars that happen to end in s
    if word.endswith("ss"):
        return False
    if word.endswith("us") or word.endswith("is"):
        return False

    # high-confidence plural endings
    if word.endswith("ies"):  # party -> parties
        return True
    if word.endswith("ves"):  # knife -> knives, wolf -> wolves
        return True
    if word.endswith("es"):  # box -> boxes, bus -> buses
        return True

    # generic trailing 's'
    return word.endswith("s")
