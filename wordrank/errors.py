"""
exceptions raised while ranking a word list.

all of them are terminal for a run; the cli turns them into an
error line and a non-zero exit status.
"""


class RankerError(RuntimeError):
    """base class for ranker failures."""


class NoInputError(RankerError):
    """input word list is missing or unreadable."""


class EmptyCorpusError(NoInputError):
    """no words survived filtering, so there is nothing to rank."""


class OutputError(RankerError):
    """ranked list could not be written."""
