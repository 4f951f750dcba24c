"""Word validity and set algebra for wordgrid."""

from .dictionary import Dictionary, DEFAULT_WORD_LIST
from .word_set import WordSet
from .normalize import normalize, accept_word, MIN_WORD_LENGTH

__all__ = [
    # Dictionary
    "Dictionary",
    "DEFAULT_WORD_LIST",
    # Word sets
    "WordSet",
    # Acceptance
    "normalize",
    "accept_word",
    "MIN_WORD_LENGTH",
]
