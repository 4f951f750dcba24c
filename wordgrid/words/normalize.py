"""Word normalization and the found-word acceptance gate."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .dictionary import Dictionary
    from .word_set import WordSet


# Shortest word a player may claim
MIN_WORD_LENGTH = 3


def normalize(word: str) -> str:
    """Trim surrounding whitespace and lower-case."""
    return word.strip().lower()


def accept_word(candidate: str, dictionary: "Dictionary", found: "WordSet") -> bool:
    """
    Decide whether a candidate may be added to a player's found words.

    A candidate is accepted only if, once normalized, it is at least
    MIN_WORD_LENGTH letters long, the dictionary contains it, and the
    player has not already found it. Rejections are not errors.

    Args:
        candidate: Raw string typed or built by the player
        dictionary: Dictionary of valid words
        found: The player's current found-words set

    Returns:
        True if the word passes all three checks
    """
    word = normalize(candidate)
    if len(word) < MIN_WORD_LENGTH:
        return False
    return dictionary.contains(word) and not found.contains(word)
