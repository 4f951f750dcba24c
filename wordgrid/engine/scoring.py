"""Cross-player uniqueness filtering and length-based scoring."""

from typing import Dict, Iterable, List, Sequence, Set, Tuple
from pydantic import BaseModel, Field

from ..errors import DuplicateIdentityError
from ..words.word_set import WordSet
from .models import ClientInfo


# Points per word length; every word of LONG_WORD_LENGTH or more scores
# LONG_WORD_POINTS. Lengths below 3 are not listed and score nothing.
TARIFF: Dict[int, int] = {
    3: 1,
    4: 1,
    5: 2,
    6: 3,
    7: 5,
}
LONG_WORD_LENGTH = 8
LONG_WORD_POINTS = 11

PlayerWords = Tuple[str, WordSet]


class ScoringEngine(BaseModel):
    """
    Turns every player's found words into unique words and a score.

    A player's unique words are their own words minus every word any other
    player also found. Input sets are never modified.

    Attributes:
        tariff: Points for each scored word length below long_word_length
        long_word_length: Length from which every word scores long_word_points
        long_word_points: Points for a long word
    """

    tariff: Dict[int, int] = Field(default_factory=lambda: dict(TARIFF))
    long_word_length: int = LONG_WORD_LENGTH
    long_word_points: int = LONG_WORD_POINTS

    def word_points(self, word: str) -> int:
        """Points for a single word, by length."""
        if len(word) >= self.long_word_length:
            return self.long_word_points
        return self.tariff.get(len(word), 0)

    def score(self, words: Iterable[str]) -> int:
        """Total points for a collection of words."""
        return sum(self.word_points(word) for word in words)

    @staticmethod
    def unique_words(player: WordSet, others: Iterable[WordSet]) -> WordSet:
        """Words in `player` that appear in none of `others`, as a new set."""
        return player.difference(WordSet.union_all(others))

    def score_players(self, players: Sequence[PlayerWords]) -> List[ClientInfo]:
        """
        Score every player against all the others.

        Args:
            players: (name, found words) for each participant

        Returns:
            One scored ClientInfo per player, in input order

        Raises:
            DuplicateIdentityError: If a name appears more than once
        """
        seen: Set[str] = set()
        for name, _ in players:
            if name in seen:
                raise DuplicateIdentityError(name)
            seen.add(name)

        results: List[ClientInfo] = []
        for name, words in players:
            others = [other for other_name, other in players if other_name != name]
            unique = self.unique_words(words, others)
            results.append(ClientInfo(
                name=name,
                words=words.copy(),
                score=self.score(unique),
                filtered_words=unique,
            ))
        return results
