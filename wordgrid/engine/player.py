"""
Player session for one participant.

Holds the player's found words for the current round and applies the
acceptance gate when the player claims a word.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..errors import RoundStateError
from ..words.dictionary import Dictionary
from ..words.normalize import accept_word, normalize
from ..words.word_set import WordSet
from .board import Board
from .selection import TileSelection


class PlayerSession(BaseModel):
    """
    Manages one player's state within a round.

    The found-words set is owned by this session and only changes through
    add_word until the session is locked for scoring.

    Attributes:
        name: Unique player name
        found: Accepted words for the current round
        found_words: The same words in the order they were accepted, for display
        submitted: Whether the player has finalized their words
        selection: Tile picking state on the current board
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    found: WordSet = Field(default_factory=WordSet)
    found_words: List[str] = Field(default_factory=list)
    submitted: bool = False
    selection: Optional[TileSelection] = None

    def reset(self, board: Optional[Board] = None) -> None:
        """
        Prepare for a new round.

        Args:
            board: The round's board, for tile selection
        """
        self.found.clear()
        self.found_words = []
        self.submitted = False
        self.selection = TileSelection(board) if board is not None else None

    def add_word(self, candidate: str, dictionary: Dictionary) -> bool:
        """
        Claim a word.

        Args:
            candidate: Raw word typed or built by the player
            dictionary: Dictionary to validate against

        Returns:
            True if the word was accepted, False if it failed the gate

        Raises:
            RoundStateError: If the player already submitted
        """
        if self.submitted:
            raise RoundStateError(f"{self.name} has already submitted their words")

        if not accept_word(candidate, dictionary, self.found):
            return False

        word = normalize(candidate)
        self.found.insert(word)
        self.found_words.append(word)
        return True

    def add_selected_word(self, dictionary: Dictionary) -> bool:
        """Claim the word spelled by the selected tiles, then clear the selection."""
        if self.selection is None:
            raise RoundStateError(f"{self.name} has no board to select tiles on")
        accepted = self.add_word(self.selection.word, dictionary)
        self.selection.clear()
        return accepted

    def submit(self) -> None:
        """Finalize the player's words for the round."""
        self.submitted = True
        if self.selection is not None:
            self.selection.disable()

    @property
    def words_found(self) -> int:
        """Number of accepted words."""
        return len(self.found_words)

    def get_state(self) -> Dict:
        """
        Get the current player state as a dictionary.

        Useful for serialization and logging.

        Returns:
            Dictionary containing player state
        """
        return {
            "name": self.name,
            "words_found": self.words_found,
            "found_words": list(self.found_words),
            "submitted": self.submitted,
            "selected_word": self.selection.word if self.selection else "",
        }
