"""
Pydantic models for the engine layer.

This module contains the data models (configurations, per-player results,
round phases) used throughout the engine. The logic classes (BoardGenerator,
ScoringEngine, GameResults, GameCoordinator) live in their own modules.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from ..words.word_set import WordSet


# Round lifecycle: waiting -> collecting -> scoring -> complete
RoundPhase = Literal["waiting", "collecting", "scoring", "complete"]


class ClientInfo(BaseModel):
    """
    One player's submission and, once scored, their result.

    Attributes:
        name: Unique player name
        words: Words the player submitted
        score: Points for the round, None until scored
        filtered_words: Submitted words nobody else found, empty until scored
    """
    name: str
    words: WordSet = Field(default_factory=WordSet)
    score: Optional[int] = None
    filtered_words: WordSet = Field(default_factory=WordSet)

    @property
    def is_scored(self) -> bool:
        return self.score is not None


class PlayerConfig(BaseModel):
    """A player listed in the config file, with the words they will submit."""
    name: str = Field(..., min_length=1)
    words: List[str] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, v):
        # Names are registered stripped, so the config must agree
        return v.strip() if isinstance(v, str) else v


class GameConfig(BaseModel):
    """Configuration for a game."""
    board_size: int = Field(default=4, ge=1)
    seed: Optional[int] = None
    round_seconds: float = Field(default=180.0, gt=0)
    dictionary: Optional[str] = None  # Path to a word list; bundled list if unset
    dictionary_entry: Optional[str] = None  # Member name inside a zip word list
    players: List[PlayerConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_players(self) -> "GameConfig":
        seen = set()
        for player in self.players:
            if player.name in seen:
                raise ValueError(f"Player '{player.name}' is listed more than once")
            seen.add(player.name)
        return self

    @property
    def num_players(self) -> int:
        """Number of players listed in the config."""
        return len(self.players)
