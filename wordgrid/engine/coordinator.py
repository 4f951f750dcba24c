import json
import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..errors import PlayerError, PlayerNotFoundError, RoundStateError
from ..words.dictionary import Dictionary
from .board import Board, BoardGenerator
from .models import GameConfig, RoundPhase
from .player import PlayerSession
from .results import GameResults
from .scoring import ScoringEngine

logger = logging.getLogger(__name__)


class GameCoordinator(BaseModel):
    """
    Top-level orchestrator for rounds of play.

    Owns the player registry, the board and the round phase. A round moves
    waiting -> collecting -> scoring -> complete; words are only accepted
    while collecting, and scoring reads every player's words only once the
    round barrier in end_round has been passed.

    Attributes:
        dictionary: Shared dictionary for validating words
        config: Game configuration
        generator: Board generator
        engine: Scoring engine
        players: Player sessions by name, in join order
        board: The current round's board
        phase: Current round phase
        round_number: Number of rounds started so far
        results: Results of the most recent completed round
        clock: Monotonic clock used for the round timer
        started_at: Wall-clock start of the current round
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    dictionary: Dictionary
    config: GameConfig = Field(default_factory=GameConfig)
    generator: BoardGenerator = Field(default_factory=BoardGenerator)
    engine: ScoringEngine = Field(default_factory=ScoringEngine)
    players: Dict[str, PlayerSession] = Field(default_factory=dict)
    board: Optional[Board] = None
    phase: RoundPhase = "waiting"
    round_number: int = 0
    results: GameResults = Field(default_factory=GameResults)
    clock: Callable[[], float] = time.monotonic
    started_at: Optional[datetime] = None
    ended_at: Optional[datetime] = None
    _deadline: Optional[float] = None

    @classmethod
    def create(
        cls,
        dictionary: Dictionary,
        config: Optional[GameConfig] = None,
        **config_kwargs: Any
    ) -> "GameCoordinator":
        """
        Factory method to create a coordinator with the configured players joined.

        Args:
            dictionary: Loaded dictionary shared by every player
            config: Optional GameConfig instance
            **config_kwargs: Config parameters if config not provided

        Returns:
            Configured GameCoordinator instance
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        coordinator = cls(
            dictionary=dictionary,
            config=config,
            generator=BoardGenerator(seed=config.seed),
        )
        for player_config in config.players:
            coordinator.join(player_config.name)
        return coordinator

    def _require_phase(self, *phases: str) -> None:
        if self.phase not in phases:
            raise RoundStateError(
                f"Cannot do that while the round is {self.phase} (needs {' or '.join(phases)})"
            )

    def _session(self, name: str) -> PlayerSession:
        try:
            return self.players[name]
        except KeyError:
            raise PlayerNotFoundError(name) from None

    def join(self, name: str) -> PlayerSession:
        """
        Register a player.

        Raises:
            PlayerError: If the name is blank or already taken
            RoundStateError: If a round is in progress
        """
        self._require_phase("waiting", "complete")
        name = name.strip()
        if not name:
            raise PlayerError("Player name must not be blank")
        if name in self.players:
            raise PlayerError(f"Player name '{name}' is already taken")

        session = PlayerSession(name=name)
        self.players[name] = session
        logger.info("Player %s joined", name)
        return session

    def leave(self, name: str) -> None:
        """Remove a player between rounds."""
        self._require_phase("waiting", "complete")
        self._session(name)
        del self.players[name]
        logger.info("Player %s left", name)

    def start_round(self) -> Board:
        """
        Start a new round with a fresh board.

        Every player's found words are cleared.

        Returns:
            The round's board

        Raises:
            RoundStateError: If a round is already in progress or nobody has joined
        """
        self._require_phase("waiting", "complete")
        if not self.players:
            raise RoundStateError("Cannot start a round with no players")

        self.board = self.generator.generate(self.config.board_size)
        for session in self.players.values():
            session.reset(self.board)

        self.round_number += 1
        self.phase = "collecting"
        self.started_at = datetime.now()
        self.ended_at = None
        self._deadline = self.clock() + self.config.round_seconds
        logger.info(
            "Round %s started with %s players on a %sx%s board",
            self.round_number, len(self.players), self.board.size, self.board.size,
        )
        return self.board

    def add_word(self, name: str, word: str) -> bool:
        """
        Claim a word for a player.

        Returns:
            True if the word was accepted

        Raises:
            RoundStateError: If no round is collecting words or the player submitted
            PlayerNotFoundError: If the player is unknown
        """
        self._require_phase("collecting")
        return self._session(name).add_word(word, self.dictionary)

    def select_tile(self, name: str, x: int, y: int) -> bool:
        """Pick a tile for a player's word in progress."""
        self._require_phase("collecting")
        return self._session(name).selection.select(x, y)

    def clear_selection(self, name: str) -> None:
        self._require_phase("collecting")
        self._session(name).selection.clear()

    def add_selected_word(self, name: str) -> bool:
        """Claim the word spelled by a player's selected tiles."""
        self._require_phase("collecting")
        return self._session(name).add_selected_word(self.dictionary)

    def submit(self, name: str) -> bool:
        """
        Finalize a player's words.

        Returns:
            True once every player has submitted
        """
        self._require_phase("collecting")
        session = self._session(name)
        session.submit()
        logger.info("Player %s submitted %s words", name, session.words_found)
        return self.all_submitted

    @property
    def all_submitted(self) -> bool:
        return all(session.submitted for session in self.players.values())

    @property
    def pending_players(self) -> List[str]:
        """Names of players who have not submitted yet."""
        return [name for name, session in self.players.items() if not session.submitted]

    def time_remaining(self) -> float:
        """Seconds left on the round timer, 0 outside a collecting round."""
        if self.phase != "collecting" or self._deadline is None:
            return 0.0
        return max(0.0, self._deadline - self.clock())

    def is_expired(self) -> bool:
        return self.phase == "collecting" and self.time_remaining() <= 0.0

    def end_round(self, force: bool = False) -> GameResults:
        """
        Close the round and score it.

        The round may only end once every player has submitted or the timer
        has run out, unless forced. Once scoring starts no player can add
        further words.

        Args:
            force: End the round even if some players have not submitted

        Returns:
            The round's results

        Raises:
            RoundStateError: If no round is collecting, or players are still
                playing and the round was not forced
        """
        self._require_phase("collecting")
        if not (force or self.all_submitted or self.is_expired()):
            raise RoundStateError(
                f"Waiting for {', '.join(self.pending_players)} to submit"
            )

        self.phase = "scoring"
        for session in self.players.values():
            if not session.submitted:
                session.submit()

        self.results.compute_results(
            [(name, session.found) for name, session in self.players.items()],
            self.engine,
        )
        self.phase = "complete"
        self.ended_at = datetime.now()

        for name, score in self.results.leaderboard():
            logger.info("Round %s: %s scored %s", self.round_number, name, score)
        return self.results

    def abandon_round(self) -> None:
        """Discard the round in progress without scoring it."""
        self._require_phase("collecting")
        for session in self.players.values():
            session.reset()
        self.board = None
        self._deadline = None
        self.phase = "waiting"
        logger.info("Round %s abandoned", self.round_number)

    def get_state(self) -> Dict:
        """
        Get the current game state as a dictionary.

        Returns:
            Dictionary containing game state
        """
        return {
            "round_number": self.round_number,
            "phase": self.phase,
            "board": self.board.rows() if self.board else None,
            "time_remaining": self.time_remaining(),
            "players": [session.get_state() for session in self.players.values()],
        }

    def get_result(self) -> Dict:
        """
        Get the outcome of the most recent round.

        Returns:
            Dictionary with the board, per-player results and timing
        """
        duration = 0.0
        if self.started_at and self.ended_at:
            duration = (self.ended_at - self.started_at).total_seconds()

        return {
            "round_number": self.round_number,
            "phase": self.phase,
            "board": self.board.rows() if self.board else None,
            "leaderboard": [list(pair) for pair in self.results.leaderboard()],
            "results": self.results.model_dump(mode="json")["client_results"],
            "started_at": self.started_at.isoformat() if self.started_at else "",
            "ended_at": self.ended_at.isoformat() if self.ended_at else "",
            "duration_seconds": duration,
        }

    def save_result(self, path: str | Path) -> None:
        """
        Save the round result to a JSON file.

        Args:
            path: Path to save the result file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(self.get_result(), f, indent=2, default=str)
