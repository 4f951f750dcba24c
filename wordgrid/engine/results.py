import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple
from pydantic import BaseModel, Field

from ..errors import DuplicateIdentityError, PlayerNotFoundError
from .models import ClientInfo
from .scoring import PlayerWords, ScoringEngine

logger = logging.getLogger(__name__)


class GameResults(BaseModel):
    """
    Results of the most recent completed round.

    Maps each participating player's name to their scored ClientInfo.
    Empty until a round has been scored; every call to compute_results
    replaces the previous contents rather than merging into them.

    Attributes:
        client_results: Scored ClientInfo per player name
    """

    client_results: Dict[str, ClientInfo] = Field(default_factory=dict)

    def compute_results(
        self,
        players: Sequence[PlayerWords],
        engine: Optional[ScoringEngine] = None,
    ) -> "GameResults":
        """
        Score a round and store the outcome, discarding earlier results.

        Args:
            players: (name, found words) for each participant
            engine: Scoring engine to use (default tariff if omitted)

        Returns:
            self, for chaining

        Raises:
            DuplicateIdentityError: If a name appears more than once; the
                previous results are left untouched
        """
        engine = engine or ScoringEngine()
        try:
            scored = engine.score_players(players)
        except DuplicateIdentityError as e:
            logger.error("Rejecting round results: %s", e)
            raise

        self.client_results = {info.name: info for info in scored}
        return self

    def clear(self) -> None:
        """Forget every stored result."""
        self.client_results = {}

    def get(self, name: str) -> ClientInfo:
        """
        Result for one player.

        Raises:
            PlayerNotFoundError: If the player took no part in the round
        """
        try:
            return self.client_results[name]
        except KeyError:
            raise PlayerNotFoundError(name) from None

    def identities(self) -> FrozenSet[str]:
        """Names of every player in the results."""
        return frozenset(self.client_results)

    def as_mapping(self) -> Mapping[str, ClientInfo]:
        """Read-only view of the name -> ClientInfo mapping."""
        return MappingProxyType(self.client_results)

    def leaderboard(self) -> List[Tuple[str, int]]:
        """(name, score) pairs, highest score first, ties by name."""
        return sorted(
            ((info.name, info.score or 0) for info in self.client_results.values()),
            key=lambda pair: (-pair[1], pair[0]),
        )

    def __len__(self) -> int:
        return len(self.client_results)


def compute_results(
    players: Sequence[PlayerWords],
    engine: Optional[ScoringEngine] = None,
) -> GameResults:
    """Score a round into a fresh GameResults."""
    return GameResults().compute_results(players, engine)
