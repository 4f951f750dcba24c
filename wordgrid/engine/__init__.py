"""Board generation, scoring and round lifecycle for wordgrid."""

from .models import ClientInfo, PlayerConfig, GameConfig, RoundPhase
from .board import (
    Board,
    BoardGenerator,
    TILE_DISTRIBUTION,
    TILE_LABELS,
    TOTAL_WEIGHT,
    DEFAULT_SIZE,
    label_for_roll,
    render_board,
)
from .selection import TileSelection, CellState
from .scoring import ScoringEngine, TARIFF, LONG_WORD_LENGTH, LONG_WORD_POINTS
from .results import GameResults, compute_results
from .player import PlayerSession
from .coordinator import GameCoordinator

__all__ = [
    "ClientInfo",
    "PlayerConfig",
    "GameConfig",
    "RoundPhase",
    "Board",
    "BoardGenerator",
    "TILE_DISTRIBUTION",
    "TILE_LABELS",
    "TOTAL_WEIGHT",
    "DEFAULT_SIZE",
    "label_for_roll",
    "render_board",
    "TileSelection",
    "CellState",
    "ScoringEngine",
    "TARIFF",
    "LONG_WORD_LENGTH",
    "LONG_WORD_POINTS",
    "GameResults",
    "compute_results",
    "PlayerSession",
    "GameCoordinator",
]
