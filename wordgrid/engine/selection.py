"""
Headless tile selection on a board.

Players build a candidate word by picking tiles one after another. Only
tiles adjacent to the most recent pick may be chosen next, and a tile can
appear at most once in the path. Picking a tile already on the path
backtracks to it.
"""

from enum import Enum
from typing import List, Tuple

from .board import Board

Cell = Tuple[int, int]


class CellState(str, Enum):
    """Whether a tile can currently be picked."""
    UNAVAILABLE = "unavailable"
    AVAILABLE = "available"
    SELECTED = "selected"


class TileSelection:
    """
    Tracks the path of tiles a player has picked on one board.

    Attributes:
        board: The board being played
        path: Picked cells, oldest first
    """

    def __init__(self, board: Board):
        self.board = board
        self.path: List[Cell] = []
        self._disabled = False

    def state(self, x: int, y: int) -> CellState:
        """Current state of the cell at (x, y)."""
        self.board.get(x, y)
        if self._disabled:
            return CellState.UNAVAILABLE
        if (x, y) in self.path:
            return CellState.SELECTED
        if not self.path:
            return CellState.AVAILABLE
        if (x, y) in self.board.neighbors(*self.path[-1]):
            return CellState.AVAILABLE
        return CellState.UNAVAILABLE

    def states(self) -> List[List[CellState]]:
        """States of every cell, row by row."""
        return [
            [self.state(x, y) for y in range(self.board.size)]
            for x in range(self.board.size)
        ]

    def select(self, x: int, y: int) -> bool:
        """
        Pick the tile at (x, y).

        Returns:
            True if the pick changed the path, False if the tile was
            unavailable
        """
        current = self.state(x, y)
        if current == CellState.UNAVAILABLE:
            return False
        if current == CellState.SELECTED:
            del self.path[self.path.index((x, y)) + 1:]
            return True
        self.path.append((x, y))
        return True

    @property
    def word(self) -> str:
        """The picked labels joined and lower-cased."""
        return "".join(self.board.get(x, y) for x, y in self.path).lower()

    def clear(self) -> None:
        """Drop the current path and make every tile available again."""
        self.path.clear()
        self._disabled = False

    def disable(self) -> None:
        """Make every tile unavailable until the next clear()."""
        self.path.clear()
        self._disabled = True
