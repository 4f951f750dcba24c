import random
from typing import Dict, Iterator, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, model_validator

from ..errors import OutOfRangeError


# Letter frequencies for one die face (96 faces in total).
# Q only ever appears as "Qu".
TILE_DISTRIBUTION: Dict[str, int] = {
    "A": 8, "B": 3, "C": 3, "D": 4, "E": 10, "F": 2, "G": 3,
    "H": 3, "I": 7, "J": 1, "K": 2, "L": 5, "M": 3, "N": 5,
    "O": 6, "P": 3, "Qu": 1, "R": 4, "S": 5, "T": 5, "U": 4,
    "V": 2, "W": 2, "X": 1, "Y": 3, "Z": 1
}

TOTAL_WEIGHT = sum(TILE_DISTRIBUTION.values())

TILE_LABELS = frozenset(TILE_DISTRIBUTION)

DEFAULT_SIZE = 4


def label_for_roll(roll: int) -> str:
    """
    Map a roll in [1, TOTAL_WEIGHT] to a tile label.

    Walks the distribution in its fixed order and returns the first label
    whose running total reaches the roll, so each label is hit by exactly
    as many rolls as its weight.

    Raises:
        ValueError: If the roll is outside [1, TOTAL_WEIGHT]
    """
    if not 1 <= roll <= TOTAL_WEIGHT:
        raise ValueError(f"Roll {roll} outside [1, {TOTAL_WEIGHT}]")

    running_total = 0
    for label, weight in TILE_DISTRIBUTION.items():
        running_total += weight
        if running_total >= roll:
            return label

    raise AssertionError("distribution walk ended without a label")


class Board(BaseModel):
    """
    A square grid of letter tiles shared by every player in a round.

    Cells are addressed as (x, y) where x picks the row and y the column.
    Boards are immutable once built.

    Attributes:
        tiles: Rows of tile labels
    """

    model_config = ConfigDict(frozen=True)

    tiles: Tuple[Tuple[str, ...], ...]

    @model_validator(mode="after")
    def _check_grid(self) -> "Board":
        size = len(self.tiles)
        if size == 0:
            raise ValueError("Board must have at least one row")
        for row in self.tiles:
            if len(row) != size:
                raise ValueError(f"Board must be square: row of {len(row)} in a {size}x{size} grid")
            for label in row:
                if label not in TILE_LABELS:
                    raise ValueError(f"Invalid tile label '{label}'")
        return self

    @property
    def size(self) -> int:
        """Side length of the board."""
        return len(self.tiles)

    def get(self, x: int, y: int) -> str:
        """
        Return the label of the tile at (x, y).

        Raises:
            OutOfRangeError: If either coordinate is outside [0, size)
        """
        if not 0 <= x < self.size:
            raise OutOfRangeError(f"x={x} outside board of size {self.size}")
        if not 0 <= y < self.size:
            raise OutOfRangeError(f"y={y} outside board of size {self.size}")
        return self.tiles[x][y]

    def rows(self) -> List[List[str]]:
        return [list(row) for row in self.tiles]

    def labels(self) -> Iterator[str]:
        """Every tile label, row by row."""
        for row in self.tiles:
            yield from row

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """In-bounds cells adjacent to (x, y), diagonals included."""
        self.get(x, y)
        cells = []
        for i in range(x - 1, x + 2):
            for j in range(y - 1, y + 2):
                if (i, j) != (x, y) and 0 <= i < self.size and 0 <= j < self.size:
                    cells.append((i, j))
        return cells


class BoardGenerator(BaseModel):
    """
    Produces boards of weighted-random tiles.

    Every cell is drawn independently from TILE_DISTRIBUTION.

    Attributes:
        seed: Optional random seed for reproducibility
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    seed: Optional[int] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    def draw_label(self) -> str:
        """Draw one tile label."""
        return label_for_roll(self._rng.randint(1, TOTAL_WEIGHT))

    def generate(self, size: int = DEFAULT_SIZE) -> Board:
        """
        Generate a size x size board.

        Args:
            size: Side length, at least 1

        Returns:
            A fully populated Board

        Raises:
            ValueError: If size is less than 1
        """
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")

        tiles = tuple(
            tuple(self.draw_label() for _ in range(size))
            for _ in range(size)
        )
        return Board(tiles=tiles)


def render_board(board: Board) -> str:
    """Render the board as text, one row per line."""
    return "\n".join(
        " ".join(f"{label:<2}" for label in row).rstrip()
        for row in board.tiles
    )
