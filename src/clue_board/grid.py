"""
Board Grid for the Clue board.

The board is a fixed rectangular grid of cells. Each layout token is one or
two characters:
  - first character: room symbol (looked up in the Legend)
  - optional second character: door facing (U, D, L, R)

Every cell is exactly one of:
  - WALKWAY: open square outside any room
  - ROOM:    inside a room (not part of movement)
  - DOORWAY: room square with a door facing; entered only from the front

The grid is validated in full when it is built and never changes afterwards.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

from clue_board.exceptions import MalformedLayout
from clue_board.legend import Legend

logger = logging.getLogger(__name__)

MAX_BOARD_SIZE = 50


class DoorDirection(Enum):
    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def delta(self) -> Tuple[int, int]:
        """(row, column) offset of the neighbouring square in this direction."""
        return _DELTAS[self]

    @property
    def opposite(self) -> "DoorDirection":
        return _OPPOSITES[self]

    @classmethod
    def from_code(cls, code: str) -> Optional["DoorDirection"]:
        for direction in cls:
            if direction.value == code:
                return direction
        return None


_DELTAS = {
    DoorDirection.UP: (-1, 0),
    DoorDirection.DOWN: (1, 0),
    DoorDirection.LEFT: (0, -1),
    DoorDirection.RIGHT: (0, 1),
}

_OPPOSITES = {
    DoorDirection.UP: DoorDirection.DOWN,
    DoorDirection.DOWN: DoorDirection.UP,
    DoorDirection.LEFT: DoorDirection.RIGHT,
    DoorDirection.RIGHT: DoorDirection.LEFT,
}


class CellKind(Enum):
    WALKWAY = "walkway"
    ROOM = "room"
    DOORWAY = "doorway"


@dataclass(frozen=True)
class BoardCell:
    """A single square on the board."""
    row: int
    column: int
    initial: str                                  # Room symbol from the legend
    kind: CellKind
    door_direction: Optional[DoorDirection] = None  # Only set on doorways

    @property
    def is_walkway(self) -> bool:
        return self.kind == CellKind.WALKWAY

    @property
    def is_room(self) -> bool:
        return self.kind == CellKind.ROOM

    @property
    def is_doorway(self) -> bool:
        return self.kind == CellKind.DOORWAY

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.column)

    def __repr__(self):
        if self.door_direction:
            return f"BoardCell({self.row},{self.column} {self.initial}{self.door_direction.value})"
        return f"BoardCell({self.row},{self.column} {self.initial})"


def parse_cell(row: int, column: int, token: str, legend: Legend) -> BoardCell:
    """
    Turn one layout token into a classified BoardCell.

    Raises:
        MalformedLayout: If the token is the wrong length, its symbol is not
            in the legend, or its door code is not U/D/L/R
    """
    if not 1 <= len(token) <= 2:
        logger.error(f"Bad cell token {token!r} at ({row}, {column})")
        raise MalformedLayout(f"Error: Invalid cell {token!r} at ({row}, {column})")

    initial = token[0]
    if initial not in legend:
        logger.error(f"Unknown room symbol {initial!r} at ({row}, {column})")
        raise MalformedLayout(f"Error: Invalid Room character {initial} at ({row}, {column})")

    door_direction = None
    if len(token) == 2:
        door_direction = DoorDirection.from_code(token[1])
        if door_direction is None:
            logger.error(f"Bad door code {token[1]!r} at ({row}, {column})")
            raise MalformedLayout(f"Error: Invalid door direction {token[1]!r} at ({row}, {column})")

    # A door facing always wins; a walkway symbol with a facing is a doorway
    if door_direction is not None:
        kind = CellKind.DOORWAY
    elif legend.is_walkway(initial):
        kind = CellKind.WALKWAY
    else:
        kind = CellKind.ROOM

    return BoardCell(row, column, initial, kind, door_direction)


class Grid:
    """
    Immutable rectangular board of BoardCells.

    Use Grid.build() to validate layout rows against a Legend.
    """

    __slots__ = ("_cells", "_num_rows", "_num_columns", "legend")

    def __init__(self, cells: List[List[BoardCell]], legend: Legend):
        self._cells = tuple(tuple(row) for row in cells)
        self._num_rows = len(self._cells)
        self._num_columns = len(self._cells[0]) if self._cells else 0
        self.legend = legend

    @classmethod
    def build(cls, rows: Sequence[Sequence[str]], legend: Legend) -> "Grid":
        """
        Build a grid from layout rows.

        Args:
            rows: One sequence of tokens per board row, already split on the
                layout delimiter
            legend: The finished Legend

        Returns:
            A fully validated Grid

        Raises:
            MalformedLayout: On any structural problem; no partial grid is made
        """
        if not rows:
            logger.error("Layout has no rows")
            raise MalformedLayout("Error: Layout has no rows")

        size = len(rows[0])
        # Check that each line has the same number of columns
        for i, row in enumerate(rows[1:], start=1):
            if len(row) != size:
                logger.error(f"Row {i} has {len(row)} columns, expected {size}")
                raise MalformedLayout(
                    f"Error: Row 0 has {size} columns.\nRow {i} has {len(row)} columns."
                )

        num_rows = len(rows)
        if not 1 <= num_rows <= MAX_BOARD_SIZE or not 1 <= size <= MAX_BOARD_SIZE:
            logger.error(f"Board is {num_rows}x{size}, outside 1-{MAX_BOARD_SIZE}")
            raise MalformedLayout(
                f"Error: Board is {num_rows}x{size}; both dimensions must be 1-{MAX_BOARD_SIZE}"
            )

        cells = [
            [parse_cell(i, j, token, legend) for j, token in enumerate(row)]
            for i, row in enumerate(rows)
        ]
        grid = cls(cells, legend)
        logger.info(f"Loaded {num_rows}x{size} board with {len(grid.doorways())} doorways")
        return grid

    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_columns(self) -> int:
        return self._num_columns

    def is_within(self, row: int, column: int) -> bool:
        """Bounds check that never raises."""
        return 0 <= row < self._num_rows and 0 <= column < self._num_columns

    def get_cell_at(self, row: int, column: int) -> BoardCell:
        """
        Get the cell at (row, column).

        Raises IndexError when out of bounds rather than wrapping around on
        negative indices.
        """
        if not self.is_within(row, column):
            raise IndexError(
                f"Cell ({row}, {column}) is outside the {self._num_rows}x{self._num_columns} board"
            )
        return self._cells[row][column]

    def neighbor(self, cell: BoardCell, direction: DoorDirection) -> Optional[BoardCell]:
        """The orthogonal neighbour in a direction, or None at the board edge."""
        d_row, d_col = direction.delta
        row, column = cell.row + d_row, cell.column + d_col
        if not self.is_within(row, column):
            return None
        return self._cells[row][column]

    def __iter__(self) -> Iterator[BoardCell]:
        """All cells in row-major order."""
        for row in self._cells:
            yield from row

    def doorways(self) -> List[BoardCell]:
        return [cell for cell in self if cell.is_doorway]

    def room_name_at(self, row: int, column: int) -> str:
        return self.legend.room_name(self.get_cell_at(row, column).initial)
