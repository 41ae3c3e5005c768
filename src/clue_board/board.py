"""
Clue Board - the owning context for legend, grid and adjacency graph.

A Board is built once at game setup and handed to whatever needs it (turn
logic, agent tools). It is read-only afterwards; calc_targets can be called
every turn without any reset in between.
"""

import logging
from pathlib import Path
from typing import FrozenSet, Sequence, Union

from clue_board.config import BoardSettings
from clue_board.grid import BoardCell, Grid
from clue_board.legend import DEFAULT_WALKWAY_SYMBOL, Legend
from clue_board.loader import DEFAULT_DELIMITER, load_layout, load_legend
from clue_board.movement import AdjacencyGraph, calc_adjacencies

logger = logging.getLogger(__name__)


class Board:
    """The game board: legend, validated grid and adjacency graph."""

    def __init__(self, legend: Legend, grid: Grid, adjacency: AdjacencyGraph):
        self.legend = legend
        self.grid = grid
        self.adjacency = adjacency

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    @classmethod
    def build(cls, layout: Sequence[Sequence[str]], legend: Legend) -> "Board":
        """
        Build the board from layout rows and a finished legend.

        Raises:
            MalformedLayout: If the layout is invalid; no Board is created
        """
        grid = Grid.build(layout, legend)
        return cls(legend, grid, calc_adjacencies(grid))

    @classmethod
    def from_files(
        cls,
        layout_path: Union[str, Path],
        legend_path: Union[str, Path],
        *,
        walkway_symbol: str = DEFAULT_WALKWAY_SYMBOL,
        delimiter: str = DEFAULT_DELIMITER,
    ) -> "Board":
        """Load legend first, then layout, then build the board."""
        legend = load_legend(legend_path, walkway_symbol)
        layout = load_layout(layout_path, delimiter)
        board = cls.build(layout, legend)
        logger.info(f"Board ready from {layout_path} and {legend_path}")
        return board

    @classmethod
    def from_settings(cls, settings: BoardSettings) -> "Board":
        return cls.from_files(
            settings.layout_file,
            settings.legend_file,
            walkway_symbol=settings.walkway_symbol,
            delimiter=settings.delimiter,
        )

    def recalc_adjacencies(self) -> AdjacencyGraph:
        """Rebuild the adjacency graph from the (unchanged) grid."""
        self.adjacency = calc_adjacencies(self.grid)
        return self.adjacency

    # ========================================================================
    # ACCESSORS
    # ========================================================================

    @property
    def num_rows(self) -> int:
        return self.grid.num_rows

    @property
    def num_columns(self) -> int:
        return self.grid.num_columns

    def get_cell_at(self, row: int, column: int) -> BoardCell:
        return self.grid.get_cell_at(row, column)

    def get_adjacent(self, row: int, column: int) -> FrozenSet[BoardCell]:
        return self.adjacency.get_adjacent(row, column)

    def calc_targets(self, row: int, column: int, steps: int) -> FrozenSet[BoardCell]:
        return self.adjacency.calc_targets(row, column, steps)

    def room_name(self, symbol: str) -> str:
        return self.legend.room_name(symbol)

    def room_name_at(self, row: int, column: int) -> str:
        return self.grid.room_name_at(row, column)
