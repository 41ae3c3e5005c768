"""Clue board model: grid, doorway-aware adjacency and move targets."""

from clue_board.board import Board
from clue_board.exceptions import BoardConfigError, MalformedLayout, MalformedLegend, UnknownRoomType
from clue_board.grid import MAX_BOARD_SIZE, BoardCell, CellKind, DoorDirection, Grid
from clue_board.legend import Legend, LegendEntry, RoomKind
from clue_board.movement import AdjacencyGraph, calc_adjacencies

__all__ = [
    "AdjacencyGraph",
    "Board",
    "BoardCell",
    "BoardConfigError",
    "CellKind",
    "DoorDirection",
    "Grid",
    "Legend",
    "LegendEntry",
    "MAX_BOARD_SIZE",
    "MalformedLayout",
    "MalformedLegend",
    "RoomKind",
    "UnknownRoomType",
    "calc_adjacencies",
]
