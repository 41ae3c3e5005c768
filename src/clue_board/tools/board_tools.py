"""
CrewAI Tools for the Clue board.

Tools for player agents to ask where they can move. Each tool is bound to a
single Board instance by create_board_tools(); there is no global board.

Movement Rules:
- Roll dice and move exactly that many squares (horizontal/vertical only)
- Movement stops upon entering a room through a door (even if moves remain)
- Cannot visit the same square twice in one move
"""

from typing import Iterable

from crewai.tools import tool

from clue_board.board import Board
from clue_board.grid import BoardCell


def _sorted_cells(cells: Iterable[BoardCell]) -> list[BoardCell]:
    return sorted(cells, key=lambda c: (c.row, c.column))


def describe_cell(board: Board, cell: BoardCell) -> str:
    """One-line description of a square for agent output."""
    name = board.room_name(cell.initial)
    if cell.is_doorway:
        return f"({cell.row}, {cell.column}) 🚪 door to {name} (opens {cell.door_direction.name.lower()})"
    if cell.is_room:
        return f"({cell.row}, {cell.column}) inside {name}"
    return f"({cell.row}, {cell.column}) {name}"


def create_board_tools(board: Board) -> list:
    """
    Create the board tools bound to one Board.

    Args:
        board: The game's Board

    Returns:
        List of CrewAI tools: Get Adjacent Squares, Get Move Targets, Describe Square
    """

    @tool("Get Adjacent Squares")
    def get_adjacent_squares(row: int, column: int) -> str:
        """
        Get the squares you can step to in one move from a square.
        Room squares have no neighbours; doors only open one way.

        Args:
            row: Board row of the square
            column: Board column of the square

        Returns:
            The neighbouring squares
        """
        if not board.grid.is_within(row, column):
            return f"Error: ({row}, {column}) is not on the {board.num_rows}x{board.num_columns} board"

        adjacent = _sorted_cells(board.get_adjacent(row, column))
        if not adjacent:
            return f"No squares can be reached from ({row}, {column})"

        result = f"Squares next to ({row}, {column}):"
        for cell in adjacent:
            result += f"\n  • {describe_cell(board, cell)}"
        return result

    @tool("Get Move Targets")
    def get_move_targets(row: int, column: int, roll: int) -> str:
        """
        Get every square you can end your move on for a dice roll.
        You MUST move the exact number rolled, unless you enter a room
        through a door, which ends your move immediately.

        Args:
            row: Your current board row
            column: Your current board column
            roll: The dice total

        Returns:
            The squares you can stop on, rooms you can enter listed first
        """
        if not board.grid.is_within(row, column):
            return f"Error: ({row}, {column}) is not on the {board.num_rows}x{board.num_columns} board"
        if roll < 1:
            return f"Error: Roll must be at least 1, got {roll}"

        targets = _sorted_cells(board.calc_targets(row, column, roll))
        if not targets:
            return f"No legal moves of {roll} from ({row}, {column})"

        doors = [c for c in targets if c.is_doorway]
        squares = [c for c in targets if not c.is_doorway]

        result = f"🎲 {len(targets)} possible destinations for a roll of {roll} from ({row}, {column}):"
        if doors:
            result += "\n\n🚪 Rooms you can enter:"
            for cell in doors:
                result += f"\n  • {describe_cell(board, cell)}"
        if squares:
            result += "\n\n📍 Hallway squares:"
            for cell in squares:
                result += f"\n  • ({cell.row}, {cell.column})"
        return result

    @tool("Describe Square")
    def describe_square(row: int, column: int) -> str:
        """
        Describe what is on a board square.

        Args:
            row: Board row of the square
            column: Board column of the square

        Returns:
            The square's room, or that it is a walkway or a door
        """
        if not board.grid.is_within(row, column):
            return f"Error: ({row}, {column}) is not on the {board.num_rows}x{board.num_columns} board"
        return describe_cell(board, board.get_cell_at(row, column))

    return [get_adjacent_squares, get_move_targets, describe_square]
