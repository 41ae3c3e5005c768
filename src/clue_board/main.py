#!/usr/bin/env python
"""
Clue Board
Entry point: load the board and show where a token can move.
"""

import os
import logging
import sys
from typing import List, Optional

# Disable CrewAI tracing before the board tools import crewai
os.environ.setdefault("CREWAI_TRACING_ENABLED", "false")

from clue_board.board import Board
from clue_board.config import BoardSettings
from clue_board.exceptions import BoardConfigError
from clue_board.tools.board_tools import describe_cell

logger = logging.getLogger(__name__)

USAGE = "Usage: python -m clue_board.main [row column roll]"


def configure_logging(settings: BoardSettings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def load_board(settings: BoardSettings) -> Optional[Board]:
    """
    Build the board from settings.

    Returns None (after reporting) if the files are missing or invalid;
    the caller must stop rather than carry on without a board.
    """
    try:
        return Board.from_settings(settings)
    except FileNotFoundError as e:
        print(f"❌ Error: Board file not found: {e.filename}")
    except BoardConfigError as e:
        logger.debug("Board configuration failed", exc_info=True)
        print(f"❌ Error: Invalid board configuration ({type(e).__name__})")
        print(f"   {e}")
    return None


def show_targets(board: Board, row: int, column: int, roll: int) -> None:
    """Print every square reachable with a roll from (row, column)."""
    origin = board.get_cell_at(row, column)
    print(f"📍 From {describe_cell(board, origin)} with a roll of {roll}:")
    targets = sorted(board.calc_targets(row, column, roll), key=lambda c: (c.row, c.column))
    if not targets:
        print("   No legal moves")
    for cell in targets:
        print(f"   • {describe_cell(board, cell)}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    argv = sys.argv[1:] if argv is None else argv
    settings = BoardSettings.from_env()
    configure_logging(settings)

    board = load_board(settings)
    if board is None:
        return 1

    print(f"🔍 Board: {board.num_rows} rows x {board.num_columns} columns, "
          f"{len(board.legend)} legend entries, {len(board.grid.doorways())} doors")

    if not argv:
        return 0
    if len(argv) != 3:
        print(USAGE)
        return 2

    try:
        row, column, roll = (int(arg) for arg in argv)
    except ValueError:
        print(USAGE)
        return 2

    if not board.grid.is_within(row, column):
        print(f"❌ Error: ({row}, {column}) is not on the board")
        return 2
    if roll < 1:
        print("❌ Error: Roll must be at least 1")
        return 2

    show_targets(board, row, column, roll)
    return 0


if __name__ == "__main__":
    sys.exit(main())
