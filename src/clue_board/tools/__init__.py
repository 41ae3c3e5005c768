from clue_board.tools.board_tools import create_board_tools, describe_cell

__all__ = ["create_board_tools", "describe_cell"]
