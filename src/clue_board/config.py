"""
Board settings from the environment.

Values are read from the process environment after loading a .env file:
    CLUE_LAYOUT_FILE       path to the layout CSV (default: packaged board)
    CLUE_LEGEND_FILE       path to the legend file (default: packaged legend)
    CLUE_WALKWAY_SYMBOL    legend symbol for walkway squares (default: W)
    CLUE_LAYOUT_DELIMITER  cell delimiter in the layout file (default: ,)
    CLUE_DEBUG             enable debug logging
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from clue_board.legend import DEFAULT_WALKWAY_SYMBOL
from clue_board.loader import DEFAULT_DELIMITER, DEFAULT_LAYOUT_FILE, DEFAULT_LEGEND_FILE


def _is_truthy(value: Optional[str]) -> bool:
    return (value or "").lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class BoardSettings:
    layout_file: str = str(DEFAULT_LAYOUT_FILE)
    legend_file: str = str(DEFAULT_LEGEND_FILE)
    walkway_symbol: str = DEFAULT_WALKWAY_SYMBOL
    delimiter: str = DEFAULT_DELIMITER
    debug: bool = False

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "BoardSettings":
        """Build settings from environment variables (and .env if present)."""
        if load_env_file:
            load_dotenv()
        return cls(
            layout_file=os.environ.get("CLUE_LAYOUT_FILE") or str(DEFAULT_LAYOUT_FILE),
            legend_file=os.environ.get("CLUE_LEGEND_FILE") or str(DEFAULT_LEGEND_FILE),
            walkway_symbol=os.environ.get("CLUE_WALKWAY_SYMBOL") or DEFAULT_WALKWAY_SYMBOL,
            delimiter=os.environ.get("CLUE_LAYOUT_DELIMITER") or DEFAULT_DELIMITER,
            debug=_is_truthy(os.environ.get("CLUE_DEBUG")),
        )
