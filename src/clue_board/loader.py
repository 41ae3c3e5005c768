"""
Layout and legend file loading.

Legend file, one room per line:
    K, Kitchen, Card
    W, Walkway, Other

Layout file, one board row per line, cells separated by the delimiter:
    K,K,KR,W,W,B,...

This module only turns text into rows and legend entries. All validation of
the board itself happens in Legend.build() and Grid.build().
"""

import logging
from pathlib import Path
from typing import List, Type, Union

from clue_board.exceptions import BoardConfigError, MalformedLayout, MalformedLegend
from clue_board.legend import DEFAULT_WALKWAY_SYMBOL, Legend

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_LAYOUT_FILE = DATA_DIR / "ClueGameLayout.csv"
DEFAULT_LEGEND_FILE = DATA_DIR / "ClueGameLegend.txt"

LEGEND_SEPARATOR = ", "
DEFAULT_DELIMITER = ","


def parse_legend(text: str, walkway_symbol: str = DEFAULT_WALKWAY_SYMBOL) -> Legend:
    """
    Parse legend text into a Legend.

    Raises:
        MalformedLegend: If a line does not have exactly three fields
        UnknownRoomType: If a room kind is not Card or Other
    """
    entries = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        fields = [field.strip() for field in line.split(LEGEND_SEPARATOR)]
        if len(fields) != 3:
            logger.error(f"Legend line {line_number} does not have three fields")
            raise MalformedLegend(
                f"Legend line {line_number} must be 'symbol, name, kind', got {line!r}"
            )
        entries.append(tuple(fields))
    return Legend.build(entries, walkway_symbol)


def parse_layout(text: str, delimiter: str = DEFAULT_DELIMITER) -> List[List[str]]:
    """Split layout text into rows of cell tokens. Blank lines are skipped."""
    return [
        [token.strip() for token in line.split(delimiter)]
        for line in text.splitlines()
        if line.strip()
    ]


def _read_text(path: Union[str, Path], what: str, error: Type[BoardConfigError]) -> str:
    """Read a config file. Bytes that are not UTF-8 raise `error`."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        logger.error(f"{what} file not found: {path}")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"{what} file is not valid UTF-8: {path}")
        raise error(f"Error: {what} file {path} is not valid UTF-8 (byte {e.start})") from e


def load_legend(path: Union[str, Path] = DEFAULT_LEGEND_FILE,
                walkway_symbol: str = DEFAULT_WALKWAY_SYMBOL) -> Legend:
    """Load and validate the room legend from a file."""
    legend = parse_legend(_read_text(path, "Room config", MalformedLegend), walkway_symbol)
    logger.debug(f"Loaded legend from {path}")
    return legend


def load_layout(path: Union[str, Path] = DEFAULT_LAYOUT_FILE,
                delimiter: str = DEFAULT_DELIMITER) -> List[List[str]]:
    """Load raw layout rows from a file. Validation happens in Grid.build()."""
    rows = parse_layout(_read_text(path, "Board config", MalformedLayout), delimiter)
    logger.debug(f"Loaded {len(rows)} layout rows from {path}")
    return rows
