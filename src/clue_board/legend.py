"""
Room Legend for the Clue board.

Maps each single-character room symbol used in the layout to a room name
and a room kind. Card rooms are the ones dealt as cards (Kitchen, Study, ...),
Other covers everything else on the board (walkway, closet).

One symbol is designated the walkway symbol when the legend is built; cells
carrying it are open board squares outside any room.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple, Union

from clue_board.exceptions import MalformedLegend, UnknownRoomType

logger = logging.getLogger(__name__)

DEFAULT_WALKWAY_SYMBOL = "W"


class RoomKind(Enum):
    CARD = "Card"      # Room that appears in the deck
    OTHER = "Other"    # Walkway, closet, anything not dealt as a card

    @classmethod
    def parse(cls, value: Union[str, "RoomKind"]) -> "RoomKind":
        """Convert a legend kind string into a RoomKind."""
        if isinstance(value, RoomKind):
            return value
        for kind in cls:
            if kind.value == value:
                return kind
        logger.error(f"Unknown room kind {value!r}")
        raise UnknownRoomType(f"Room is not type Card or Other. Type is: {value}")


@dataclass(frozen=True)
class LegendEntry:
    """One legend line: symbol, room name and room kind."""
    symbol: str
    name: str
    kind: RoomKind


class Legend:
    """
    Read-only symbol lookup for the board.

    Build it with Legend.build(); the constructor takes already validated
    entries.
    """

    def __init__(self, entries: dict[str, LegendEntry], walkway_symbol: str = DEFAULT_WALKWAY_SYMBOL):
        self._entries = dict(entries)
        self.walkway_symbol = walkway_symbol

    @classmethod
    def build(
        cls,
        entries: Iterable[Tuple[str, str, Union[str, RoomKind]]],
        walkway_symbol: str = DEFAULT_WALKWAY_SYMBOL,
    ) -> "Legend":
        """
        Validate raw legend entries and build a Legend.

        Args:
            entries: (symbol, name, kind) tuples; kind is "Card"/"Other" or a RoomKind
            walkway_symbol: The symbol that marks open walkway squares

        Returns:
            The finished Legend

        Raises:
            UnknownRoomType: If a kind is neither Card nor Other
            MalformedLegend: If a symbol is not one character, a name is
                empty, or a symbol is declared twice
        """
        validated: dict[str, LegendEntry] = {}
        for symbol, name, kind in entries:
            if len(symbol) != 1:
                logger.error(f"Legend symbol {symbol!r} is not a single character")
                raise MalformedLegend(f"Legend symbol must be a single character, got {symbol!r}")
            if not name:
                logger.error(f"Legend entry for {symbol!r} has no room name")
                raise MalformedLegend(f"Legend entry for {symbol!r} has no room name")
            if symbol in validated:
                logger.error(f"Duplicate legend symbol {symbol!r}")
                raise MalformedLegend(f"Legend symbol {symbol!r} is declared more than once")
            validated[symbol] = LegendEntry(symbol, name, RoomKind.parse(kind))

        if walkway_symbol not in validated:
            logger.warning(f"Walkway symbol {walkway_symbol!r} has no legend entry; board will have no walkways")
        elif validated[walkway_symbol].kind == RoomKind.CARD:
            logger.warning(f"Walkway symbol {walkway_symbol!r} is a Card room ({validated[walkway_symbol].name})")

        logger.debug(f"Built legend with {len(validated)} entries (walkway={walkway_symbol!r})")
        return cls(validated, walkway_symbol)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LegendEntry]:
        return iter(self._entries.values())

    def get(self, symbol: str) -> Optional[LegendEntry]:
        return self._entries.get(symbol)

    def room_name(self, symbol: str) -> str:
        """Get the room name for a symbol. Raises KeyError for unknown symbols."""
        return self._entries[symbol].name

    def kind(self, symbol: str) -> RoomKind:
        return self._entries[symbol].kind

    def is_walkway(self, symbol: str) -> bool:
        """True if the symbol is the designated walkway type."""
        return symbol == self.walkway_symbol and symbol in self._entries

    def as_dict(self) -> dict[str, str]:
        """Symbol -> room name mapping."""
        return {symbol: entry.name for symbol, entry in self._entries.items()}
