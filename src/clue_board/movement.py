"""
Movement on the Clue board: adjacency graph and move targets.

Movement rules:
- Move horizontally or vertically only (no diagonal)
- Room squares are never walked through; a room is entered only via a doorway
- A doorway is entered only from the square it faces
- Movement stops upon entering a room (even if moves remain)
- Cannot visit the same square twice in one move
"""

import logging
from typing import Dict, FrozenSet, Iterator, List, Set, Tuple

from clue_board.grid import BoardCell, DoorDirection, Grid

logger = logging.getLogger(__name__)


def _can_step(grid: Grid, cell: BoardCell, direction: DoorDirection) -> bool:
    """
    Check a single step from a walkway or doorway cell.

    The step is allowed when the current cell does not block that direction
    (no facing, or facing that way) and the neighbour is a walkway or a
    doorway facing back toward us.
    """
    if cell.door_direction is not None and cell.door_direction != direction:
        return False
    target = grid.neighbor(cell, direction)
    if target is None:
        return False
    return target.is_walkway or target.door_direction == direction.opposite


class AdjacencyGraph:
    """
    Static cell -> neighbours mapping for one grid.

    The relation is directional: a doorway may reach a walkway that cannot
    reach it back. Never symmetrise it.
    """

    def __init__(self, grid: Grid, adjacency: Dict[BoardCell, FrozenSet[BoardCell]]):
        self.grid = grid
        self._adjacency = adjacency

    def __eq__(self, other):
        if isinstance(other, AdjacencyGraph):
            return self._adjacency == other._adjacency
        return False

    def __len__(self) -> int:
        return len(self._adjacency)

    def get_adjacent(self, row: int, column: int) -> FrozenSet[BoardCell]:
        """Cells reachable in one step from (row, column)."""
        return self._adjacency[self.grid.get_cell_at(row, column)]

    def adjacent_to(self, cell: BoardCell) -> FrozenSet[BoardCell]:
        return self._adjacency[cell]

    def calc_targets(self, row: int, column: int, steps: int) -> FrozenSet[BoardCell]:
        """
        Find every cell a token can stop on after moving exactly `steps`.

        A path never revisits a cell, and stepping onto a doorway ends that
        path at once regardless of the steps left. The origin is on every
        path, so it is never a target.

        Args:
            row: Origin row
            column: Origin column
            steps: Squares to move (the dice roll), at least 1

        Returns:
            The target cells (no duplicates, unordered)

        Raises:
            ValueError: If steps is less than 1
            IndexError: If the origin is off the board
        """
        if steps < 1:
            raise ValueError(f"Move length must be at least 1, got {steps}")

        origin = self.grid.get_cell_at(row, column)
        visited: Set[BoardCell] = {origin}
        targets: Set[BoardCell] = set()
        self._find_targets(origin, steps, visited, targets)

        logger.debug(f"{len(targets)} targets for {steps} steps from ({row}, {column})")
        return frozenset(targets)

    def _find_targets(self, origin: BoardCell, steps: int,
                      visited: Set[BoardCell], targets: Set[BoardCell]) -> None:
        """
        Backtracking walk from origin using an explicit stack.

        Each frame is (cell, steps left, iterator over its neighbours). A cell
        is marked visited when its frame is pushed and unmarked when popped,
        so paths can be as long as the board without hitting the recursion
        limit.
        """
        stack: List[Tuple[BoardCell, int, Iterator[BoardCell]]] = [
            (origin, steps, iter(self._adjacency[origin]))
        ]
        while stack:
            cell, steps_left, neighbors = stack[-1]
            for adjacent in neighbors:
                if adjacent in visited:
                    continue
                if steps_left == 1 or adjacent.is_doorway:
                    targets.add(adjacent)
                    continue
                visited.add(adjacent)
                stack.append((adjacent, steps_left - 1, iter(self._adjacency[adjacent])))
                break
            else:
                stack.pop()
                if stack:
                    visited.remove(cell)


def calc_adjacencies(grid: Grid) -> AdjacencyGraph:
    """
    Build the adjacency graph for a grid.

    Only walkways and doorways get neighbours; room squares map to an empty
    set and are never anyone's neighbour. Re-running on the same grid gives
    an equal graph.
    """
    adjacency: Dict[BoardCell, FrozenSet[BoardCell]] = {}
    for cell in grid:
        if cell.is_walkway or cell.is_doorway:
            adjacency[cell] = frozenset(
                grid.neighbor(cell, direction)
                for direction in DoorDirection
                if _can_step(grid, cell, direction)
            )
        else:
            adjacency[cell] = frozenset()

    edges = sum(len(neighbors) for neighbors in adjacency.values())
    logger.debug(f"Calculated adjacencies: {len(adjacency)} cells, {edges} edges")
    return AdjacencyGraph(grid, adjacency)
