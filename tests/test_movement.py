"""
Tests for Board Movement
Adjacency graph and move targets, based on the Clue movement rules:
- Move exactly the number rolled, no diagonals
- Enter rooms only through doors; entering a room ends the move
- Cannot visit the same square twice in one move
"""

from collections import deque

import pytest
from clue_board.grid import MAX_BOARD_SIZE, Grid
from clue_board.legend import Legend
from clue_board.movement import calc_adjacencies


def make_legend():
    return Legend.build([
        ("W", "Walkway", "Other"),
        ("R", "Study", "Card"),
    ])


def build_graph(rows):
    grid = Grid.build(rows, make_legend())
    return grid, calc_adjacencies(grid)


def positions(cells):
    return {(c.row, c.column) for c in cells}


OPEN_3X3 = [["W", "W", "W"] for _ in range(3)]

# Study along the bottom with one door facing up at (2, 1)
DOOR_BOARD = [
    ["W", "W", "W", "W", "W"],
    ["W", "W", "W", "W", "W"],
    ["R", "RU", "R", "R", "R"],
    ["R", "R", "R", "R", "R"],
]


def hop_distances(graph, origin):
    """Shortest hop counts along the graph (test oracle only)."""
    distances = {origin: 0}
    queue = deque([origin])
    while queue:
        cell = queue.popleft()
        for adjacent in graph.adjacent_to(cell):
            if adjacent not in distances:
                distances[adjacent] = distances[cell] + 1
                queue.append(adjacent)
    return distances


class TestAdjacencies:
    """Test the adjacency graph."""

    def test_center_has_four_neighbors(self):
        """Open center square connects to all four orthogonal squares."""
        _, graph = build_graph(OPEN_3X3)
        assert positions(graph.get_adjacent(1, 1)) == {(0, 1), (2, 1), (1, 0), (1, 2)}

    def test_corner_is_bounds_checked(self):
        """Corners only get in-bounds neighbours."""
        _, graph = build_graph(OPEN_3X3)
        assert positions(graph.get_adjacent(0, 0)) == {(0, 1), (1, 0)}
        assert positions(graph.get_adjacent(2, 2)) == {(1, 2), (2, 1)}

    def test_no_diagonal_neighbors(self):
        """Diagonal squares are never adjacent."""
        _, graph = build_graph(OPEN_3X3)
        assert (0, 0) not in positions(graph.get_adjacent(1, 1))

    def test_walkway_adjacency_is_symmetric(self):
        """Between walkways, A next to B means B next to A."""
        grid, graph = build_graph(DOOR_BOARD)
        for cell in grid:
            if not cell.is_walkway:
                continue
            for adjacent in graph.adjacent_to(cell):
                if adjacent.is_walkway:
                    assert cell in graph.adjacent_to(adjacent)

    def test_no_self_loops(self):
        """No cell is adjacent to itself."""
        grid, graph = build_graph(DOOR_BOARD)
        for cell in grid:
            assert cell not in graph.adjacent_to(cell)

    def test_room_interior_isolated(self):
        """Room squares have no neighbours and are nobody's neighbour."""
        grid, graph = build_graph(DOOR_BOARD)
        rooms = {cell for cell in grid if cell.is_room}
        for cell in grid:
            if cell.is_room:
                assert graph.adjacent_to(cell) == frozenset()
            assert not (graph.adjacent_to(cell) & rooms)

    def test_doorway_only_exits_in_facing(self):
        """A door facing up connects only to the square above it."""
        _, graph = build_graph(DOOR_BOARD)
        assert positions(graph.get_adjacent(2, 1)) == {(1, 1)}

    def test_door_entered_from_front(self):
        """The square in front of the door can step into it."""
        _, graph = build_graph(DOOR_BOARD)
        assert (2, 1) in positions(graph.get_adjacent(1, 1))

    def test_door_not_entered_from_side(self):
        """A walkway beside a door facing away cannot step into it, and vice versa."""
        rows = [
            ["W", "W", "W"],
            ["W", "RU", "W"],
            ["R", "R", "R"],
        ]
        _, graph = build_graph(rows)
        assert (1, 1) not in positions(graph.get_adjacent(1, 0))
        assert (1, 1) not in positions(graph.get_adjacent(1, 2))
        assert (1, 0) not in positions(graph.get_adjacent(1, 1))
        assert positions(graph.get_adjacent(1, 1)) == {(0, 1)}

    def test_door_not_entered_from_behind(self):
        """A door facing up cannot be entered from below."""
        rows = [
            ["W"],
            ["RU"],
            ["W"],
        ]
        _, graph = build_graph(rows)
        assert (1, 0) not in positions(graph.get_adjacent(2, 0))
        assert (2, 0) not in positions(graph.get_adjacent(1, 0))
        assert (1, 0) in positions(graph.get_adjacent(0, 0))

    def test_facing_doors_connect(self):
        """Two doors facing each other are adjacent both ways."""
        rows = [["RR", "RL"]]
        _, graph = build_graph(rows)
        assert positions(graph.get_adjacent(0, 0)) == {(0, 1)}
        assert positions(graph.get_adjacent(0, 1)) == {(0, 0)}

    def test_calc_adjacencies_idempotent(self):
        """Rebuilding on the same grid gives an equal graph."""
        grid, graph = build_graph(DOOR_BOARD)
        assert calc_adjacencies(grid) == graph
        assert len(graph) == grid.num_rows * grid.num_columns


class TestCalcTargets:
    """Test move target enumeration."""

    def test_one_step_from_center(self):
        """Rolling 1 from the center reaches exactly the four neighbours."""
        _, graph = build_graph(OPEN_3X3)
        targets = graph.calc_targets(1, 1, 1)
        assert positions(targets) == {(0, 1), (2, 1), (1, 0), (1, 2)}

    def test_two_steps_from_corner(self):
        """Rolling 2 from a corner reaches the diagonal and the two far squares."""
        _, graph = build_graph(OPEN_3X3)
        targets = graph.calc_targets(0, 0, 2)
        assert positions(targets) == {(1, 1), (0, 2), (2, 0)}

    def test_origin_never_a_target(self):
        """Cannot end on the starting square, even with a loop available."""
        _, graph = build_graph(OPEN_3X3)
        for steps in range(1, 9):
            assert (0, 0) not in positions(graph.calc_targets(0, 0, steps))

    def test_exact_length_loop(self):
        """Rolling 3 from a corner can end on the other side of the 2x2 block."""
        _, graph = build_graph(OPEN_3X3)
        targets = positions(graph.calc_targets(0, 0, 3))
        assert targets == {(0, 1), (1, 0), (1, 2), (2, 1)}

    def test_long_roll_terminates(self):
        """Rolling past the board's path length just yields no targets."""
        _, graph = build_graph(OPEN_3X3)
        assert graph.calc_targets(0, 0, 8) != frozenset()
        assert graph.calc_targets(0, 0, 9) == frozenset()
        assert graph.calc_targets(0, 0, 20) == frozenset()

    def test_doorway_absorbs_remaining_steps(self):
        """A door one step away is a target even with 5 to move."""
        _, graph = build_graph(DOOR_BOARD)
        targets = graph.calc_targets(1, 1, 5)
        assert (2, 1) in positions(targets)

    def test_nothing_past_the_door(self):
        """Targets never include room squares."""
        grid, graph = build_graph(DOOR_BOARD)
        targets = graph.calc_targets(1, 1, 5)
        assert all(not cell.is_room for cell in targets)

    def test_doorway_reached_in_fewer_hops(self):
        """A door two hops away is a target for any longer roll."""
        _, graph = build_graph(DOOR_BOARD)
        for steps in range(2, 7):
            assert (2, 1) in positions(graph.calc_targets(0, 1, steps))

    def test_isolated_origin(self):
        """An origin with no neighbours yields no targets."""
        rows = [["W", "R"], ["R", "R"]]
        _, graph = build_graph(rows)
        assert graph.calc_targets(0, 0, 3) == frozenset()

    def test_targets_within_reach(self):
        """Every target is reachable in at most `steps` hops."""
        grid, graph = build_graph(DOOR_BOARD)
        origin = grid.get_cell_at(0, 0)
        distances = hop_distances(graph, origin)
        for steps in range(1, 7):
            for cell in graph.calc_targets(0, 0, steps):
                assert distances[cell] <= steps
                if not cell.is_doorway:
                    assert (distances[cell] - steps) % 2 == 0

    def test_calls_do_not_leak(self):
        """Consecutive calls are independent of each other."""
        _, graph = build_graph(DOOR_BOARD)
        first = graph.calc_targets(1, 1, 2)
        graph.calc_targets(0, 4, 3)
        assert graph.calc_targets(1, 1, 2) == first

    def test_returns_frozenset(self):
        """Targets are returned directly and cannot be mutated by callers."""
        _, graph = build_graph(OPEN_3X3)
        assert isinstance(graph.calc_targets(1, 1, 2), frozenset)

    def test_zero_steps_rejected(self):
        """A move is always at least one square."""
        _, graph = build_graph(OPEN_3X3)
        with pytest.raises(ValueError, match="at least 1"):
            graph.calc_targets(1, 1, 0)

    def test_long_corridor_on_largest_board(self):
        """A roll along a single 1275-square corridor on a 50x50 board completes."""
        size = MAX_BOARD_SIZE
        rows = []
        for i in range(size):
            if i % 2 == 0:
                rows.append(["W"] * size)
            else:
                # Gap alternates between the right and left ends
                gap = size - 1 if (i // 2) % 2 == 0 else 0
                row = ["R"] * size
                row[gap] = "W"
                rows.append(row)
        _, graph = build_graph(rows)

        # 51 squares per row pair; 1200 = 23 pairs + 27 squares into row 46,
        # which runs right to left
        assert positions(graph.calc_targets(0, 0, 1200)) == {(46, 22)}
        assert positions(graph.calc_targets(0, 0, 1274)) == {(49, 49)}
        assert graph.calc_targets(0, 0, 1275) == frozenset()

    def test_origin_off_board(self):
        _, graph = build_graph(OPEN_3X3)
        with pytest.raises(IndexError):
            graph.calc_targets(3, 0, 1)
