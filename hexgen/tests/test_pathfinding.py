"""Tests for A* pathfinding."""

import pytest

from hexgen.hex_coords import disk, distance
from hexgen.pathfinding import (
    UNREACHABLE,
    build_path_between,
    find_path,
    path_length,
    reconstruct,
    validate_connectivity,
)


@pytest.fixture
def line():
    """Five hexes in a straight row."""
    return {(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)}


class TestPathLength:
    def test_straight_line(self, line):
        assert path_length((0, 0), (4, 0), line) == 4

    def test_start_equals_goal(self, line):
        assert path_length((2, 0), (2, 0), line) == 0

    def test_start_not_road(self, line):
        """Membership is checked even when start == goal."""
        assert path_length((9, 9), (9, 9), line) == UNREACHABLE

    def test_goal_not_road(self, line):
        assert path_length((0, 0), (5, 0), line) == UNREACHABLE

    def test_gap_is_unreachable(self):
        roads = {(0, 0), (1, 0), (3, 0), (4, 0)}
        assert path_length((0, 0), (4, 0), roads) == UNREACHABLE

    def test_open_disk_matches_distance(self):
        """With nothing blocked the shortest route is the hex distance."""
        area = disk((0, 0), 4)
        for goal in [(4, 0), (-2, -2), (1, 3), (0, -4)]:
            assert path_length((0, 0), goal, area) == distance((0, 0), goal)

    def test_detour_around_wall(self):
        """A wall forces a longer route than the straight distance."""
        area = disk((0, 0), 3)
        wall = {(0, -1), (0, 0), (0, 1), (0, 2)}
        passable = area - wall
        length = path_length((-1, 0), (1, 0), passable)
        assert length > distance((-1, 0), (1, 0))
        assert length != UNREACHABLE


class TestFindPath:
    def test_straight_line(self, line):
        assert find_path((0, 0), (4, 0), line) == [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)]

    def test_single_node(self, line):
        assert find_path((1, 0), (1, 0), line) == [(1, 0)]

    def test_not_passable(self, line):
        assert find_path((0, 0), (0, 1), line) is None

    def test_steps_are_adjacent(self):
        area = disk((0, 0), 3) - {(0, 0), (1, -1)}
        path = find_path((-2, 1), (2, -1), area)
        assert path is not None
        for a, b in zip(path, path[1:]):
            assert distance(a, b) == 1
        assert all(c in area for c in path)

    def test_tie_break_among_shortest_paths(self):
        """Several optimal routes exist; the same one is always chosen."""
        area = disk((0, 0), 3)
        expected = [(0, 0), (0, 1), (1, 1), (2, 1)]
        assert find_path((0, 0), (2, 1), area) == expected
        assert find_path((0, 0), (2, 1), set(reversed(sorted(area)))) == expected
        assert find_path((0, 0), (2, 1), frozenset(sorted(area, key=lambda c: (c[1], -c[0])))) == expected

    def test_agrees_with_path_length(self):
        """Both searches agree on reachability and cost."""
        area = disk((0, 0), 3) - {(1, 0), (1, -1), (0, 1), (-1, 1)}
        for goal in sorted(area):
            path = find_path((0, 0), goal, area)
            length = path_length((0, 0), goal, area)
            if path is None:
                assert length == UNREACHABLE
            else:
                assert len(path) - 1 == length

    def test_unreachable_island(self):
        passable = {(0, 0), (1, 0), (5, 5)}
        assert find_path((0, 0), (5, 5), passable) is None
        assert path_length((0, 0), (5, 5), passable) == UNREACHABLE


class TestReconstruct:
    def test_follows_parents(self):
        parents = {(1, 0): (0, 0), (2, 0): (1, 0)}
        assert reconstruct(parents, (0, 0), (2, 0)) == [(0, 0), (1, 0), (2, 0)]


class TestBuildPathBetween:
    def test_excludes_start(self, line):
        assert build_path_between((0, 0), (2, 0), line) == [(1, 0), (2, 0)]

    def test_same_node_is_none(self, line):
        assert build_path_between((0, 0), (0, 0), line) is None

    def test_no_path(self, line):
        assert build_path_between((0, 0), (7, 7), line) is None


class TestValidateConnectivity:
    def test_empty(self):
        assert validate_connectivity([])

    def test_single(self):
        assert validate_connectivity([(3, -2)])

    def test_connected_line(self, line):
        assert validate_connectivity(line)

    def test_two_components(self):
        assert not validate_connectivity([(0, 0), (1, 0), (5, 5), (5, 6)])

    def test_accepts_any_iterable(self):
        assert validate_connectivity(iter([(0, 0), (0, 1)]))
