"""A* pathfinding over a passable set of hex coordinates.

Both variants share one search loop. The frontier is a binary heap of
(f, h, coord) tuples, so ties on f go to the node nearer the goal and any
remaining ties are broken by coordinate order. Duplicate frontier entries are
dropped lazily when popped.
"""

import heapq
from typing import Callable, Collection, Iterable, Optional

from hexgen.hex_coords import Coord, axial_to_cube, cube_distance, distance, neighbors

UNREACHABLE = -1

Heuristic = Callable[[Coord], int]


def _search(
    start: Coord,
    goal: Coord,
    passable: Collection[Coord],
    heuristic: Heuristic,
) -> tuple[Optional[int], dict[Coord, Coord]]:
    """Run A* from start to goal.

    Returns:
        (cost, parents). cost is None when the goal is unreachable.
    """
    open_heap: list[tuple[int, int, Coord]] = []
    g_score: dict[Coord, int] = {start: 0}
    parents: dict[Coord, Coord] = {}
    closed: set[Coord] = set()

    h_start = heuristic(start)
    heapq.heappush(open_heap, (h_start, h_start, start))

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        if current in closed:
            continue
        closed.add(current)

        if current == goal:
            return g_score[current], parents

        for neighbor in neighbors(current):
            if neighbor not in passable or neighbor in closed:
                continue

            tentative = g_score[current] + 1
            if tentative < g_score.get(neighbor, tentative + 1):
                g_score[neighbor] = tentative
                parents[neighbor] = current
                h = heuristic(neighbor)
                heapq.heappush(open_heap, (tentative + h, h, neighbor))

    return None, parents


def reconstruct(parents: dict[Coord, Coord], start: Coord, goal: Coord) -> list[Coord]:
    """Follow parent links from goal back to start."""
    path = [goal]
    current = goal
    while current != start:
        current = parents[current]
        path.append(current)
    path.reverse()
    return path


def path_length(start: Coord, goal: Coord, roads: Collection[Coord]) -> int:
    """Length of the shortest route over road tiles only.

    Args:
        start: Starting road coordinate
        goal: Goal road coordinate
        roads: Set of road coordinates (the passable set)

    Returns:
        Number of steps, or UNREACHABLE (-1) if no route exists
    """
    if start not in roads or goal not in roads:
        return UNREACHABLE
    if start == goal:
        return 0

    cost, _ = _search(start, goal, roads, lambda c: distance(c, goal))
    return UNREACHABLE if cost is None else cost


def find_path(start: Coord, goal: Coord, passable: Collection[Coord]) -> Optional[list[Coord]]:
    """Shortest path from start to goal, both inclusive.

    Uses the cube-distance heuristic.

    Returns:
        Ordered coordinates, or None if start/goal are not passable or no
        path exists
    """
    if start not in passable or goal not in passable:
        return None
    if start == goal:
        return [start]

    goal_cube = axial_to_cube(goal)
    cost, parents = _search(
        start, goal, passable, lambda c: cube_distance(axial_to_cube(c), goal_cube)
    )
    if cost is None:
        return None
    return reconstruct(parents, start, goal)


def build_path_between(start: Coord, end: Coord, passable: Collection[Coord]) -> Optional[list[Coord]]:
    """Path from start to end excluding start, including end.

    Returns None when there is no path or the path has a single node.
    """
    path = find_path(start, end, passable)
    if path is None or len(path) < 2:
        return None
    return path[1:]


def validate_connectivity(coords: Iterable[Coord]) -> bool:
    """Check that every coordinate is reachable from the first one.

    Reachability is transitive, so one source is enough.
    """
    members = list(coords)
    if len(members) <= 1:
        return True

    road_set = set(members)
    source = members[0]
    for coord in members[1:]:
        if path_length(source, coord, road_set) == UNREACHABLE:
            return False
    return True
