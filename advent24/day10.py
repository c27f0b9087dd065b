"""Day 10: hiking trails on a topographic map."""

from typing import NamedTuple

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))
_DIGITS = frozenset("0123456789")


class TrailGraph(NamedTuple):
    """Heights by position, directed edges between adjacent heights, and the ends."""

    heights: dict
    edges: dict
    zeros: list
    nines: list


def parse_graph(text, reverse):
    """Build the trail graph of a square height map.

    Edges join tiles whose heights differ by exactly one. With reverse true
    they point uphill, otherwise downhill. Zeros and nines are listed in
    row-major order.
    """
    rows = text.splitlines()
    if not rows:
        raise ValueError("empty map")
    dim = len(rows[0])
    if len(rows) != dim or any(len(row) != dim for row in rows):
        raise ValueError("map must be square")

    heights = {}
    for row_index, row in enumerate(rows):
        for column, char in enumerate(row):
            if char not in _DIGITS:
                raise ValueError(f"bad height {char!r}")
            heights[row_index, column] = int(char)

    edges = {position: [] for position in heights}
    zeros, nines = [], []
    for position, height in heights.items():
        if height == 0:
            zeros.append(position)
        if height == 9:
            nines.append(position)
            continue
        for d_row, d_column in _STEPS:
            neighbour = (position[0] + d_row, position[1] + d_column)
            if heights.get(neighbour) == height + 1:
                if reverse:
                    edges[position].append(neighbour)
                else:
                    edges[neighbour].append(position)
    return TrailGraph(heights, edges, zeros, nines)


def solve_part1(text):
    """Sum over trailheads of the number of distinct summits they reach."""
    graph = parse_graph(text, False)
    reaching = {nine: {nine} for nine in graph.nines}
    frontier = set(graph.nines)
    for generation in range(8, -1, -1):
        next_frontier = set()
        for source in frontier:
            for neighbour in graph.edges[source]:
                if graph.heights[neighbour] == generation:
                    next_frontier.add(neighbour)
                    reaching.setdefault(neighbour, set()).update(reaching[source])
        frontier = next_frontier
    return sum(len(reaching[zero]) for zero in frontier)


def solve_part2(text):
    """Total number of distinct uphill trails from any 0 to any 9."""
    graph = parse_graph(text, True)
    nines = set(graph.nines)
    trails = {}
    for position in sorted(graph.heights, key=graph.heights.get, reverse=True):
        if position in nines:
            trails[position] = 1
        else:
            trails[position] = sum(trails[successor] for successor in graph.edges[position])
    return sum(trails[zero] for zero in graph.zeros)