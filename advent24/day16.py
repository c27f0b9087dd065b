"""Day 16: the cheapest routes through a reindeer maze."""

import heapq
from enum import Enum
from itertools import count

from advent24.day06 import Square

_TILES = {"#": Square.OBSTACLE, ".": Square.CLEAR, "S": Square.CLEAR, "E": Square.CLEAR}

STEP_COST = 1
TURN_COST = 1000


class Heading(Enum):
    """Facing of the reindeer, listed clockwise starting north."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    def rotate_clockwise(self):
        """The heading after a quarter turn to the right."""
        members = list(Heading)
        return members[(members.index(self) + 1) % len(members)]

    def rotate_anticlockwise(self):
        """The heading after a quarter turn to the left."""
        members = list(Heading)
        return members[(members.index(self) - 1) % len(members)]

    def __str__(self):
        return _ARROWS[self]


_ARROWS = {
    Heading.NORTH: "^",
    Heading.EAST: ">",
    Heading.SOUTH: "v",
    Heading.WEST: "<",
}


def add_position(pos, heading, dim, grid):
    """The clear tile one step from pos, or None if it is blocked or off the map."""
    d_row, d_column = heading.value
    row, column = pos[0] + d_row, pos[1] + d_column
    if not (0 <= row < dim and 0 <= column < dim):
        return None
    if grid.get((row, column)) is Square.CLEAR:
        return row, column
    return None


def parse_map(text):
    """Return (grid, dim, start, end) for a square maze marked with S and E."""
    rows = text.splitlines()
    if not rows:
        raise ValueError("empty map")
    dim = len(rows[0])
    if len(rows) != dim or any(len(row) != dim for row in rows):
        raise ValueError("map must be square")
    grid = {}
    start = end = None
    for row_index, row in enumerate(rows):
        for column, char in enumerate(row):
            try:
                grid[row_index, column] = _TILES[char]
            except KeyError:
                raise ValueError(f"unknown tile {char!r}") from None
            if char == "S":
                start = (row_index, column)
            elif char == "E":
                end = (row_index, column)
    if start is None or end is None:
        raise ValueError("map needs both a start and an end")
    return grid, dim, start, end


def render_map(grid, visited, cursor):
    """Draw the maze; cursor is an optional (position, heading) shown as an arrow."""
    height = max(row for row, _ in grid) + 1
    width = max(column for _, column in grid) + 1
    lines = []
    for row in range(height):
        cells = []
        for column in range(width):
            pos = (row, column)
            if cursor is not None and cursor[0] == pos:
                cells.append(str(cursor[1]))
            elif pos in visited:
                cells.append("+")
            elif grid.get(pos) is Square.OBSTACLE:
                cells.append("#")
            else:
                cells.append(".")
        lines.append("".join(cells))
    return "\n".join(lines)


def _moves(state, dim, grid):
    pos, heading = state
    ahead = add_position(pos, heading, dim, grid)
    if ahead is not None:
        yield (ahead, heading), STEP_COST
    yield (pos, heading.rotate_clockwise()), TURN_COST
    yield (pos, heading.rotate_anticlockwise()), TURN_COST


def _explore(grid, dim, start):
    """Least cost to every reachable state and the predecessors on cheapest routes."""
    start_state = (start, Heading.EAST)
    best = {start_state: 0}
    predecessors = {start_state: []}
    tie = count()
    heap = [(0, next(tie), start_state)]
    while heap:
        cost, _, state = heapq.heappop(heap)
        if cost > best[state]:
            continue
        for successor, move_cost in _moves(state, dim, grid):
            new_cost = cost + move_cost
            known = best.get(successor)
            if known is None or new_cost < known:
                best[successor] = new_cost
                predecessors[successor] = [state]
                heapq.heappush(heap, (new_cost, next(tie), successor))
            elif new_cost == known:
                predecessors[successor].append(state)
    return best, predecessors


def solve_part1(text):
    """Lowest score from S (facing east) to E: 1 per step, 1000 per turn."""
    grid, dim, start, end = parse_map(text)
    best = {}
    tie = count()
    start_state = (start, Heading.EAST)
    best[start_state] = 0
    heap = [(0, next(tie), start_state)]
    while heap:
        cost, _, state = heapq.heappop(heap)
        if cost > best[state]:
            continue
        if state[0] == end:
            return cost
        for successor, move_cost in _moves(state, dim, grid):
            new_cost = cost + move_cost
            if new_cost < best.get(successor, new_cost + 1):
                best[successor] = new_cost
                heapq.heappush(heap, (new_cost, next(tie), successor))
    raise ValueError("the end cannot be reached")


def solve_part2(text):
    """Number of tiles lying on at least one lowest-score route."""
    grid, dim, start, end = parse_map(text)
    best, predecessors = _explore(grid, dim, start)
    end_costs = {
        (end, heading): best[end, heading] for heading in Heading if (end, heading) in best
    }
    if not end_costs:
        raise ValueError("the end cannot be reached")
    least = min(end_costs.values())
    stack = [state for state, cost in end_costs.items() if cost == least]
    seen = set(stack)
    while stack:
        state = stack.pop()
        for previous in predecessors[state]:
            if previous not in seen:
                seen.add(previous)
                stack.append(previous)
    return len({pos for pos, _ in seen})