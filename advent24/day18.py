"""Day 18: escaping a memory space as bytes fall into it."""

from collections import deque

from advent24.day06 import Square
from advent24.day16 import Heading, add_position

_SEARCH_ORDER = (Heading.NORTH, Heading.WEST, Heading.SOUTH, Heading.EAST)


def parse_obstacles(text):
    """List of (first, second) coordinate pairs, one per line."""
    obstacles = []
    for line in text.splitlines():
        first, separator, second = line.partition(",")
        if not separator:
            raise ValueError(f"bad coordinate line: {line!r}")
        obstacles.append((int(first), int(second)))
    return obstacles


def _fallen_grid(obstacles, dim, num_falling):
    if num_falling > 0 and not obstacles:
        raise ValueError("no obstacles to fall")
    grid = {(row, column): Square.CLEAR for row in range(dim) for column in range(dim)}
    for index in range(num_falling):
        pos = obstacles[index % len(obstacles)]
        if pos not in grid:
            raise ValueError(f"obstacle {pos} lies outside the {dim}x{dim} space")
        grid[pos] = Square.OBSTACLE
    return grid


def _shortest(obstacles, dim, num_falling):
    grid = _fallen_grid(obstacles, dim, num_falling)
    start, end = (0, 0), (dim - 1, dim - 1)
    distances = {start: 0}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        if pos == end:
            return distances[pos]
        for heading in _SEARCH_ORDER:
            ahead = add_position(pos, heading, dim, grid)
            if ahead is not None and ahead not in distances:
                distances[ahead] = distances[pos] + 1
                queue.append(ahead)
    return None


def shortest_path(text, dim, num_falling):
    """Fewest steps from the top-left to the bottom-right corner, or None if cut off.

    The first num_falling obstacles (cycling through the list) are placed first.
    """
    return _shortest(parse_obstacles(text), dim, num_falling)


def _format(pos):
    return f"{pos[0]},{pos[1]}"


def brute_force(text, dim):
    """Coordinates of the first obstacle that cuts off the exit, trying counts one by one."""
    obstacles = parse_obstacles(text)
    for fallen in range(1, len(obstacles) + 1):
        if _shortest(obstacles, dim, fallen) is None:
            return _format(obstacles[fallen - 1])
    raise ValueError("the exit is never cut off")


def brute_force_exponential(text, dim):
    """Same answer as brute_force, found by doubling and then bisecting the count."""
    obstacles = parse_obstacles(text)
    known_good, known_bad = 1, None
    while known_bad != known_good + 1:
        if known_bad is None:
            if known_good >= len(obstacles):
                raise ValueError("the exit is never cut off")
            candidate = known_good * 2
        else:
            candidate = (known_good + known_bad) // 2
        if _shortest(obstacles, dim, candidate) is None:
            known_bad = candidate
        else:
            known_good = candidate
    return _format(obstacles[known_good % len(obstacles)])