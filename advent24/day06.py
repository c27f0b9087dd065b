"""Day 6: a guard patrolling a lab floor."""

from enum import Enum


class Square(Enum):
    """A floor tile."""

    OBSTACLE = "#"
    CLEAR = "."

    def __str__(self):
        return "\u2593" if self is Square.OBSTACLE else "\u2022"


class Direction(Enum):
    """Heading of the guard, listed in clockwise order starting upwards."""

    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)

    def rotate(self):
        """The heading after a quarter turn to the right."""
        members = list(Direction)
        return members[(members.index(self) + 1) % len(members)]

    def step(self, pos):
        """The position one tile ahead of pos in this heading."""
        d_row, d_column = self.value
        return pos[0] + d_row, pos[1] + d_column

    def __str__(self):
        return _ARROWS[self]


_ARROWS = {
    Direction.UP: "^",
    Direction.RIGHT: ">",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
}

_TILES = {"#": Square.OBSTACLE, ".": Square.CLEAR, "^": Square.CLEAR}


def parse_map(text):
    """Map (row, column) to Square for a square grid."""
    rows = text.splitlines()
    if not rows:
        raise ValueError("empty map")
    dim = len(rows[0])
    if len(rows) != dim or any(len(row) != dim for row in rows):
        raise ValueError("map must be square")
    grid = {}
    for row_index, row in enumerate(rows):
        for column, char in enumerate(row):
            try:
                grid[row_index, column] = _TILES[char]
            except KeyError:
                raise ValueError(f"unknown tile {char!r}") from None
    return grid


def get_start_pos(text):
    """Position (row, column) of the guard marker '^'."""
    for row_index, row in enumerate(text.splitlines()):
        column = row.find("^")
        if column != -1:
            return row_index, column
    raise ValueError("no guard in map")


def _patrol(grid, start, blocked=None):
    """Walk until leaving the map or repeating a state.

    Returns the set of positions visited and whether the walk loops.
    """
    pos, direction = start, Direction.UP
    seen = set()
    while (pos, direction) not in seen:
        seen.add((pos, direction))
        ahead = direction.step(pos)
        square = Square.OBSTACLE if ahead == blocked else grid.get(ahead)
        if square is None:
            return {position for position, _ in seen}, False
        if square is Square.OBSTACLE:
            direction = direction.rotate()
        else:
            pos = ahead
    return {position for position, _ in seen}, True


def solve_part1(text):
    """Number of distinct tiles the guard visits before leaving."""
    visited, _ = _patrol(parse_map(text), get_start_pos(text))
    return len(visited)


def solve_part2(text):
    """Number of tiles where one extra obstacle traps the guard in a loop."""
    grid = parse_map(text)
    start = get_start_pos(text)
    route, _ = _patrol(grid, start)
    return sum(_patrol(grid, start, blocked)[1] for blocked in route - {start})