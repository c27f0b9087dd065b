"""Day 4: word search for XMAS and crossed MAS."""

from itertools import product

_ALL_DIRECTIONS = [step for step in product((-1, 0, 1), repeat=2) if step != (0, 0)]
_DIAGONALS = [(1, 1), (1, -1), (-1, 1), (-1, -1)]


def _parse_grid(text):
    """Map (row, column) to letter for a square grid."""
    rows = text.splitlines()
    if not rows:
        raise ValueError("empty grid")
    dim = len(rows[0])
    if len(rows) != dim or any(len(row) != dim for row in rows):
        raise ValueError("grid must be square")
    return {
        (row_index, column): letter
        for row_index, row in enumerate(rows)
        for column, letter in enumerate(row)
    }


def _read(cells, start, step, offsets):
    row, column = start
    d_row, d_column = step
    return "".join(cells.get((row + k * d_row, column + k * d_column), "") for k in offsets)


def solve_part1(text):
    """Count XMAS in every direction, overlaps included."""
    cells = _parse_grid(text)
    return sum(
        _read(cells, position, step, range(4)) == "XMAS"
        for position in cells
        for step in _ALL_DIRECTIONS
    )


def solve_part2(text):
    """Count 3x3 windows where two diagonals read MAS."""
    cells = _parse_grid(text)
    return sum(
        sum(_read(cells, center, step, (-1, 0, 1)) == "MAS" for step in _DIAGONALS) > 1
        for center in cells
    )