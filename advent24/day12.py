"""Day 12: fencing garden plots by region."""

_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def parse_map(text):
    """Map (row, column) to plant letter; returns the grid and its side length."""
    rows = text.splitlines()
    if not rows:
        raise ValueError("empty map")
    dim = len(rows[0])
    if len(rows) != dim or any(len(row) != dim for row in rows):
        raise ValueError("map must be square")
    grid = {
        (row_index, column): plant
        for row_index, row in enumerate(rows)
        for column, plant in enumerate(row)
    }
    return grid, dim


def create_zones(grid):
    """Connected regions of equal plants, ordered by their first cell in row-major order."""
    zones = []
    assigned = set()
    for position, plant in grid.items():
        if position in assigned:
            continue
        zone = {position}
        stack = [position]
        while stack:
            row, column = stack.pop()
            for d_row, d_column in _NEIGHBOURS:
                neighbour = (row + d_row, column + d_column)
                if neighbour not in zone and grid.get(neighbour) == plant:
                    zone.add(neighbour)
                    stack.append(neighbour)
        assigned |= zone
        zones.append(zone)
    return zones


def _perimeter(zone):
    return sum(
        (row + d_row, column + d_column) not in zone
        for row, column in zone
        for d_row, d_column in _NEIGHBOURS
    )


def _sides(zone):
    """Count straight fence runs: each boundary edge without a predecessor starts one."""
    sides = 0
    for row, column in zone:
        for d_row, d_column in _NEIGHBOURS:
            if (row + d_row, column + d_column) in zone:
                continue
            along_row, along_column = d_column, d_row
            previous = (row + along_row, column + along_column)
            previous_outside = (previous[0] + d_row, previous[1] + d_column)
            if not (previous in zone and previous_outside not in zone):
                sides += 1
    return sides


def solve_part1(text):
    """Total price of fencing: area times perimeter for each region."""
    grid, _ = parse_map(text)
    return sum(len(zone) * _perimeter(zone) for zone in create_zones(grid))


def solve_part2(text):
    """Total discounted price: area times number of sides for each region."""
    grid, _ = parse_map(text)
    return sum(len(zone) * _sides(zone) for zone in create_zones(grid))