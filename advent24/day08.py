"""Day 8: antinodes created by antennas of the same frequency."""

from collections import defaultdict
from itertools import combinations
from math import gcd


def parse_map(text):
    """Map each frequency character to the set of (row, column) positions."""
    antennas = defaultdict(set)
    for row, line in enumerate(text.splitlines()):
        for column, char in enumerate(line):
            if char != ".":
                antennas[char].add((row, column))
    return dict(antennas)


def _dimension(text):
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty map")
    return len(lines[0])


def _within(pos, dim):
    return 0 <= pos[0] < dim and 0 <= pos[1] < dim


def _pairs(text):
    for locations in parse_map(text).values():
        for pair in combinations(locations, 2):
            yield min(pair), max(pair)


def solve_part1(text):
    """Count distinct in-bounds antinodes one spacing beyond each pair."""
    dim = _dimension(text)
    antinodes = set()
    for first, last in _pairs(text):
        d_row, d_column = last[0] - first[0], last[1] - first[1]
        for candidate in (
            (first[0] - d_row, first[1] - d_column),
            (last[0] + d_row, last[1] + d_column),
        ):
            if _within(candidate, dim):
                antinodes.add(candidate)
    return len(antinodes)


def _line_through(start, end, dim):
    d_row, d_column = end[0] - start[0], end[1] - start[1]
    divisor = gcd(d_row, d_column)
    d_row, d_column = d_row // divisor, d_column // divisor
    for direction in (-1, 1):
        k = 0
        while _within(pos := (start[0] + direction * k * d_row,
                              start[1] + direction * k * d_column), dim):
            yield pos
            k += 1


def solve_part2(text):
    """Count distinct in-bounds grid points on any line through a pair."""
    dim = _dimension(text)
    antinodes = set()
    for start, end in _pairs(text):
        antinodes.update(_line_through(start, end, dim))
    return len(antinodes)