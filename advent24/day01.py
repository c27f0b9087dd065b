"""Day 1: comparing two columns of location identifiers."""

from collections import Counter


def _parse_columns(text):
    """Split the input into its left and right columns of integers."""
    lefts, rights = [], []
    for line in text.splitlines():
        left, separator, right = line.partition("   ")
        if not separator:
            raise ValueError(f"bad line: {line!r}")
        lefts.append(int(left))
        rights.append(int(right))
    return lefts, rights


def solve_part1(text):
    """Total distance between the sorted left and right columns."""
    lefts, rights = _parse_columns(text)
    return sum(abs(left - right) for left, right in zip(sorted(lefts), sorted(rights)))


def solve_part2(text):
    """Similarity score: each left value times its count in the right column."""
    lefts, rights = _parse_columns(text)
    right_counts = Counter(rights)
    return sum(left * right_counts[left] for left in lefts)