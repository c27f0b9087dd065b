"""Day 19: arranging towels into designs."""

from functools import cache


def parse_input(text):
    """(patterns, designs): the comma-separated first line and the lines after the blank one."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("missing towel patterns")
    return lines[0].split(", "), lines[2:]


def _arrangement_counter(patterns):
    @cache
    def count(design):
        if not design:
            return 1
        return sum(
            count(design[len(pattern):]) for pattern in patterns if design.startswith(pattern)
        )

    return count


def _buildability_checker(patterns):
    @cache
    def buildable(design):
        return not design or any(
            design.startswith(pattern) and buildable(design[len(pattern):])
            for pattern in patterns
        )

    return buildable


def _count_uncached(patterns, design):
    if not design:
        return 1
    return sum(
        _count_uncached(patterns, design[len(pattern):])
        for pattern in patterns
        if design.startswith(pattern)
    )


def solve_part1(text):
    """Number of designs that can be built from the towel patterns."""
    patterns, designs = parse_input(text)
    buildable = _buildability_checker(tuple(patterns))
    return sum(buildable(design) for design in designs)


def solve_part2(text):
    """Total number of distinct ways to build every design."""
    patterns, designs = parse_input(text)
    count = _arrangement_counter(tuple(patterns))
    return sum(count(design) for design in designs)


def brute_force(text):
    """Same total as solve_part2, by plain recursion without memoisation."""
    patterns, designs = parse_input(text)
    return sum(_count_uncached(patterns, design) for design in designs)