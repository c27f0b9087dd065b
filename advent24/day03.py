"""Day 3: summing multiplication instructions in corrupted memory."""

import re

_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_MUL_OR_TOGGLE = re.compile(
    r"mul\((?P<left>[0-9]+),(?P<right>[0-9]+)\)|(?P<toggle>do\(\)|don't\(\))"
)


def solve_part1(text):
    """Sum the products of every well-formed mul(a,b)."""
    return sum(int(left) * int(right) for left, right in _MUL.findall(text))


def solve_part2(text):
    """Sum the products of mul(a,b) while enabled by do() / don't()."""
    total = 0
    enabled = True
    for match in _MUL_OR_TOGGLE.finditer(text):
        toggle = match.group("toggle")
        if toggle is not None:
            enabled = toggle == "do()"
        elif enabled:
            total += int(match.group("left")) * int(match.group("right"))
    return total