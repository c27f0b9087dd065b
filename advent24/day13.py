"""Day 13: claw machines driven by two buttons."""

import re

_COORDS = re.compile(r".*: X.(\d+), Y.(\d+)")

PART_2_PENALTY = 10_000_000_000_000


def parse_problems(text):
    """List of (button_a, button_b, prize) coordinate triples.

    Blank lines are ignored and every three coordinate lines form one machine;
    a trailing incomplete group is dropped.
    """
    coords = []
    for line in text.splitlines():
        if not line:
            continue
        match = _COORDS.search(line)
        if match is None:
            raise ValueError(f"bad coordinate line: {line!r}")
        coords.append((int(match[1]), int(match[2])))
    grouped = iter(coords)
    return list(zip(grouped, grouped, grouped))


def solve_problem(u, v, r):
    """Tokens needed to reach prize r with button moves u (3 tokens) and v (1 token).

    Returns 0 when no non-negative whole number of presses lands exactly on r.
    """
    determinant = u[0] * v[1] - u[1] * v[0]
    if determinant == 0:
        return 0
    a_numerator = r[0] * v[1] - r[1] * v[0]
    b_numerator = u[0] * r[1] - u[1] * r[0]
    if a_numerator % determinant or b_numerator % determinant:
        return 0
    a = a_numerator // determinant
    b = b_numerator // determinant
    if a < 0 or b < 0:
        return 0
    return 3 * a + b


def solve_part1(text):
    """Fewest tokens needed to win every winnable prize."""
    return sum(solve_problem(u, v, r) for u, v, r in parse_problems(text))


def solve_part2(text):
    """Like solve_part1, with every prize moved by PART_2_PENALTY on both axes."""
    return sum(
        solve_problem(u, v, (r[0] + PART_2_PENALTY, r[1] + PART_2_PENALTY))
        for u, v, r in parse_problems(text)
    )