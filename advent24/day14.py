"""Day 14: security robots wandering a wrapping room."""

import math
import re
from collections import Counter
from itertools import count

_ROBOT = re.compile(r"p=(-?\d+),(-?\d+) v=(-?\d+),(-?\d+)")
_TREE = re.compile("\u2593{10,}")

STEPS = 100


def parse_robot(line):
    """((x, y), (vx, vy)) for one robot description."""
    match = _ROBOT.search(line)
    if match is None:
        raise ValueError(f"bad robot line: {line!r}")
    px, py, vx, vy = (int(group) for group in match.groups())
    return (px, py), (vx, vy)


def _position(robot, step, width, height):
    (px, py), (vx, vy) = robot
    return (px + vx * step) % width, (py + vy * step) % height


def solve_part1(text, width, height):
    """Safety factor: product of the robot counts per quadrant after 100 steps.

    Robots on a middle row or column are not counted; quadrants holding no
    robot do not take part in the product.
    """
    mid_x, mid_y = width // 2, height // 2
    counts = Counter()
    for line in text.splitlines():
        x, y = _position(parse_robot(line), STEPS, width, height)
        if x == mid_x or y == mid_y:
            continue
        counts[x > mid_x, y > mid_y] += 1
    return math.prod(counts.values())


def _render(positions, width, height):
    return "\n".join(
        "".join("\u2593" if (x, y) in positions else "\u2022" for x in range(width))
        for y in range(height)
    )


def find_tree(text, width, height):
    """First step at which ten or more robots stand side by side in a row.

    Returns (step, picture). Positions repeat with period lcm(width, height),
    so ValueError is raised once a full period has passed without a match.
    """
    robots = [parse_robot(line) for line in text.splitlines()]
    period = math.lcm(width, height)
    for step in count():
        if step >= period:
            raise ValueError("robots never line up")
        positions = {_position(robot, step, width, height) for robot in robots}
        picture = _render(positions, width, height)
        if _TREE.search(picture):
            return step, picture