"""Day 2: checking reactor reports for safe level changes."""

from collections import deque
from itertools import pairwise


def _reports(text):
    for line in text.splitlines():
        yield line, [int(value) for value in line.split(" ")]


def _sign(value):
    return (value > 0) - (value < 0)


def _is_safe(readings):
    pairs = list(pairwise(readings))
    if not pairs:
        raise ValueError("a report needs at least two levels")
    ordering = _sign(pairs[0][1] - pairs[0][0])
    return all(
        _sign(right - left) == ordering and 1 <= abs(right - left) <= 3
        for left, right in pairs
    )


def _tolerates_one_bad_level(readings):
    """Single pass over the report allowing at most one level to be dropped."""
    if len(readings) < 4:
        raise ValueError("a report needs at least four levels")
    rising = sum(right > left for left, right in pairwise(readings[:4])) >= 2
    sign = 1 if rising else -1

    def acceptable(diff):
        return _sign(diff) == sign and 1 <= abs(diff) <= 3

    pairs = deque(pairwise(readings))
    skipped = False
    previous_left = None
    override_left = None
    while pairs:
        left, right = pairs.popleft()
        if override_left is not None:
            left, override_left = override_left, None

        if acceptable(right - left):
            previous_left = left
            continue
        if skipped:
            return False
        if not pairs:
            continue

        _, next_right = pairs[0]
        left_is_removable = previous_left is None or acceptable(right - previous_left)
        if left_is_removable and acceptable(next_right - right):
            pairs.popleft()
            skipped = True
        elif acceptable(next_right - left):
            override_left = left
            skipped = True
        else:
            return False
    return True


def _safe_in_direction(readings, sign):
    return all(
        1 <= abs(right - left) <= 3 and _sign(right - left) == sign
        for left, right in pairwise(readings)
    )


def _safe_after_removing_any(readings):
    candidates = [readings] + [
        readings[:index] + readings[index + 1:] for index in range(len(readings))
    ]
    return any(
        _safe_in_direction(candidate, sign)
        for candidate in candidates
        for sign in (-1, 1)
    )


def solve_part1(text):
    """Count reports whose levels change monotonically by 1 to 3."""
    return sum(_is_safe(readings) for _, readings in _reports(text))


def solve_part2(text):
    """Count reports that are safe once at most one level is removed."""
    return sum(_tolerates_one_bad_level(readings) for _, readings in _reports(text))


def brute_force(text):
    """Same count as solve_part2, trying every removal explicitly."""
    return sum(_safe_after_removing_any(readings) for _, readings in _reports(text))