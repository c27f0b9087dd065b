"""Day 11: stones that split and multiply every blink."""

from functools import cache


def step_stone(stone):
    """The stones that one stone becomes after a single blink."""
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return [int(digits[:half]), int(digits[half:])]
    return [stone * 2024]


def _parse(text):
    return [int(word) for word in text.split()]


def solve_part1(text):
    """Number of stones after 25 blinks, simulated stone by stone."""
    stones = _parse(text)
    for _ in range(25):
        stones = [result for stone in stones for result in step_stone(stone)]
    return len(stones)


@cache
def _count(stone, depth):
    if depth == 0:
        return 1
    return sum(_count(child, depth - 1) for child in step_stone(stone))


def solve_part2(text, depth):
    """Number of stones after depth blinks, counted with memoisation."""
    return sum(_count(stone, depth) for stone in _parse(text))