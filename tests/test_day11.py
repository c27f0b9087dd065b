import pytest

from advent24.day11 import solve_part1, solve_part2, step_stone


def test_part1_sample():
    assert solve_part1("125 17") == 55312


def test_part2_sample():
    assert solve_part2("125 17", 25) == 55312


def test_part2_depth_zero_counts_input():
    assert solve_part2("125 17", 0) == 2


@pytest.mark.parametrize(
    "stone, expected",
    [(0, [1]), (1, [2024]), (10, [1, 0]), (1000, [10, 0]), (253000, [253, 0]), (17, [1, 7])],
)
def test_step_stone(stone, expected):
    assert step_stone(stone) == expected


@pytest.mark.parametrize("depth", [1, 2, 6])
def test_part2_matches_simulation(depth):
    stones = [125, 17]
    for _ in range(depth):
        stones = [child for stone in stones for child in step_stone(stone)]
    assert solve_part2("125 17", depth) == len(stones)


def test_known_blink_sequence():
    assert solve_part2("0 1 10 99 999", 1) == 7