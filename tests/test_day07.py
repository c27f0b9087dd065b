import pytest

from advent24.day07 import concat, get_trit, solve_part1, solve_part2

SAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20"""


def test_part1_sample():
    assert solve_part1(SAMPLE) == 3749


def test_part2_sample():
    assert solve_part2(SAMPLE) == 11387


@pytest.mark.parametrize(
    "value, index, expected",
    [(23, 1, 1), (9, 2, 1), (3, 1, 1), (0, 1, 0), (0, 0, 0), (10, 2, 1), (18, 2, 2)],
)
def test_get_trit(value, index, expected):
    assert get_trit(value, index) == expected


def test_concat():
    assert concat(123, 24) == 12324
    assert concat(15, 6) == 156


def test_concat_rejects_zero():
    with pytest.raises(ValueError):
        concat(5, 0)


def test_bad_line():
    with pytest.raises(ValueError):
        solve_part1("190 10 19")