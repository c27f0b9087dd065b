import pytest

from advent24.day12 import create_zones, parse_map, solve_part1, solve_part2

LARGE = """RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE
"""

SMALL = """AAAA
BBCD
BBCC
EEEC"""

ENCLOSED = """OOOOO
OXOXO
OOOOO
OXOXO
OOOOO"""

E_SHAPE = """EEEEE
EXXXX
EEEEE
EXXXX
EEEEE"""

DIAGONAL_TOUCH = """AAAAAA
AAABBA
AAABBA
ABBAAA
ABBAAA
AAAAAA"""


def test_part1_sample():
    assert solve_part1(LARGE) == 1930


def test_part2_sample():
    assert solve_part2(LARGE) == 1206


def test_small_examples():
    assert solve_part1(SMALL) == 140
    assert solve_part2(SMALL) == 80


def test_enclosed_regions():
    assert solve_part1(ENCLOSED) == 772
    assert solve_part2(ENCLOSED) == 436


def test_e_shape_sides():
    assert solve_part2(E_SHAPE) == 236


def test_diagonally_touching_regions_sides():
    assert solve_part2(DIAGONAL_TOUCH) == 368


def test_parse_map():
    grid, dim = parse_map(SMALL)
    assert dim == 4
    assert grid[(1, 2)] == "C"
    assert len(grid) == 16


def test_create_zones_counts():
    assert len(create_zones(parse_map(SMALL)[0])) == 5
    assert len(create_zones(parse_map(ENCLOSED)[0])) == 5


def test_zones_partition_the_grid():
    grid, _ = parse_map(LARGE)
    zones = create_zones(grid)
    assert sum(len(zone) for zone in zones) == len(grid)
    assert set().union(*zones) == set(grid)
    for zone in zones:
        assert len({grid[position] for position in zone}) == 1


def test_first_zone_starts_at_origin():
    grid, _ = parse_map(SMALL)
    zones = create_zones(grid)
    assert zones[0] == {(0, 0), (0, 1), (0, 2), (0, 3)}


def test_non_square_map_rejected():
    with pytest.raises(ValueError):
        parse_map("AB\nC")