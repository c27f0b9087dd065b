import pytest

from advent24.day06 import Square
from advent24.day16 import (
    Heading,
    add_position,
    parse_map,
    render_map,
    solve_part1,
    solve_part2,
)

SAMPLE_1 = """###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############"""

SAMPLE_2 = """#################
#...#...#...#..E#
#.#.#.#.#.#.#.#.#
#.#.#.#...#...#.#
#.#.#.#.###.#.#.#
#...#.#.#.....#.#
#.#.#.#.#.#####.#
#.#...#.#.#.....#
#.#.#####.#.###.#
#.#.#.......#...#
#.#.###.#####.###
#.#.#...#.....#.#
#.#.#.#####.###.#
#.#.#.........#.#
#.#.#.#########.#
#S#.............#
#################"""

REDDIT_1 = """###########################
#######################..E#
######################..#.#
#####################..##.#
####################..###.#
###################..##...#
##################..###.###
#################..####...#
################..#######.#
###############..##.......#
##############..###.#######
#############..####.......#
############..###########.#
###########..##...........#
##########..###.###########
#########..####...........#
########..###############.#
#######..##...............#
######..###.###############
#####..####...............#
####..###################.#
###..##...................#
##..###.###################
#..####...................#
#.#######################.#
#S........................#
###########################"""

REDDIT_2 = """##########
#.......E#
#.##.#####
#..#.....#
##.#####.#
#S.......#
##########"""

SMALL = """#####
#..E#
#.#.#
#S..#
#####"""


def test_part1_sample_1():
    assert solve_part1(SAMPLE_1) == 7036


def test_part1_sample_2():
    assert solve_part1(SAMPLE_2) == 11048


def test_part2_sample_1():
    assert solve_part2(SAMPLE_1) == 45


def test_part2_sample_2():
    assert solve_part2(SAMPLE_2) == 64


def test_part2_reddit_1():
    assert solve_part2(REDDIT_1) == 149


def test_non_square_map_is_rejected():
    with pytest.raises(ValueError):
        solve_part2(REDDIT_2)
    with pytest.raises(ValueError):
        solve_part1(REDDIT_2)


def test_small_map_scores():
    assert solve_part1(SMALL) == 1004
    assert solve_part2(SMALL) == 5


def test_parse_map_positions():
    grid, dim, start, end = parse_map(SMALL)
    assert dim == 5
    assert start == (3, 1)
    assert end == (1, 3)
    assert grid[0, 0] is Square.OBSTACLE
    assert grid[3, 1] is Square.CLEAR


def test_parse_map_rejects_unknown_tile():
    with pytest.raises(ValueError):
        parse_map("S?\nE.")


def test_parse_map_requires_start_and_end():
    with pytest.raises(ValueError):
        parse_map("..\n.E")


def test_unreachable_end():
    maze = "S#.\n##.\n..E"
    with pytest.raises(ValueError):
        solve_part1(maze)
    with pytest.raises(ValueError):
        solve_part2(maze)


@pytest.mark.parametrize(
    "heading, clockwise, anticlockwise",
    [
        (Heading.NORTH, Heading.EAST, Heading.WEST),
        (Heading.EAST, Heading.SOUTH, Heading.NORTH),
        (Heading.SOUTH, Heading.WEST, Heading.EAST),
        (Heading.WEST, Heading.NORTH, Heading.SOUTH),
    ],
)
def test_rotations(heading, clockwise, anticlockwise):
    assert heading.rotate_clockwise() is clockwise
    assert heading.rotate_anticlockwise() is anticlockwise


def test_add_position():
    grid, dim, start, _ = parse_map(SMALL)
    assert add_position(start, Heading.EAST, dim, grid) == (3, 2)
    assert add_position(start, Heading.NORTH, dim, grid) == (2, 1)
    assert add_position(start, Heading.WEST, dim, grid) is None
    assert add_position((3, 2), Heading.NORTH, dim, grid) is None
    assert add_position((0, 0), Heading.NORTH, dim, grid) is None


def test_render_map_plain():
    grid, _, _, _ = parse_map(SMALL)
    assert render_map(grid, set(), None) == "#####\n#...#\n#.#.#\n#...#\n#####"


def test_render_map_with_cursor_and_visited():
    grid, _, _, _ = parse_map(SMALL)
    rendered = render_map(grid, {(3, 2), (3, 1)}, ((3, 1), Heading.NORTH))
    assert rendered.splitlines()[3] == "#^+.#"