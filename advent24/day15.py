"""Day 15: a robot pushing boxes around a warehouse."""

from dataclasses import dataclass, field

_MOVES = {"<": (0, -1), "^": (-1, 0), ">": (0, 1), "v": (1, 0)}


@dataclass
class _Warehouse:
    dim: int
    width: int
    robot: tuple
    boxes: set = field(default_factory=set)
    walls: set = field(default_factory=set)
    moves: list = field(default_factory=list)

    def ahead(self, pos, mov):
        """The tile one step from pos, or None if it is a wall or off the map."""
        row, column = pos[0] + mov[0], pos[1] + mov[1]
        if not (0 <= row < self.dim and 0 <= column < self.width):
            return None
        if (row, column) in self.walls:
            return None
        return row, column

    def gps_sum(self):
        return sum(100 * row + column for row, column in self.boxes)


def _parse(text, scale):
    """Read the map and the moves; columns are multiplied by scale."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty input")
    try:
        blank = lines.index("")
    except ValueError:
        blank = len(lines)
    dim = len(lines[0])
    robot = None
    boxes, walls = set(), set()
    for row, line in enumerate(lines[:blank]):
        for column, char in enumerate(line[:dim]):
            pos = (row, column * scale)
            if char == ".":
                continue
            if char == "O":
                boxes.add(pos)
            elif char == "@":
                robot = pos
            elif char == "#":
                walls.update((row, column * scale + offset) for offset in range(scale))
            else:
                raise ValueError(f"unknown tile {char!r}")
    if robot is None:
        raise ValueError("no robot in map")
    try:
        moves = [_MOVES[char] for line in lines[blank + 1:] for char in line]
    except KeyError as error:
        raise ValueError(f"unknown move {error.args[0]!r}") from None
    return _Warehouse(dim, dim * scale, robot, boxes, walls, moves)


def _move_narrow(house, mov):
    cursor = house.robot
    while (cursor := house.ahead(cursor, mov)) is not None:
        if cursor not in house.boxes:
            robot = house.ahead(house.robot, mov)
            house.boxes.discard(robot)
            if cursor != robot:
                house.boxes.add(cursor)
            house.robot = robot
            return


def _wide_pushes(house, pos, mov):
    """Old to new positions of every wide box pushed by entering pos; None if blocked."""
    left = (pos[0], pos[1] - 1)
    if pos in house.boxes:
        root, other = pos, (pos[0], pos[1] + 1)
    elif left in house.boxes:
        root, other = left, pos
    else:
        return {}

    if mov[0] == 0:
        beyond = house.ahead(pos, mov)
        if beyond is None:
            return None
        beyond = house.ahead(beyond, mov)
        if beyond is None:
            return None
        pushes = _wide_pushes(house, beyond, mov)
        if pushes is None:
            return None
    else:
        above_root = house.ahead(root, mov)
        above_other = house.ahead(other, mov)
        if above_root is None or above_other is None:
            return None
        root_pushes = _wide_pushes(house, above_root, mov)
        other_pushes = _wide_pushes(house, above_other, mov)
        if root_pushes is None or other_pushes is None:
            return None
        pushes = {**root_pushes, **other_pushes}

    pushes[root] = (root[0] + mov[0], root[1] + mov[1])
    return pushes


def _move_wide(house, mov):
    target = house.ahead(house.robot, mov)
    if target is None:
        return
    pushes = _wide_pushes(house, target, mov)
    if pushes is None:
        return
    house.robot = target
    house.boxes.difference_update(pushes)
    house.boxes.update(pushes.values())


def solve_part1(text):
    """Sum of box GPS coordinates after all moves."""
    house = _parse(text, 1)
    for mov in house.moves:
        _move_narrow(house, mov)
    return house.gps_sum()


def solve_part2(text):
    """Sum of GPS coordinates of the left box edges in the doubled-width warehouse."""
    house = _parse(text, 2)
    for mov in house.moves:
        _move_wide(house, mov)
    return house.gps_sum()