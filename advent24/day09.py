"""Day 9: compacting an amphipod's disk map."""

from dataclasses import dataclass

_DIGITS = frozenset("0123456789")


@dataclass
class _File:
    id: int
    index: int
    length: int


@dataclass
class _Space:
    index: int
    length: int


def _parse(text):
    """Digits of the dense disk map; surrounding whitespace is ignored."""
    digits = text.strip()
    if not set(digits) <= _DIGITS:
        raise ValueError("disk map must consist of decimal digits")
    return [int(char) for char in digits]


def _layout(digits):
    """Split the map into files and non-empty free spaces with block offsets."""
    files, spaces = [], []
    position = 0
    for entry, length in enumerate(digits):
        if entry % 2 == 0:
            files.append(_File(entry // 2, position, length))
        elif length:
            spaces.append(_Space(position, length))
        position += length
    return files, spaces


def solve_part1(text):
    """Checksum after moving single blocks from the end into the leftmost gaps."""
    blocks = []
    for entry, length in enumerate(_parse(text)):
        blocks.extend([entry // 2 if entry % 2 == 0 else None] * length)

    left, right = 0, len(blocks) - 1
    while True:
        while left < right and blocks[left] is not None:
            left += 1
        while left < right and blocks[right] is None:
            right -= 1
        if left >= right:
            break
        blocks[left], blocks[right] = blocks[right], None

    return sum(position * file_id for position, file_id in enumerate(blocks) if file_id is not None)


def solve_part2(text):
    """Checksum after moving whole files, highest id first, into the leftmost fitting gap."""
    files, spaces = _layout(_parse(text))
    total = 0
    for file in reversed(files):
        start = file.index
        for slot, space in enumerate(spaces):
            if space.index >= file.index:
                break
            if space.length >= file.length:
                start = space.index
                space.index += file.length
                space.length -= file.length
                if not space.length:
                    del spaces[slot]
                break
        total += file.id * sum(range(start, start + file.length))
    return total