"""Day 7: restoring operators in calibration equations."""

import operator


def get_trit(i, trit_index):
    """The base-3 digit of i at position trit_index (0 is least significant)."""
    return (i % 3 ** (trit_index + 1) - i % 3 ** trit_index) // 3 ** trit_index


def concat(left, right):
    """Join the decimal digits of left and right: concat(123, 24) == 12324."""
    if right <= 0:
        raise ValueError("right operand of concatenation must be positive")
    return left * 10 ** len(str(right)) + right


def _equations(text):
    for line in text.splitlines():
        result, separator, operands = line.partition(": ")
        if not separator:
            raise ValueError(f"bad line: {line!r}")
        yield int(result), [int(operand) for operand in operands.split(" ")]


def _solvable(result, operands, operations):
    first, *rest = operands
    reachable = {first}
    for operand in rest:
        reachable = {op(value, operand) for value in reachable for op in operations}
    return result in reachable


def _total(text, operations):
    return sum(
        result
        for result, operands in _equations(text)
        if _solvable(result, operands, operations)
    )


def solve_part1(text):
    """Sum the results reachable with + and * evaluated left to right."""
    return _total(text, (operator.add, operator.mul))


def solve_part2(text):
    """Sum the results reachable with +, * and digit concatenation."""
    return _total(text, (operator.add, operator.mul, concat))