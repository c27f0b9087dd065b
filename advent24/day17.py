"""Day 17: a three-bit computer and the quine search for register A."""

from enum import Enum
from itertools import count

A, B, C = 0, 1, 2

EXPECTED_OUTPUT = (2, 4, 1, 2, 7, 5, 4, 5, 1, 3, 5, 5, 0, 3, 3, 0)


class Opcode(Enum):
    """Instructions of the three-bit computer, valued by their opcode."""

    ADV = 0
    BXL = 1
    BST = 2
    JNZ = 3
    BXC = 4
    OUT = 5
    BDV = 6
    CDV = 7

    def is_combo(self):
        """Whether the instruction reads a combo operand rather than a literal one."""
        return self in _COMBO


_COMBO = frozenset({Opcode.ADV, Opcode.BST, Opcode.OUT, Opcode.BDV, Opcode.CDV})
_DIVISION_TARGET = {Opcode.ADV: A, Opcode.BDV: B, Opcode.CDV: C}


def parse_input(text):
    """Return (program, registers) from the register lines and the program line."""
    lines = text.splitlines()
    if len(lines) < 5:
        raise ValueError("input needs three registers, a blank line and a program")
    registers = []
    for line in lines[:3]:
        _, separator, value = line.partition(":")
        if not separator:
            raise ValueError(f"bad register line: {line!r}")
        registers.append(int(value.strip()))
    _, separator, listing = lines[4].partition(":")
    if not separator:
        raise ValueError(f"bad program line: {lines[4]!r}")
    program = [int(code) for code in listing.strip().split(",")]
    return program, registers


def _operand_value(opcode, code, registers):
    if not opcode.is_combo() or code <= 3:
        return code
    if code >= 7:
        raise ValueError(f"combo operand {code} is reserved")
    return registers[code - 4]


def _execute(program, registers):
    """Run the program, yielding every output value; registers are updated in place."""
    pointer = 0
    while pointer + 1 < len(program):
        try:
            opcode = Opcode(program[pointer])
        except ValueError:
            raise ValueError(f"unknown opcode {program[pointer]}") from None
        operand = _operand_value(opcode, program[pointer + 1], registers)

        if opcode in _DIVISION_TARGET:
            registers[_DIVISION_TARGET[opcode]] = registers[A] >> operand
        elif opcode is Opcode.BXL:
            registers[B] ^= operand
        elif opcode is Opcode.BST:
            registers[B] = operand % 8
        elif opcode is Opcode.JNZ:
            if registers[A] != 0:
                pointer = operand
                continue
        elif opcode is Opcode.BXC:
            registers[B] ^= registers[C]
        else:
            yield operand % 8
        pointer += 2


def run_program(text):
    """Comma-separated output of running the program on its initial registers."""
    program, registers = parse_input(text)
    return ",".join(str(value) for value in _execute(program, registers))


def output_single_value(a):
    """The value one loop iteration of the puzzle program outputs for register A."""
    b = (a % 8) ^ 2
    c = a >> b
    return (b ^ c ^ 3) % 8


def _backwards(partial, remaining):
    if remaining == 0:
        return partial
    for digit in range(8):
        candidate = (partial << 3) + digit
        if output_single_value(candidate) == EXPECTED_OUTPUT[remaining - 1]:
            solution = _backwards(candidate, remaining - 1)
            if solution is not None:
                return solution
    return None


def backwards_solve():
    """Register A that makes the puzzle program print itself, built three bits at a time."""
    solution = _backwards(0, len(EXPECTED_OUTPUT))
    if solution is None:
        raise ValueError("failed to find a solution")
    return solution


def _reproduces(program, registers):
    for index, value in enumerate(_execute(program, registers)):
        if index >= len(program) or value != program[index]:
            return False
        if index + 1 == len(program):
            return True
    return not program


def brute_force_solve(text):
    """Smallest register A, tried from zero, for which the program outputs itself."""
    program, registers = parse_input(text)
    return next(
        a for a in count() if _reproduces(program, [a, registers[B], registers[C]])
    )