import pytest

from advent24.day17 import (
    Opcode,
    backwards_solve,
    brute_force_solve,
    output_single_value,
    parse_input,
    run_program,
)

PUZZLE_PROGRAM = "2,4,1,2,7,5,4,5,1,3,5,5,0,3,3,0"


def _machine(a, program, b=0, c=0):
    return f"Register A: {a}\nRegister B: {b}\nRegister C: {c}\n\nProgram: {program}"


def test_sample():
    assert run_program(_machine(729, "0,1,5,4,3,0")) == "4,6,3,5,6,3,5,2,1,0"


def test_brute_force_sample():
    assert brute_force_solve(_machine(2024, "0,3,5,4,3,0")) == 117_440


def test_solution():
    assert run_program(_machine(37221270076916, PUZZLE_PROGRAM)) == PUZZLE_PROGRAM


def test_sample_solution():
    assert run_program(_machine(117440, "0,3,5,4,3,0")) == "0,3,5,4,3,0"


def test_output_single_value():
    expected = run_program(_machine(117440, PUZZLE_PROGRAM))
    outputs = []
    a = 117440
    while a != 0:
        outputs.append(output_single_value(a))
        a >>= 3
    assert ",".join(str(value) for value in outputs) == expected


def test_backwards_solve_reproduces_program():
    assert run_program(_machine(backwards_solve(), PUZZLE_PROGRAM)) == PUZZLE_PROGRAM


def test_parse_input():
    program, registers = parse_input(_machine(729, "0,1,5,4,3,0", b=2, c=9))
    assert program == [0, 1, 5, 4, 3, 0]
    assert registers == [729, 2, 9]


def test_parse_input_too_short():
    with pytest.raises(ValueError):
        parse_input("Register A: 1\nRegister B: 0")


def test_bst_and_out_with_register_operand():
    assert run_program(_machine(0, "2,6,5,5", c=9)) == "1"


def test_reserved_combo_operand():
    with pytest.raises(ValueError):
        run_program(_machine(1, "5,7"))


@pytest.mark.parametrize(
    "opcode, combo",
    [
        (Opcode.ADV, True),
        (Opcode.BXL, False),
        (Opcode.BST, True),
        (Opcode.JNZ, False),
        (Opcode.BXC, False),
        (Opcode.OUT, True),
        (Opcode.BDV, True),
        (Opcode.CDV, True),
    ],
)
def test_is_combo(opcode, combo):
    assert opcode.is_combo() is combo