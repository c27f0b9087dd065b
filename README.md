# advent24

Solvers for nineteen days of a December programming-puzzle series. Each day is its
own module, `advent24.day01` to `advent24.day19`. A solver takes the puzzle input as
a string and returns the answer. It needs only the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using

```python
from advent24 import day01, day11, day14, day17, day18

with open("input.txt") as handle:
    text = handle.read()

print(day01.solve_part1(text))
print(day01.solve_part2(text))

# Some days take extra parameters.
print(day11.solve_part2(text, 75))           # number of blinks
print(day14.solve_part1(text, 101, 103))     # room width and height
print(day18.shortest_path(text, 71, 1024))   # grid size and bytes fallen; None if cut off
print(day18.brute_force_exponential(text, 71))

# Day 17 runs the three-bit computer described in the input.
print(day17.run_program(text))
```

Most days provide `solve_part1(text)` and `solve_part2(text)`. The exceptions:

| Module  | Entry points |
|---------|--------------|
| `day11` | `solve_part1(text)`, `solve_part2(text, depth)` |
| `day14` | `solve_part1(text, width, height)`, `find_tree(text, width, height)` |
| `day17` | `run_program(text)`, `backwards_solve()`, `brute_force_solve(text)` |
| `day18` | `shortest_path(text, dim, num_falling)`, `brute_force(text, dim)`, `brute_force_exponential(text, dim)` |

Some further details:

- `day02.brute_force`, `day18.brute_force` and `day19.brute_force` give the same
  answers as the faster solvers by a plainer method. They are useful for checking.
- `day14.find_tree` returns `(step, picture)`. `step` is the first step at which ten
  or more robots stand side by side. `picture` is the room drawn as text. If no
  such step occurs within one full period of the robots' motion, it raises
  `ValueError`.
- `day17.backwards_solve()` takes no input. It searches for the register A value of
  one fixed program, `2,4,1,2,7,5,4,5,1,3,5,5,0,3,3,0`, using
  `output_single_value(a)`. `brute_force_solve(text)` works for any program, but it
  tries values of A one at a time and is only practical for small answers.
- Helpers that the solvers use are public as well. They include
  `day06.parse_map`, `day07.get_trit`, `day07.concat`, `day10.parse_graph`,
  `day11.step_stone`, `day12.create_zones`, `day13.solve_problem`,
  `day16.render_map` and `day19.parse_input`.

Days 4, 6, 10, 12 and 16 require a square grid. Malformed input raises
`ValueError`.

## What it does not do

The package has no command-line program and ships no puzzle inputs. Your own code
reads the input and passes it to the solver as a string.