# aocsolutions

Solutions to Advent of Code puzzles: days 1–9 of 2023 and days 1–8 of 2024.
Each day has two parts. The answer is printed on standard output.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Usage

The command is laid out as year, then day, then part:

```
advent-of-code-solutions <year> <day> <part> [input]
```

- `year` is `2023` or `2024`.
- `day` is the day of the month, written with or without a leading zero
  (`1` and `01` both work).
- `part` is `1` or `2`.
- `input` is the path to your puzzle input. Leave it out to read the input
  from standard input instead. If standard input is a terminal and no path is
  given, the usage line is written to standard error and nothing is solved.

Examples:

```
advent-of-code-solutions 2023 01 1 input.txt
advent-of-code-solutions 2024 6 2 < input.txt
```

If a year or day is given without going further down, the help for that level
is shown. Use `--help` at any level to see what is available:

```
advent-of-code-solutions --help
advent-of-code-solutions 2024 --help
```

The same command can be started with `python -m aocsolutions.cli`.

If the input cannot be read or does not fit the puzzle's format, the command
prints `Error: ...` on standard error and exits with status 1.

## Using it from Python

Every day lives in a module such as `aocsolutions.year2023.day05` or
`aocsolutions.year2024.day07`. Each one has `parse(stream)`, `part1(...)` and
`part2(...)`, and `new()`, which returns an `aocsolutions.day.Day` that ties
them together. `Day.solve(part, stream)` parses a text stream and returns the
answer; `Day.run(part, path, stdin, stdout)` reads a file or piped input and
also prints the answer.

```python
import io

from aocsolutions.year2024 import day01

puzzle = day01.new()
answer = puzzle.solve(1, io.StringIO("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"))
print(answer)  # 11
```

Helpers shared by the solutions are in `aocsolutions.util`: `gcd`, `lcm`
(which raises `LCMArgumentError` for fewer than two numbers), `int_pow`,
`permutations`, `parse_int` and `string_to_int_list`.

## What it does not do

The package holds no puzzle inputs and does not fetch them; you supply your
own input file or pipe it in. Only the days listed above are solved.