import io

import pytest

from aocsolutions.year2023.day01 import find_first_last, new, parse, part1, part2

EXAMPLE_P1 = """1abc2
pqr3stu8vwx
a1b2c3d4e5f
treb7uchet
"""

EXAMPLE_P2 = """two1nine
eightwothree
abcone2threexyz
xtwone3four
4nineeightseven2
zoneight234
7pqrstsixteen
"""


@pytest.mark.parametrize(
    ("part", "text", "expected"),
    [(1, EXAMPLE_P1, 142), (2, EXAMPLE_P2, 281)],
)
def test_solution(part, text, expected):
    assert new().solve(part, io.StringIO(text)) == expected


def test_run_prints_answer():
    out = io.StringIO()
    new().run(1, stdin=io.StringIO(EXAMPLE_P1), stdout=out)
    assert out.getvalue().strip() == "142"


def test_parse_strips_trailing_newline():
    assert parse(io.StringIO(EXAMPLE_P1)) == [
        "1abc2",
        "pqr3stu8vwx",
        "a1b2c3d4e5f",
        "treb7uchet",
    ]


@pytest.mark.parametrize(
    ("line", "expected"),
    [("treb7uchet", 77), ("1abc2", 12), ("a1b2c3d4e5f", 15), ("abc", 0)],
)
def test_find_first_last(line, expected):
    assert find_first_last(line) == expected


def test_part2_handles_overlapping_words():
    assert part2(["eightwothree"]) == 83
    assert part1(["eightwothree"]) == 0