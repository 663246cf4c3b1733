import io

import pytest

from aocsolutions.year2024.day07 import (
    Calibration,
    Operator,
    new,
    parse,
    part1,
    part2,
)

EXAMPLE = """\
190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_example_part1():
    assert new().solve(1, io.StringIO(EXAMPLE)) == 3749


def test_example_part2():
    assert new().solve(2, io.StringIO(EXAMPLE)) == 11387


def test_parse_line():
    calibrations = parse(io.StringIO("3267: 81 40 27\n"))
    assert calibrations == [Calibration(3267, (81, 40, 27))]


@pytest.mark.parametrize(
    ("op", "a", "b", "want"),
    [
        (Operator.ADD, 3, 4, 7),
        (Operator.MULTIPLY, 3, 4, 12),
        (Operator.CONCAT, 12, 345, 12345),
        (Operator.CONCAT, 5, 0, 50),
        (Operator.CONCAT, 1, 10, 110),
    ],
)
def test_operator_apply(op, a, b, want):
    assert op.apply(a, b) == want


def test_is_valid_with_and_without_concat():
    calibration = Calibration(156, (15, 6))
    assert calibration.is_valid([Operator.ADD, Operator.MULTIPLY]) is False
    assert calibration.is_valid(list(Operator)) is True


def test_single_number_raises():
    with pytest.raises(ValueError):
        Calibration(5, (5,)).is_valid(list(Operator))


def test_invalid_number_raises():
    with pytest.raises(ValueError):
        parse(io.StringIO("12: 3 x\n"))


def test_part2_never_below_part1():
    calibrations = parse(io.StringIO(EXAMPLE))
    assert part2(calibrations) >= part1(calibrations)