"""Bridge repair: finding operators that make calibration equations true."""

from __future__ import annotations

import datetime
import enum
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from aocsolutions.day import Day
from aocsolutions.util import parse_int


class Operator(enum.Enum):
    ADD = "+"
    MULTIPLY = "*"
    CONCAT = "|"

    def apply(self, a: int, b: int) -> int:
        if self is Operator.ADD:
            return a + b
        if self is Operator.MULTIPLY:
            return a * b
        pad = 10
        while pad <= b:
            pad *= 10
        return a * pad + b


def _is_valid(
    target: int, result: int, operands: Sequence[int], operators: Sequence[Operator]
) -> bool:
    for op in operators:
        value = op.apply(result, operands[0])
        if value > target:
            continue
        if len(operands) == 1:
            if value == target:
                return True
        elif _is_valid(target, value, operands[1:], operators):
            return True
    return False


@dataclass(frozen=True)
class Calibration:
    result: int
    numbers: tuple[int, ...]

    def is_valid(self, operators: Sequence[Operator]) -> bool:
        """Whether some left-to-right choice of operators yields the result."""
        if len(self.numbers) < 2:
            raise ValueError("a calibration needs at least two numbers")
        return _is_valid(self.result, self.numbers[0], self.numbers[1:], operators)


def parse(stream: TextIO) -> list[Calibration]:
    calibrations = []
    for raw in stream:
        head, *rest = raw.removesuffix("\n").removesuffix("\r").split(" ")
        calibrations.append(
            Calibration(
                parse_int(head.removesuffix(":")),
                tuple(parse_int(v) for v in rest),
            )
        )
    return calibrations


def _total(calibrations: list[Calibration], operators: Sequence[Operator]) -> int:
    return sum(c.result for c in calibrations if c.is_valid(operators))


def part1(calibrations: list[Calibration]) -> int:
    return _total(calibrations, (Operator.ADD, Operator.MULTIPLY))


def part2(calibrations: list[Calibration]) -> int:
    return _total(calibrations, (Operator.ADD, Operator.MULTIPLY, Operator.CONCAT))


def new() -> Day[list[Calibration], int]:
    return Day(
        date=datetime.date(2024, 12, 7),
        parse=parse,
        part1=part1,
        part2=part2,
    )