"""Trebuchet calibration values."""

from __future__ import annotations

import datetime
import re
from typing import TextIO

from aocsolutions.day import Day

_SPELLED = {
    "one": "o1e",
    "two": "t2o",
    "three": "t3e",
    "four": "f4r",
    "five": "f5e",
    "six": "s6x",
    "seven": "s7n",
    "eight": "e8t",
    "nine": "n9e",
}
_SPELLED_RE = re.compile("|".join(_SPELLED))


def find_first_last(line: str) -> int:
    """Combine the first and last digit of ``line``; 0 if it has none."""
    digits = [int(c) for c in line if "0" <= c <= "9"]
    if not digits:
        return 0
    return 10 * digits[0] + digits[-1]


def parse(stream: TextIO) -> list[str]:
    return stream.read().strip().split("\n")


def part1(lines: list[str]) -> int:
    return sum(find_first_last(line) for line in lines)


def _spell_out(match: re.Match[str]) -> str:
    return _SPELLED[match.group()]


def part2(lines: list[str]) -> int:
    total = 0
    for line in lines:
        while (replaced := _SPELLED_RE.sub(_spell_out, line)) != line:
            line = replaced
        total += find_first_last(line)
    return total


def new() -> Day[list[str], int]:
    return Day(
        date=datetime.date(2023, 12, 1),
        parse=parse,
        part1=part1,
        part2=part2,
    )