"""Mull it over: summing multiplication instructions in corrupted memory."""

from __future__ import annotations

import datetime
import re
from typing import TextIO

from aocsolutions.day import Day

_MUL_RE = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_INSTRUCTION_RE = re.compile(r"mul\(([0-9]+),([0-9]+)\)|do(?:n't)?\(\)")


def parse(stream: TextIO) -> str:
    return stream.read()


def part1(text: str) -> int:
    return sum(int(a) * int(b) for a, b in _MUL_RE.findall(text))


def part2(text: str) -> int:
    """Like part 1, but ``don't()`` disables and ``do()`` re-enables."""
    result = 0
    enabled = True
    for match in _INSTRUCTION_RE.finditer(text):
        instruction = match.group(0)
        if instruction == "do()":
            enabled = True
        elif instruction == "don't()":
            enabled = False
        elif enabled:
            result += int(match.group(1)) * int(match.group(2))
    return result


def new() -> Day[str, int]:
    return Day(
        date=datetime.date(2024, 12, 3),
        parse=parse,
        part1=part1,
        part2=part2,
    )