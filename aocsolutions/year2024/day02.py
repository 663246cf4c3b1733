"""Red-nosed reports: checking that level sequences change safely."""

from __future__ import annotations

import datetime
from collections.abc import Sequence
from typing import TextIO

from aocsolutions.day import Day
from aocsolutions.util import parse_int


def _direction(a: int, b: int) -> int:
    return (a < b) - (a > b)


def is_safe(row: Sequence[int]) -> bool:
    """Whether the levels move steadily in one direction by 1 to 3 each step."""
    if len(row) < 2:
        raise ValueError(f"a report needs at least two levels: {list(row)}")
    direction = _direction(row[0], row[1])
    for prev, val in zip(row, row[1:]):
        diff = val - prev
        if not 1 <= abs(diff) <= 3 or diff * direction < 0:
            return False
    return True


def count_safe(rows: Sequence[Sequence[int]], has_dampener: bool) -> int:
    """Count safe rows; with the dampener one level may be dropped."""
    safe = 0
    for row in rows:
        if is_safe(row):
            safe += 1
        elif has_dampener and any(
            is_safe([*row[:i], *row[i + 1 :]]) for i in range(len(row))
        ):
            safe += 1
    return safe


def parse(stream: TextIO) -> list[list[int]]:
    return [[parse_int(v) for v in line.split()] for line in stream]


def part1(rows: list[list[int]]) -> int:
    return count_safe(rows, False)


def part2(rows: list[list[int]]) -> int:
    return count_safe(rows, True)


def new() -> Day[list[list[int]], int]:
    return Day(
        date=datetime.date(2024, 12, 2),
        parse=parse,
        part1=part1,
        part2=part2,
    )