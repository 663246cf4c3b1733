"""Historian hysteria: comparing two lists of location IDs."""

from __future__ import annotations

import datetime
from collections import Counter
from typing import TextIO

from aocsolutions.day import Day
from aocsolutions.util import parse_int


def parse(stream: TextIO) -> list[list[int]]:
    """Read two whitespace-separated columns of integers."""
    columns: list[list[int]] = [[], []]
    for line in stream:
        fields = line.split()
        if len(fields) > len(columns):
            raise ValueError(f"too many columns: {line.rstrip()!r}")
        for column, value in zip(columns, fields):
            column.append(parse_int(value))
    return columns


def part1(columns: list[list[int]]) -> int:
    """Total distance between the sorted left and right lists."""
    left, right = sorted(columns[0]), sorted(columns[1])
    if len(left) > len(right):
        raise ValueError("the right list is shorter than the left list")
    return sum(abs(a - b) for a, b in zip(left, right))


def part2(columns: list[list[int]]) -> int:
    """Similarity score: each left value times its count in the right list."""
    counts = Counter(columns[1])
    return sum(needle * counts[needle] for needle in columns[0])


def new() -> Day[list[list[int]], int]:
    return Day(
        date=datetime.date(2024, 12, 1),
        parse=parse,
        part1=part1,
        part2=part2,
    )