"""Ceres search: finding XMAS in a word search."""

from __future__ import annotations

import datetime
from typing import TextIO

from aocsolutions.day import Day

_DIRECTIONS = ((0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1))


def _at(grid: list[str], x: int, y: int) -> str | None:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return None


def _spells_xmas(grid: list[str], x: int, y: int, dx: int, dy: int) -> bool:
    return all(
        _at(grid, x + k * dx, y + k * dy) == letter
        for k, letter in enumerate("MAS", start=1)
    )


def check_x(grid: list[str], x: int, y: int) -> bool:
    """Whether two diagonal MAS words cross at ``(x, y)``."""
    if not (y > 0 and x > 0 and y + 1 < len(grid) and x + 1 < len(grid[y])):
        return False
    nw, se = grid[y - 1][x - 1], grid[y + 1][x + 1]
    ne, sw = grid[y - 1][x + 1], grid[y + 1][x - 1]
    return {nw, se} == {"M", "S"} and {ne, sw} == {"M", "S"}


def parse(stream: TextIO) -> list[str]:
    return stream.read().strip().split("\n")


def part1(grid: list[str]) -> int:
    return sum(
        _spells_xmas(grid, x, y, dx, dy)
        for y, line in enumerate(grid)
        for x, char in enumerate(line)
        if char == "X"
        for dx, dy in _DIRECTIONS
    )


def part2(grid: list[str]) -> int:
    return sum(
        check_x(grid, x, y)
        for y, line in enumerate(grid)
        for x, char in enumerate(line)
        if char == "A"
    )


def new() -> Day[list[str], int]:
    return Day(
        date=datetime.date(2024, 12, 4),
        parse=parse,
        part1=part1,
        part2=part2,
    )