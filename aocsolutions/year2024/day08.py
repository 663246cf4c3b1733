"""Resonant collinearity: antinodes of antennas sharing a frequency."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field, replace
from typing import TextIO

from aocsolutions.day import Day

Point = tuple[int, int]

EMPTY = "."
ANTINODE = "#"


@dataclass(frozen=True)
class Antenna:
    point: Point
    letter: str


@dataclass
class Map:
    width: int = 0
    height: int = 0
    antennas: list[Antenna] = field(default_factory=list)
    harmonics: bool = False

    def contains(self, pt: Point) -> bool:
        x, y = pt
        return 0 <= x < self.width and 0 <= y < self.height

    def antenna_codes(self) -> list[str]:
        """Distinct frequencies in order of first appearance."""
        return list(dict.fromkeys(a.letter for a in self.antennas))

    def antennas_by_code(self, code: str) -> list[Antenna]:
        return [a for a in self.antennas if a.letter == code]

    def get_antinodes(self, code: str) -> list[Point]:
        """Antinodes of one frequency, possibly with repeats."""
        antennas = self.antennas_by_code(code)
        antinodes: list[Point] = []
        for i, a in enumerate(antennas):
            for j, b in enumerate(antennas):
                if i == j:
                    continue
                dx, dy = a.point[0] - b.point[0], a.point[1] - b.point[1]
                if self.harmonics:
                    pt = b.point
                    while self.contains(pt):
                        antinodes.append(pt)
                        pt = (pt[0] - dx, pt[1] - dy)
                else:
                    pt = (b.point[0] - dx, b.point[1] - dy)
                    if self.contains(pt):
                        antinodes.append(pt)
        return antinodes

    def get_all_antinodes(self) -> list[Point]:
        """Distinct antinodes of every frequency."""
        seen: dict[Point, None] = {}
        for code in self.antenna_codes():
            seen.update(dict.fromkeys(self.get_antinodes(code)))
        return list(seen)

    def __str__(self) -> str:
        letters = {a.point: a.letter for a in reversed(self.antennas)}
        antinodes = set(self.get_all_antinodes()) if self.antennas else set()
        rows = []
        for y in range(self.height):
            chars = []
            for x in range(self.width):
                if (x, y) in letters:
                    chars.append(letters[(x, y)])
                elif (x, y) in antinodes:
                    chars.append(ANTINODE)
                else:
                    chars.append(EMPTY)
            rows.append("".join(chars) + "\n")
        return "".join(rows)


def parse(stream: TextIO) -> Map:
    grid = Map()
    for y, raw in enumerate(stream):
        line = raw.removesuffix("\n").removesuffix("\r")
        grid.width = len(line)
        grid.height = y + 1
        grid.antennas.extend(
            Antenna((x, y), char) for x, char in enumerate(line) if char != EMPTY
        )
    return grid


def part1(grid: Map) -> int:
    return len(replace(grid, harmonics=False).get_all_antinodes())


def part2(grid: Map) -> int:
    return len(replace(grid, harmonics=True).get_all_antinodes())


def new() -> Day[Map, int]:
    return Day(
        date=datetime.date(2024, 12, 8),
        parse=parse,
        part1=part1,
        part2=part2,
    )