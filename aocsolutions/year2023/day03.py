"""Gear ratios: part numbers next to symbols in an engine schematic."""

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass, field
from typing import TextIO

from aocsolutions.day import Day

_SPLIT_RE = re.compile(r"[^0-9]")


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


@dataclass(frozen=True)
class Number:
    """A number in the schematic: row ``x``, starting column ``y``."""

    value: int
    x: int
    y: int
    length: int


@dataclass
class Schematic:
    grid: list[str] = field(default_factory=list)
    numbers: list[Number] = field(default_factory=list)

    @classmethod
    def decode(cls, stream: TextIO) -> Schematic:
        schematic = cls()
        for x, raw in enumerate(stream):
            line = raw.removesuffix("\n").removesuffix("\r")
            schematic.grid.append(line)
            y = 0
            for val in _SPLIT_RE.split(line):
                if val:
                    schematic.numbers.append(Number(int(val), x, y, len(val)))
                y += 1 + len(val)
        return schematic

    def ratios(self) -> tuple[int, int]:
        """Return the sum of part numbers and the sum of gear ratios."""
        part1 = part2 = 0
        for x, line in enumerate(self.grid):
            for y, char in enumerate(line):
                if not ((char != "." and char < "0") or char > "9"):
                    continue
                compute_ratio = char == "*"
                local_matches: list[int] = []
                start = max(y - 1, 0)
                for real_x in range(max(x - 1, 0), min(x + 2, len(self.grid))):
                    skip = 0
                    for offset, adjacent in enumerate(self.grid[real_x][start : y + 2]):
                        if skip > 0:
                            skip -= 1
                            continue
                        if not _is_digit(adjacent):
                            continue
                        real_y = start + offset
                        for n in self.numbers:
                            if real_x == n.x and n.y <= real_y <= n.y + n.length:
                                part1 += n.value
                                skip = n.y - real_y + n.length - 1
                                if compute_ratio:
                                    local_matches.append(n.value)
                        if len(local_matches) == 2:
                            part2 += local_matches[0] * local_matches[1]
        return part1, part2


def parse(stream: TextIO) -> Schematic:
    return Schematic.decode(stream)


def part1(schematic: Schematic) -> int:
    return schematic.ratios()[0]


def part2(schematic: Schematic) -> int:
    return schematic.ratios()[1]


def new() -> Day[Schematic, int]:
    return Day(
        date=datetime.date(2023, 12, 3),
        parse=parse,
        part1=part1,
        part2=part2,
    )