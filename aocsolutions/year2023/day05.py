"""Seed almanac: chains of range mappings from seeds to locations."""

from __future__ import annotations

import datetime
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TextIO

from aocsolutions.day import Day
from aocsolutions.util import parse_int, string_to_int_list

_MAP_NAME_RE = re.compile(r"\s*(\S+)\s+map:")


def _lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield line.removesuffix("\n").removesuffix("\r")


@dataclass(frozen=True)
class SeedRange:
    start: int
    end: int


@dataclass(frozen=True)
class Rule:
    """Maps ``[start, end)`` onto itself shifted by ``diff``."""

    start: int
    end: int
    diff: int

    @classmethod
    def from_text(cls, text: str) -> Rule:
        """Parse ``<destination> <source> <count>``."""
        fields = text.split()
        if len(fields) < 3:
            raise ValueError(f"invalid rule: {text!r}")
        dest, start, count = (parse_int(f) for f in fields[:3])
        return cls(start, start + count, dest - start)

    def transform(self, i: int) -> int:
        if self.start <= i < self.end:
            return i + self.diff
        return i


@dataclass
class AlmanacMap:
    name: str
    rules: list[Rule] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> AlmanacMap:
        """Parse a block whose first line is ``<name> map:``."""
        header, *lines = text.split("\n")
        match = _MAP_NAME_RE.match(header)
        if match is None:
            raise ValueError(f"invalid map header: {header!r}")
        return cls(match.group(1), [Rule.from_text(line) for line in lines if line])

    def transform(self, a: int) -> int:
        """Apply the first rule that changes ``a``; otherwise return it."""
        for rule in self.rules:
            if (b := rule.transform(a)) != a:
                return b
        return a


@dataclass
class Almanac:
    seeds: list[int] = field(default_factory=list)
    maps: list[AlmanacMap] = field(default_factory=list)

    @classmethod
    def decode(cls, stream: TextIO) -> Almanac:
        """Read the seeds line and the map blocks.

        A block is only taken once a blank line follows it.
        """
        almanac = cls()
        block: list[str] = []
        for i, line in enumerate(_lines(stream)):
            if i == 0:
                almanac.seeds = string_to_int_list(line.removeprefix("seeds: "), " ")
            elif line == "" and block:
                almanac.maps.append(AlmanacMap.from_text("\n".join(block)))
                block = []
            elif line:
                block.append(line)
        return almanac

    def transform(self, i: int) -> int:
        for m in self.maps:
            i = m.transform(i)
        return i

    def locations(self) -> list[int]:
        return [self.transform(seed) for seed in self.seeds]

    def seed_ranges(self) -> list[SeedRange]:
        """Read the seeds as ``start length`` pairs."""
        if len(self.seeds) % 2:
            raise ValueError("seed ranges need an even number of values")
        starts, lengths = self.seeds[::2], self.seeds[1::2]
        return [SeedRange(start, start + length) for start, length in zip(starts, lengths)]

    def min_location_range(self) -> int:
        """Lowest location start reached by splitting and shifting seed ranges."""
        seeds = self.seed_ranges()
        for m in self.maps:
            for rule in m.rules:
                for i in range(len(seeds)):
                    start, end = seeds[i].start, seeds[i].end
                    if end <= rule.start or rule.end <= start:
                        continue
                    if start <= rule.start:
                        seeds.append(SeedRange(start, rule.start - 1))
                        start = rule.start
                    if end > rule.end:
                        seeds.append(SeedRange(rule.end, end - 1))
                        end = rule.end
                    seeds[i] = SeedRange(start + rule.diff, end + rule.diff)
        if not seeds:
            raise ValueError("no seed ranges")
        return min(seeds, key=lambda s: s.start).start


def parse(stream: TextIO) -> Almanac:
    return Almanac.decode(stream)


def part1(almanac: Almanac) -> int:
    return min(almanac.locations())


def part2(almanac: Almanac) -> int:
    return almanac.min_location_range()


def new() -> Day[Almanac, int]:
    return Day(
        date=datetime.date(2023, 12, 5),
        parse=parse,
        part1=part1,
        part2=part2,
    )