"""Boat races: ways to beat the record distance."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import TextIO

from aocsolutions.day import Day
from aocsolutions.util import parse_int, string_to_int_list


def _distance(hold: int, time: int) -> int:
    return hold * (time - hold)


def count_wins(time: int, record: int) -> int:
    """Count hold durations in ``[0, time)`` that travel further than ``record``."""
    if time <= 0:
        return 0
    half = time // 2
    if _distance(half, time) <= record:
        return 0
    lo, hi = 0, half
    while lo < hi:
        mid = (lo + hi) // 2
        if _distance(mid, time) > record:
            hi = mid
        else:
            lo = mid + 1
    return min(time - lo, time - 1) - lo + 1


@dataclass(frozen=True)
class Race:
    time: str = ""
    record: str = ""

    @classmethod
    def decode(cls, stream: TextIO) -> Race:
        lines = [line.removesuffix("\n").removesuffix("\r") for line in stream]
        time = lines[0].removeprefix("Time:").strip() if lines else ""
        record = lines[1].removeprefix("Distance:").strip() if len(lines) > 1 else ""
        return cls(time, record)

    def part1(self) -> int:
        """Product of the win counts of each separate race."""
        times = string_to_int_list(self.time, " ")
        records = string_to_int_list(self.record, " ")
        if len(records) < len(times):
            raise ValueError("fewer records than race times")
        total = 1
        for time, record in zip(times, records):
            total *= count_wins(time, record)
        return total

    def part2(self) -> int:
        """Win count when the spaces between the numbers are ignored."""
        time = parse_int(self.time.replace(" ", ""))
        record = parse_int(self.record.replace(" ", ""))
        return count_wins(time, record)


def parse(stream: TextIO) -> Race:
    return Race.decode(stream)


def part1(race: Race) -> int:
    return race.part1()


def part2(race: Race) -> int:
    return race.part2()


def new() -> Day[Race, int]:
    return Day(
        date=datetime.date(2023, 12, 6),
        parse=parse,
        part1=part1,
        part2=part2,
    )