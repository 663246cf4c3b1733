"""Mirage maintenance: extrapolating value histories."""

from __future__ import annotations

import datetime
import enum
from dataclasses import dataclass, field
from typing import TextIO

from aocsolutions.day import Day
from aocsolutions.util import string_to_int_list


class PredictMode(enum.Enum):
    FUTURE = enum.auto()
    PAST = enum.auto()


@dataclass(frozen=True)
class History:
    values: tuple[int, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> History:
        return cls(tuple(string_to_int_list(text, " ")))

    def predict(self, mode: PredictMode) -> int:
        """Extrapolate one value forwards or backwards from the differences."""
        lines = [list(self.values)]
        while sum(lines[-1]) != 0:
            prev = lines[-1]
            lines.append([b - a for a, b in zip(prev, prev[1:])])

        result = 0
        for line in reversed(lines[:-1]):
            if mode is PredictMode.FUTURE:
                result = line[-1] + result
            else:
                result = line[0] - result
        return result


@dataclass
class Report:
    history: list[History] = field(default_factory=list)

    @classmethod
    def decode(cls, stream: TextIO) -> Report:
        return cls(
            [
                History.from_text(line.removesuffix("\n").removesuffix("\r"))
                for line in stream
            ]
        )

    def predict(self, mode: PredictMode) -> int:
        return sum(h.predict(mode) for h in self.history)


def parse(stream: TextIO) -> Report:
    return Report.decode(stream)


def part1(report: Report) -> int:
    return report.predict(PredictMode.FUTURE)


def part2(report: Report) -> int:
    return report.predict(PredictMode.PAST)


def new() -> Day[Report, int]:
    return Day(
        date=datetime.date(2023, 12, 9),
        parse=parse,
        part1=part1,
        part2=part2,
    )