"""Print queue: ordering page updates by precedence rules."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import TextIO

from aocsolutions.day import Day
from aocsolutions.util import parse_int


def _index(update: list[int], value: int) -> int:
    try:
        return update.index(value)
    except ValueError:
        return -1


@dataclass
class Printer:
    rules: list[list[int]] = field(default_factory=list)
    updates: list[list[int]] = field(default_factory=list)

    def _violations(self, update: list[int]):
        for rule in self.rules:
            first = _index(update, rule[0])
            if first == -1:
                continue
            second = _index(update, rule[1])
            if second == -1:
                continue
            if first > second:
                yield first, second

    def valid(self, update: list[int]) -> bool:
        """Whether every applicable rule is respected by ``update``."""
        return next(self._violations(update), None) is None

    def fix(self, update: list[int]) -> list[int]:
        """Return a reordered copy of ``update`` that respects every rule."""
        fixed = list(update)
        changed = True
        while changed:
            changed = False
            for first, second in self._violations(fixed):
                changed = True
                fixed[first], fixed[second] = fixed[second], fixed[first]
        return fixed


def parse(stream: TextIO) -> Printer:
    """Read ``a|b`` rules, a blank line, then comma-separated updates."""
    printer = Printer()
    rule_section = True
    for raw in stream:
        line = raw.removesuffix("\n").removesuffix("\r")
        if not line:
            rule_section = False
            continue
        sep = "|" if rule_section else ","
        values = [parse_int(v) for v in line.split(sep)]
        (printer.rules if rule_section else printer.updates).append(values)
    return printer


def part1(printer: Printer) -> int:
    return sum(u[len(u) // 2] for u in printer.updates if printer.valid(u))


def part2(printer: Printer) -> int:
    total = 0
    for update in printer.updates:
        if not printer.valid(update):
            fixed = printer.fix(update)
            total += fixed[len(fixed) // 2]
    return total


def new() -> Day[Printer, int]:
    return Day(
        date=datetime.date(2024, 12, 5),
        parse=parse,
        part1=part1,
        part2=part2,
    )