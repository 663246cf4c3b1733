"""Scratchcards: winning numbers and copies of cards."""

from __future__ import annotations

import datetime
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

from aocsolutions.day import Day
from aocsolutions.util import string_to_int_list

_CARD_RE = re.compile(r"Card\s*([+-]?[0-9]+)")


def _lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield line.removesuffix("\n").removesuffix("\r")


@dataclass(frozen=True)
class Card:
    id: int
    winning: tuple[int, ...]
    values: tuple[int, ...]

    @classmethod
    def from_text(cls, text: str) -> Card:
        """Parse a line such as ``Card 1: 41 48 | 83 86 6``."""
        id_spec, sep, numbers_spec = text.partition(":")
        if not sep:
            raise ValueError(f"invalid card: {text}")
        match = _CARD_RE.match(id_spec)
        if match is None:
            raise ValueError(f"invalid card id: {id_spec!r}")

        winning_spec, sep, values_spec = numbers_spec.partition("|")
        if not sep:
            raise ValueError(f"invalid numbers spec: {numbers_spec}")

        return cls(
            int(match.group(1)),
            tuple(string_to_int_list(winning_spec, " ")),
            tuple(string_to_int_list(values_spec, " ")),
        )

    def matches(self) -> int:
        """Number of values that are also winning numbers."""
        winning = set(self.winning)
        return sum(1 for v in self.values if v in winning)

    def points(self) -> int:
        count = self.matches()
        if count == 0:
            return 0
        return 1 << (count - 1)


def total_cards(cards: Sequence[Card]) -> int:
    """Count original cards plus every copy won through matches."""
    counts = [1] * len(cards)
    for i, card in enumerate(cards):
        for j in range(card.matches()):
            counts[i + 1 + j] += counts[i]
    return sum(counts)


def parse(stream: TextIO) -> list[Card]:
    cards = []
    for i, line in enumerate(_lines(stream)):
        try:
            cards.append(Card.from_text(line))
        except ValueError as err:
            raise ValueError(f"failed to unmarshal card {i}: {err}") from err
    return cards


def part1(cards: list[Card]) -> int:
    return sum(card.points() for card in cards)


def part2(cards: list[Card]) -> int:
    return total_cards(cards)


def new() -> Day[list[Card], int]:
    return Day(
        date=datetime.date(2023, 12, 4),
        parse=parse,
        part1=part1,
        part2=part2,
    )