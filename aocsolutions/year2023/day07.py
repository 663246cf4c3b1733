"""Camel cards: ranking poker-like hands, optionally with jokers."""

from __future__ import annotations

import datetime
import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TextIO

from aocsolutions.day import Day
from aocsolutions.util import parse_int

_RANKS = {card: value for value, card in enumerate("23456789TJQKA", start=1)}


class InvalidInputError(ValueError):
    """Raised when a round line cannot be split into cards and a bid."""


def _lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield line.removesuffix("\n").removesuffix("\r")


def rank(card: str, wildcard: bool) -> int:
    """Strength of a single card; a joker is weakest when ``wildcard`` is set."""
    if card == "J" and wildcard:
        return 0
    return _RANKS.get(card, 0)


def _counts(cards: str, uniq: list[str], wildcard: bool) -> list[int]:
    counts = sorted(cards.count(v) for v in uniq)
    if wildcard:
        counts[-1] += cards.count("J")
    return counts


class Hand(enum.IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6

    def matches(self, cards: str, wildcard: bool) -> bool:
        """Whether ``cards`` form this kind of hand."""
        uniq = sorted(set(cards))
        if wildcard and len(uniq) != 1 and "J" in uniq:
            uniq.remove("J")

        if self is Hand.FIVE_OF_A_KIND:
            return len(uniq) == 1
        if self is Hand.FOUR_OF_A_KIND:
            return len(uniq) == 2 and _counts(cards, uniq, wildcard) == [1, 4]
        if self is Hand.FULL_HOUSE:
            return len(uniq) == 2 and _counts(cards, uniq, wildcard) == [2, 3]
        if self is Hand.THREE_OF_A_KIND:
            return len(uniq) == 3 and _counts(cards, uniq, wildcard) == [1, 1, 3]
        if self is Hand.TWO_PAIR:
            return len(uniq) == 3 and _counts(cards, uniq, wildcard) == [1, 2, 2]
        if self is Hand.ONE_PAIR:
            return len(uniq) == 4
        return len(uniq) == 5


@dataclass(frozen=True)
class Round:
    cards: str
    bid: int

    @classmethod
    def from_text(cls, text: str) -> Round:
        """Parse a line such as ``32T3K 765``."""
        cards, sep, bid = text.partition(" ")
        if not sep:
            raise InvalidInputError(f"invalid input: {text}")
        return cls(cards, parse_int(bid))

    def hand(self, wildcard: bool) -> Hand:
        """The strongest hand these cards make."""
        best = Hand.HIGH_CARD
        for hand in Hand:
            if hand.matches(self.cards, wildcard):
                best = hand
        return best


@dataclass
class Game:
    rounds: list[Round] = field(default_factory=list)

    @classmethod
    def decode(cls, stream: TextIO) -> Game:
        return cls([Round.from_text(line) for line in _lines(stream)])

    def winnings(self, wildcard: bool) -> int:
        """Sum of each bid times the rank of its hand among all rounds."""
        ordered = sorted(
            self.rounds,
            key=lambda r: (r.hand(wildcard), tuple(rank(c, wildcard) for c in r.cards)),
        )
        return sum(r.bid * position for position, r in enumerate(ordered, start=1))


def parse(stream: TextIO) -> Game:
    return Game.decode(stream)


def part1(game: Game) -> int:
    return game.winnings(False)


def part2(game: Game) -> int:
    return game.winnings(True)


def new() -> Day[Game, int]:
    return Day(
        date=datetime.date(2023, 12, 7),
        parse=parse,
        part1=part1,
        part2=part2,
    )