"""Cube conundrum: games of coloured cubes drawn from a bag."""

from __future__ import annotations

import datetime
import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

from aocsolutions.day import Day

RED_CUBES = 12
GREEN_CUBES = 13
BLUE_CUBES = 14

_CUBES_RE = re.compile(r"\s*([+-]?[0-9]+)\s*(\S+)")
_GAME_RE = re.compile(r"Game\s*([+-]?[0-9]+)")


def _lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield line.removesuffix("\n").removesuffix("\r")


@dataclass(frozen=True)
class RGB:
    r: int = 0
    g: int = 0
    b: int = 0

    @classmethod
    def from_text(cls, text: str) -> RGB:
        """Parse a round such as ``3 blue, 4 red``."""
        counts = {"red": 0, "green": 0, "blue": 0}
        for spec in text.split(","):
            match = _CUBES_RE.match(spec)
            if match is None:
                raise ValueError(f"invalid cube count: {spec!r}")
            number, color = int(match.group(1)), match.group(2)
            if color not in counts:
                raise ValueError(f"invalid color: {color}")
            counts[color] = number
        return cls(counts["red"], counts["green"], counts["blue"])

    def valid(self) -> bool:
        return self.r <= RED_CUBES and self.g <= GREEN_CUBES and self.b <= BLUE_CUBES


@dataclass(frozen=True)
class Game:
    id: int
    rounds: tuple[RGB, ...]

    @classmethod
    def from_text(cls, text: str) -> Game:
        """Parse a line such as ``Game 1: 3 blue, 4 red; 2 green``."""
        id_spec, sep, rounds_spec = text.partition(":")
        if not sep:
            raise ValueError(f"invalid game: {text}")
        match = _GAME_RE.match(id_spec)
        if match is None:
            raise ValueError(f"invalid game id: {id_spec!r}")

        rounds = []
        for i, round_spec in enumerate(rounds_spec.strip().split(";")):
            try:
                rounds.append(RGB.from_text(round_spec))
            except ValueError as err:
                raise ValueError(f"failed to parse round {i}: {err}") from err
        return cls(int(match.group(1)), tuple(rounds))

    def valid(self) -> bool:
        return all(r.valid() for r in self.rounds)

    def max(self) -> RGB:
        """Fewest cubes of each colour that make every round possible."""
        return RGB(
            max((r.r for r in self.rounds), default=0),
            max((r.g for r in self.rounds), default=0),
            max((r.b for r in self.rounds), default=0),
        )

    def power(self) -> int:
        m = self.max()
        return m.r * m.g * m.b


def parse(stream: TextIO) -> list[Game]:
    games = []
    for i, line in enumerate(_lines(stream)):
        try:
            games.append(Game.from_text(line))
        except ValueError as err:
            raise ValueError(f"failed to unmarshal game {i}: {err}") from err
    return games


def part1(games: list[Game]) -> int:
    return sum(game.id for game in games if game.valid())


def part2(games: list[Game]) -> int:
    return sum(game.power() for game in games)


def new() -> Day[list[Game], int]:
    return Day(
        date=datetime.date(2023, 12, 2),
        parse=parse,
        part1=part1,
        part2=part2,
    )