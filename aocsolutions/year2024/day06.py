"""Guard gallivant: tracing a patrolling guard through a lab."""

from __future__ import annotations

import datetime
import enum
from dataclasses import dataclass, field, replace
from typing import TextIO

from aocsolutions.day import Day

Point = tuple[int, int]

EMPTY = 0
OBSTACLE = -1
SPECIAL_OBSTACLE = -2
_OBSTACLES = {OBSTACLE, SPECIAL_OBSTACLE}
_OBSTACLE_CHARS = {OBSTACLE: "#", SPECIAL_OBSTACLE: "O"}
_CELL_CHARS = {".": EMPTY, "#": OBSTACLE, "O": SPECIAL_OBSTACLE}
_VISITED_CHAR = "X"
_LOOP_THRESHOLD = 10


class Direction(enum.Enum):
    """Facing of the guard; the value is the symbol drawn on the map."""

    NORTH = "^"
    EAST = ">"
    SOUTH = "v"
    WEST = "<"

    @property
    def delta(self) -> Point:
        return _DELTAS[self]

    def turned(self) -> Direction:
        """The direction after a right turn."""
        order = list(Direction)
        return order[(order.index(self) + 1) % len(order)]

    def __str__(self) -> str:
        return self.value


_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}


@dataclass
class Guard:
    pos: Point = (0, 0)
    direction: Direction = Direction.NORTH

    def next_pos(self) -> Point:
        dx, dy = self.direction.delta
        return self.pos[0] + dx, self.pos[1] + dy

    def move(self) -> Guard:
        self.pos = self.next_pos()
        return self

    def turn(self) -> Guard:
        self.direction = self.direction.turned()
        return self


@dataclass
class Map:
    """The lab grid; free cells hold how often the guard stepped on them."""

    pix: list[list[int]]
    width: int
    height: int
    guard: Guard = field(default_factory=Guard)
    _saved: tuple[list[list[int]], Guard] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def contains(self, pt: Point) -> bool:
        x, y = pt
        return 0 <= x < self.width and 0 <= y < self.height

    def run_forward(self) -> bool:
        """Walk until the guard leaves (True) or is caught in a loop (False)."""
        while True:
            self.step()
            if not self.contains(self.guard.pos):
                return True
            if self.visits(self.guard.pos) > _LOOP_THRESHOLD:
                return False

    def save_state(self) -> None:
        self._saved = ([row.copy() for row in self.pix], replace(self.guard))

    def restore_state(self) -> None:
        if self._saved is None:
            raise RuntimeError("no state was saved")
        self.pix, self.guard = self._saved
        self._saved = None

    def get_cell(self, pt: Point) -> int:
        if not self.contains(pt):
            raise IndexError(f"point outside the map: {pt}")
        x, y = pt
        return self.pix[y][x]

    def set_cell(self, pt: Point, value: int) -> None:
        if not self.contains(pt):
            raise IndexError(f"point outside the map: {pt}")
        x, y = pt
        self.pix[y][x] = value

    def step(self) -> None:
        """Mark the current cell, then turn at an obstacle or move ahead."""
        self.set_cell(self.guard.pos, self.get_cell(self.guard.pos) + 1)
        if self.is_obstacle(self.guard.next_pos()):
            self.guard.turn()
        else:
            self.guard.move()

    def cells_visited(self) -> int:
        return sum(1 for row in self.pix for cell in row if cell > 0)

    def visits(self, pt: Point) -> int:
        if not self.contains(pt):
            return 0
        cell = self.get_cell(pt)
        if cell in _OBSTACLES:
            raise ValueError("guard can't visit an obstacle")
        return cell

    def is_obstacle(self, pt: Point) -> bool:
        return self.contains(pt) and self.get_cell(pt) in _OBSTACLES

    def __str__(self) -> str:
        rows = []
        for y, row in enumerate(self.pix):
            chars = []
            for x, cell in enumerate(row):
                if (x, y) == self.guard.pos:
                    chars.append(str(self.guard.direction))
                elif cell in _OBSTACLES:
                    chars.append(_OBSTACLE_CHARS[cell])
                elif cell == EMPTY:
                    chars.append(".")
                else:
                    chars.append(_VISITED_CHAR)
            rows.append("".join(chars) + "\n")
        return "".join(rows)


def parse(stream: TextIO) -> Map:
    lines = stream.read().strip().split("\n")
    guard = Guard()
    pix: list[list[int]] = []
    for y, line in enumerate(lines):
        row = []
        for x, char in enumerate(line):
            if char in _CELL_CHARS:
                row.append(_CELL_CHARS[char])
            else:
                try:
                    direction = Direction(char)
                except ValueError:
                    raise ValueError(f"invalid map cell: {char!r}") from None
                guard = Guard((x, y), direction)
                row.append(EMPTY)
        pix.append(row)
    return Map(pix, len(lines[0]), len(lines), guard)


def part1(lab: Map) -> int:
    lab.run_forward()
    return lab.cells_visited()


def part2(lab: Map) -> int:
    """Count the cells on the path where a new obstacle makes the guard loop."""
    result = 0
    while lab.contains(lab.guard.pos):
        next_pos = lab.guard.next_pos()
        if not lab.contains(next_pos):
            break
        if lab.get_cell(next_pos) == EMPTY:
            lab.save_state()
            lab.set_cell(next_pos, SPECIAL_OBSTACLE)
            if not lab.run_forward():
                result += 1
            lab.restore_state()
        lab.step()
    return result


def new() -> Day[Map, int]:
    return Day(
        date=datetime.date(2024, 12, 6),
        parse=parse,
        part1=part1,
        part2=part2,
    )