"""A single puzzle day: an input parser and up to two part solvers."""

from __future__ import annotations

import datetime
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TextIO, TypeVar

In = TypeVar("In")
Out = TypeVar("Out")


class UsageError(Exception):
    """Raised when no input was given and standard input is a terminal."""


@dataclass(frozen=True)
class Day(Generic[In, Out]):
    """A puzzle day with its parser and part solvers."""

    date: datetime.date
    parse: Callable[[TextIO], In]
    part1: Callable[[In], Out] | None = None
    part2: Callable[[In], Out] | None = None

    @property
    def name(self) -> str:
        """Two-digit day of month, as used for the command name."""
        return f"{self.date.day:02d}"

    @property
    def alias(self) -> str:
        """Day of month without padding."""
        return str(self.date.day)

    @property
    def description(self) -> str:
        return f"Solutions for {self.date.isoformat()}"

    @property
    def parts(self) -> tuple[int, ...]:
        """Numbers of the parts that have a solver."""
        return tuple(
            number
            for number, func in ((1, self.part1), (2, self.part2))
            if func is not None
        )

    def _solver(self, part: int) -> Callable[[In], Out]:
        solvers = {1: self.part1, 2: self.part2}
        if part not in solvers:
            raise ValueError(f"invalid part: {part}")
        func = solvers[part]
        if func is None:
            raise ValueError(f"part {part} has no solution")
        return func

    def solve(self, part: int, stream: TextIO) -> Out:
        """Parse ``stream`` and return the answer to the given part."""
        func = self._solver(part)
        return func(self.parse(stream))

    def run(
        self,
        part: int,
        path: str | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> Out:
        """Solve from a file or piped input and print the answer."""
        self._solver(part)
        stdin = sys.stdin if stdin is None else stdin
        stdout = sys.stdout if stdout is None else stdout

        if path is not None:
            with open(path, encoding="utf-8") as handle:
                result = self.solve(part, handle)
        elif stdin.isatty():
            raise UsageError("an input file or piped input is required")
        else:
            result = self.solve(part, stdin)

        print(result, file=stdout)
        return result