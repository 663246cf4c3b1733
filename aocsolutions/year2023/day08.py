"""Haunted wasteland: following left/right directions through a network."""

from __future__ import annotations

import datetime
import re
from dataclasses import dataclass, field
from typing import TextIO

from aocsolutions.day import Day
from aocsolutions.util import lcm

_NODE_RE = re.compile(r"(?P<name>.*) = \((?P<left>.*), (?P<right>.*)\)")
_DIRECTIONS = {"L": 0, "R": 1}


@dataclass
class Network:
    directions: list[int] = field(default_factory=list)
    nodes: dict[str, tuple[str, str]] = field(default_factory=dict)

    @classmethod
    def decode(cls, stream: TextIO) -> Network:
        network = cls()
        for raw in stream:
            line = raw.removesuffix("\n").removesuffix("\r")
            if not line:
                continue
            if not network.directions:
                for char in line:
                    if char not in _DIRECTIONS:
                        raise ValueError(f"invalid direction: {char}")
                    network.directions.append(_DIRECTIONS[char])
            else:
                match = _NODE_RE.fullmatch(line)
                if match is None:
                    raise ValueError(f"no match found for {line}")
                network.nodes[match["name"]] = (match["left"], match["right"])
        return network

    def steps(self, at: str, dst_ends_with: bool) -> int:
        """Steps from ``at`` to ``ZZZ``, or to any node ending in ``Z``."""
        if not self.directions:
            raise ValueError("no directions")
        steps = 0
        while True:
            if dst_ends_with:
                if at.endswith("Z"):
                    return steps
            elif at == "ZZZ":
                return steps
            try:
                node = self.nodes[at]
            except KeyError:
                raise ValueError(f"no map entry found for {at}") from None
            at = node[self.directions[steps % len(self.directions)]]
            steps += 1

    def ghost_steps(self) -> int:
        """Steps until every node ending in ``A`` reaches a node ending in ``Z``."""
        counts = [self.steps(name, True) for name in self.nodes if name.endswith("A")]
        return lcm(*counts)


def parse(stream: TextIO) -> Network:
    return Network.decode(stream)


def part1(network: Network) -> int:
    return network.steps("AAA", False)


def part2(network: Network) -> int:
    return network.ghost_steps()


def new() -> Day[Network, int]:
    return Day(
        date=datetime.date(2023, 12, 8),
        parse=parse,
        part1=part1,
        part2=part2,
    )