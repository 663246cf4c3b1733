"""Small numeric and sequence helpers shared by the puzzle solutions."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")

_INT_RE = re.compile(r"[+-]?[0-9]+")


class LCMArgumentError(ValueError):
    """Raised when fewer than two numbers are given to :func:`lcm`."""

    def __init__(self) -> None:
        super().__init__("LCM requires at least two arguments")


def permutations(x: Sequence[T]) -> Iterator[list[T]]:
    """Yield every permutation of ``x`` as a new list.

    The order follows a factorial-number-system walk, so it differs from
    :func:`itertools.permutations`.
    """
    items = list(x)
    size = len(items)
    if not size:
        return
    perm = [0] * size
    while perm[0] < size:
        result = items.copy()
        for i, offset in enumerate(perm):
            result[i], result[i + offset] = result[i + offset], result[i]
        yield result

        for i in reversed(range(size)):
            if i == 0 or perm[i] < size - i - 1:
                perm[i] += 1
                break
            perm[i] = 0


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b``."""
    while b:
        a, b = b, a % b
    return a


def lcm(*args: int) -> int:
    """Return the least common multiple of two or more integers."""
    if len(args) < 2:
        raise LCMArgumentError()
    first, second, *rest = args
    result = first * second // gcd(first, second)
    for value in rest:
        result = lcm(result, value)
    return result


def int_pow(x: int, y: int) -> int:
    """Return ``x ** y`` by binary exponentiation; ``y`` must be non-negative."""
    if y < 0:
        raise ValueError(f"negative exponent: {y}")
    result = 1
    while y:
        if y & 1:
            result *= x
        y >>= 1
        x *= x
    return result


def parse_int(s: str) -> int:
    """Parse a strictly decimal integer with an optional sign."""
    if not _INT_RE.fullmatch(s):
        raise ValueError(f"invalid integer: {s!r}")
    return int(s)


def string_to_int_list(s: str, sep: str) -> list[int]:
    """Split ``s`` on ``sep`` and parse every non-empty field as an integer."""
    fields = list(s) if sep == "" else s.split(sep)
    return [parse_int(field) for field in fields if field]