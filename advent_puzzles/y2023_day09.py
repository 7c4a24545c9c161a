"""Sensor readings: extrapolating sequences by repeated differences."""

from __future__ import annotations

import re
from collections.abc import Iterable

_NUMBER = re.compile(r"-?\b[0-9]+\b")


def next_value(values: Iterable[int]) -> int:
    """The value that follows the sequence, found through its differences."""
    row = list(values)
    total = 0
    while any(row):
        total += row[-1]
        row = [later - earlier for earlier, later in zip(row, row[1:])]
    return total


def _histories(text: str) -> list[list[int]]:
    return [[int(n) for n in _NUMBER.findall(line)] for line in text.splitlines()]


def part1(text: str) -> int:
    """Sum of the next value of every history."""
    return sum(next_value(history) for history in _histories(text))


def part2(text: str) -> int:
    """Sum of the value before the first of every history."""
    return sum(next_value(reversed(history)) for history in _histories(text))