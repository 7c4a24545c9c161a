"""Scratchcards: counting winning numbers."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable

_NUMBER = re.compile(r"[0-9]+")


def parse_card(line: str) -> tuple[list[int], list[int]]:
    """Split a card line into its winning numbers and the numbers held."""
    head, sep, body = line.partition(": ")
    if not sep:
        raise ValueError(f"card line has no ': ' separator: {line!r}")
    parts = body.split("|")
    if len(parts) < 2:
        raise ValueError(f"card line has no '|' separator: {line!r}")
    winning = [int(n) for n in _NUMBER.findall(parts[0])]
    mine = [int(n) for n in _NUMBER.findall(parts[1])]
    return winning, mine


def count_matches(winning: Iterable[int], mine: Iterable[int]) -> int:
    """Number of pairs of equal numbers between the two lists."""
    counts = Counter(winning)
    return sum(counts[number] for number in mine)


def _matches(text: str) -> list[int]:
    return [count_matches(*parse_card(line)) for line in text.splitlines()]


def part1(text: str) -> int:
    """Total points: each card with n matches is worth 2 ** (n - 1)."""
    return sum(2 ** (m - 1) for m in _matches(text) if m > 0)


def part2(text: str) -> int:
    """Total cards held once every card has won copies of those that follow."""
    matches = _matches(text)
    copies = [1] * len(matches)
    for index, won in enumerate(matches):
        for following in range(index + 1, min(index + 1 + won, len(copies))):
            copies[following] += copies[index]
    return sum(copies)