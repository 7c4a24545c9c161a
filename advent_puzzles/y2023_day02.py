"""Cube games: checking draws against a bag's contents."""

from __future__ import annotations

import re

LIMITS = {"red": 12, "green": 13, "blue": 14}
COLOURS = ("red", "green", "blue")


def _counts(line: str, colour: str) -> list[int]:
    pattern = re.compile(rf"([0-9]+)\s+({re.escape(colour)})", re.ASCII)
    return [int(match.group(1)) for match in pattern.finditer(line)]


def colour_within_limit(line: str, colour: str, limit: int) -> bool:
    """True if the colour is drawn at least once and never more than the limit."""
    counts = _counts(line, colour)
    return bool(counts) and all(count <= limit for count in counts)


def fewest_cubes(line: str, colour: str) -> int:
    """The largest number of cubes of one colour drawn in the game, or 0."""
    return max(_counts(line, colour), default=0)


def part1(text: str) -> int:
    """Sum of the line numbers (from 1) of the games possible with the bag."""
    return sum(
        game_id
        for game_id, line in enumerate(text.splitlines(), start=1)
        if all(colour_within_limit(line, colour, limit) for colour, limit in LIMITS.items())
    )


def part2(text: str) -> int:
    """Sum of the powers of the smallest bag for each game."""
    total = 0
    for line in text.splitlines():
        red, green, blue = (fewest_cubes(line, colour) for colour in COLOURS)
        total += red * green * blue
    return total