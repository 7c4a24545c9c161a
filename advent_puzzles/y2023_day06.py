"""Boat races: counting the ways to beat the record distance."""

from __future__ import annotations

import math
import re

_NUMBER = re.compile(r"[0-9]+")


def _travelled(hold: int, time: int) -> int:
    return hold * (time - hold)


def count_wins(time: int, distance: int) -> int:
    """Number of button hold times in [0, time) that travel beyond distance."""
    if time <= 0:
        return 0
    peak = time // 2
    if _travelled(peak, time) <= distance:
        return 0
    discriminant = time * time - 4 * distance
    low = max(0, (time - math.isqrt(max(discriminant, 0))) // 2)
    while low > 0 and _travelled(low - 1, time) > distance:
        low -= 1
    while _travelled(low, time) <= distance:
        low += 1
    high = min(time - low, time - 1)
    return high - low + 1


def _values(line: str, label: str) -> list[str]:
    name, sep, rest = line.partition(":")
    if not sep or name.strip() != label:
        raise ValueError(f"expected a {label!r} line, got {line!r}")
    return _NUMBER.findall(rest)


def _lines(text: str) -> tuple[list[str], list[str]]:
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) != 2:
        raise ValueError("race sheet must hold a Time line and a Distance line")
    times = _values(lines[0], "Time")
    distances = _values(lines[1], "Distance")
    if len(times) != len(distances):
        raise ValueError("every race needs both a time and a distance")
    return times, distances


def parse_races(text: str) -> list[tuple[int, int]]:
    """The (time, record distance) pairs of the race sheet."""
    times, distances = _lines(text)
    return [(int(t), int(d)) for t, d in zip(times, distances)]


def part1(text: str) -> int:
    """Product of the ways to win each race."""
    return math.prod(count_wins(time, distance) for time, distance in parse_races(text))


def part2(text: str) -> int:
    """Ways to win the single race read by ignoring the spaces between digits."""
    times, distances = _lines(text)
    if not times:
        raise ValueError("race sheet holds no races")
    return count_wins(int("".join(times)), int("".join(distances)))