"""Reactor reports: checking that levels change gradually in one direction."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MAX_STEP = 3


def _gradual(levels: Sequence[int]) -> bool:
    steps = [later - earlier for earlier, later in zip(levels, levels[1:])]
    return all(1 <= step <= MAX_STEP for step in steps) or all(
        -MAX_STEP <= step <= -1 for step in steps
    )


def _levels(report: Iterable[int]) -> list[int]:
    levels = list(report)
    if len(levels) < 2:
        raise ValueError("a report needs at least two levels")
    return levels


def is_safe(report: Iterable[int]) -> bool:
    """True if the levels all rise or all fall, by 1 to 3 at each step."""
    return _gradual(_levels(report))


def is_safe_with_dampener(report: Iterable[int]) -> bool:
    """True if the report is safe once at most one level is removed."""
    levels = _levels(report)
    return any(
        _gradual(levels[:index] + levels[index + 1 :]) for index in range(len(levels))
    )


def _reports(text: str) -> list[list[int]]:
    return [[int(field) for field in line.split()] for line in text.splitlines() if line.split()]


def part1(text: str) -> int:
    """Number of safe reports."""
    return sum(is_safe(report) for report in _reports(text))


def part2(text: str) -> int:
    """Number of reports that are safe with the problem dampener."""
    return sum(is_safe_with_dampener(report) for report in _reports(text))