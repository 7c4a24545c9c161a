"""Cosmic expansion: distances between galaxies in an expanding universe."""

from __future__ import annotations

import bisect
import itertools

GALAXY = "#"


def galaxy_distance_sum(text: str, expansion: int) -> int:
    """Sum of the shortest distances between every pair of galaxies.

    Every row and column holding no galaxy counts as ``expansion`` rows or
    columns.
    """
    if expansion < 1:
        raise ValueError(f"expansion must be at least 1, got {expansion}")
    lines = text.splitlines()
    galaxies = [
        (row, col)
        for row, line in enumerate(lines)
        for col, ch in enumerate(line)
        if ch == GALAXY
    ]
    used_rows = {row for row, _ in galaxies}
    used_cols = {col for _, col in galaxies}
    width = max((len(line) for line in lines), default=0)
    empty_rows = [row for row in range(len(lines)) if row not in used_rows]
    empty_cols = [col for col in range(width) if col not in used_cols]
    extra = expansion - 1

    def shifted(value: int, empties: list[int]) -> int:
        return value + extra * bisect.bisect_left(empties, value)

    positions = [(shifted(row, empty_rows), shifted(col, empty_cols)) for row, col in galaxies]
    return sum(
        abs(r1 - r2) + abs(c1 - c2)
        for (r1, c1), (r2, c2) in itertools.combinations(positions, 2)
    )


def part1(text: str) -> int:
    """Distance sum with every empty row and column doubled."""
    return galaxy_distance_sum(text, 2)


def part2(text: str) -> int:
    """Distance sum with every empty row and column a million times wider."""
    return galaxy_distance_sum(text, 1_000_000)