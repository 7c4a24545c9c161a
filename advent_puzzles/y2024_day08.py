"""Resonant collinearity: antinodes created by pairs of same-frequency antennas."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator, Sequence
from itertools import permutations

from advent_puzzles.grid import parse_char_grid

EMPTY = "."

Position = tuple[int, int]
Grid = Sequence[Sequence[str]]


def _size(grid: Grid) -> tuple[int, int]:
    height = len(grid)
    width = len(grid[0]) if grid else 0
    return height, width


def _inside(size: tuple[int, int], pos: Position) -> bool:
    height, width = size
    row, col = pos
    return 0 <= row < height and 0 <= col < width


def _antennas(grid: Grid) -> dict[str, list[Position]]:
    groups: dict[str, list[Position]] = defaultdict(list)
    for row, line in enumerate(grid):
        for col, ch in enumerate(line):
            if ch != EMPTY:
                groups[ch].append((row, col))
    return groups


def _pairs(grid: Grid) -> Iterator[tuple[Position, Position]]:
    """Every ordered pair of distinct antennas sharing a frequency."""
    for positions in _antennas(grid).values():
        yield from permutations(positions, 2)


def antinodes(grid: Grid) -> set[Position]:
    """Cells twice as far from one antenna of a pair as from the other."""
    size = _size(grid)
    found: set[Position] = set()
    for (r1, c1), (r2, c2) in _pairs(grid):
        point = (2 * r2 - r1, 2 * c2 - c1)
        if _inside(size, point):
            found.add(point)
    return found


def resonant_antinodes(grid: Grid) -> set[Position]:
    """Cells on the line through a pair, at whole multiples of their spacing."""
    size = _size(grid)
    found: set[Position] = set()
    for (r1, c1), (r2, c2) in _pairs(grid):
        dr, dc = r2 - r1, c2 - c1
        point = (r2, c2)
        while _inside(size, point):
            found.add(point)
            point = (point[0] + dr, point[1] + dc)
    return found


def part1(text: str) -> int:
    """Number of distinct cells holding an antinode."""
    return len(antinodes(parse_char_grid(text)))


def part2(text: str) -> int:
    """Number of distinct cells holding a resonant antinode."""
    return len(resonant_antinodes(parse_char_grid(text)))