"""Hoof It: scoring and rating hiking trails on a topographic map."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from functools import lru_cache
from typing import Optional

from advent_puzzles.grid import parse_char_grid

TRAIL_START = 0
TRAIL_END = 9
_DIGITS = "0123456789"
_STEPS = ((1, 0), (0, 1), (0, -1), (-1, 0))

Position = tuple[int, int]
Height = Optional[int]
Grid = Sequence[Sequence[Height]]


def _height(grid: Grid, row: int, col: int) -> Height:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


def _uphill(grid: Grid, pos: Position) -> Iterator[Position]:
    row, col = pos
    height = grid[row][col]
    if height is None:
        return
    for dr, dc in _STEPS:
        nxt = (row + dr, col + dc)
        if _height(grid, *nxt) == height + 1:
            yield nxt


def _check_start(grid: Grid, start: Position) -> None:
    if _height(grid, *start) != TRAIL_START:
        raise ValueError(f"a trailhead must have height {TRAIL_START}: {start}")


def trailhead_score(grid: Grid, start: Position) -> int:
    """Number of distinct height-9 cells reachable uphill one step at a time."""
    _check_start(grid, start)
    seen = {start}
    queue = deque([start])
    peaks = 0
    while queue:
        pos = queue.popleft()
        if grid[pos[0]][pos[1]] == TRAIL_END:
            peaks += 1
            continue
        for nxt in _uphill(grid, pos):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return peaks


def trailhead_rating(grid: Grid, start: Position) -> int:
    """Number of distinct uphill trails from the trailhead to any height-9 cell."""
    _check_start(grid, start)

    @lru_cache(maxsize=None)
    def trails(pos: Position) -> int:
        if grid[pos[0]][pos[1]] == TRAIL_END:
            return 1
        return sum(trails(nxt) for nxt in _uphill(grid, pos))

    return trails(start)


def _heights(text: str) -> list[list[Height]]:
    """Digits become heights; any other character is impassable."""
    return [
        [int(ch) if ch in _DIGITS else None for ch in row]
        for row in parse_char_grid(text)
    ]


def _trailheads(grid: Grid) -> list[Position]:
    return [
        (row, col)
        for row, line in enumerate(grid)
        for col, height in enumerate(line)
        if height == TRAIL_START
    ]


def part1(text: str) -> int:
    """Sum of the scores of all trailheads."""
    grid = _heights(text)
    return sum(trailhead_score(grid, start) for start in _trailheads(grid))


def part2(text: str) -> int:
    """Sum of the ratings of all trailheads."""
    grid = _heights(text)
    return sum(trailhead_rating(grid, start) for start in _trailheads(grid))