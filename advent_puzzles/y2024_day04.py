"""Word search: finding XMAS in every direction and MAS crosses."""

from __future__ import annotations

from collections.abc import Sequence

from advent_puzzles.grid import parse_char_grid

WORD = "XMAS"

Grid = Sequence[Sequence[str]]

_DIRECTIONS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def _cell(grid: Grid, row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return ""


def count_xmas(grid: Grid, row: int, col: int) -> int:
    """Number of directions in which the rest of XMAS follows (row, col)."""
    tail = WORD[1:]
    return sum(
        all(
            _cell(grid, row + dr * step, col + dc * step) == ch
            for step, ch in enumerate(tail, start=1)
        )
        for dr, dc in _DIRECTIONS
    )


def is_x_mas(grid: Grid, row: int, col: int) -> bool:
    """True if both diagonals through (row, col) read MAS in either direction."""
    diagonals = (
        (_cell(grid, row - 1, col - 1), _cell(grid, row + 1, col + 1)),
        (_cell(grid, row - 1, col + 1), _cell(grid, row + 1, col - 1)),
    )
    return all(sorted(pair) == ["M", "S"] for pair in diagonals)


def part1(text: str) -> int:
    """Number of times XMAS appears, in any of the eight directions."""
    grid = parse_char_grid(text)
    return sum(
        count_xmas(grid, row, col)
        for row, line in enumerate(grid)
        for col, ch in enumerate(line)
        if ch == WORD[0]
    )


def part2(text: str) -> int:
    """Number of A cells at the centre of two crossing MAS words."""
    grid = parse_char_grid(text)
    return sum(
        is_x_mas(grid, row, col)
        for row, line in enumerate(grid)
        for col, ch in enumerate(line)
        if ch == "A"
    )