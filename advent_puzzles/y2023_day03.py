"""Engine schematic: part numbers and gear ratios.

The schematic is expected to carry a border of '.' on every side; numbers on
the first and last row are never counted as part numbers.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

_NUMBER = re.compile(r"[0-9]+")
_NEIGHBOURS = ((0, -1), (0, 1), (-1, -1), (-1, 0), (-1, 1), (1, -1), (1, 0), (1, 1))

Grid = Sequence[Sequence[str]]


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _cell(grid: Grid, row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return "."


def is_part_number(grid: Grid, row: int, start: int, end: int) -> bool:
    """True if the number spanning columns start..end touches a symbol."""
    if not 0 < row < len(grid) - 1:
        return False
    if _cell(grid, row, start - 1) != "." or _cell(grid, row, end + 1) != ".":
        return True
    for r in (row - 1, row + 1):
        for c in range(start - 1, end + 2):
            ch = _cell(grid, r, c)
            if not (_is_digit(ch) or ch == "."):
                return True
    return False


def find_number(grid: Grid, row: int, col: int) -> int:
    """The whole number that the digit at (row, col) belongs to."""
    left = col
    while _is_digit(_cell(grid, row, left)):
        left -= 1
    right = col + 1
    while _is_digit(_cell(grid, row, right)):
        right += 1
    digits = "".join(_cell(grid, row, c) for c in range(left + 1, right))
    if not digits:
        raise ValueError(f"no number at row {row}, column {col}")
    return int(digits)


def gear_ratio(grid: Grid, row: int, col: int) -> int:
    """Product of the two distinct numbers next to (row, col), or 0."""
    found: list[int] = []
    for dr, dc in _NEIGHBOURS:
        r, c = row + dr, col + dc
        if _is_digit(_cell(grid, r, c)):
            number = find_number(grid, r, c)
            if number not in found:
                found.append(number)
    if len(found) != 2:
        return 0
    first, second = found
    return first * second


def part1(text: str) -> int:
    """Sum of all part numbers in the schematic."""
    grid = text.splitlines()
    return sum(
        int(match.group())
        for row, line in enumerate(grid)
        for match in _NUMBER.finditer(line)
        if is_part_number(grid, row, match.start(), match.end() - 1)
    )


def part2(text: str) -> int:
    """Sum of the gear ratios of every '*' in the schematic."""
    grid = text.splitlines()
    return sum(
        gear_ratio(grid, row, col)
        for row, line in enumerate(grid)
        for col, ch in enumerate(line)
        if ch == "*"
    )