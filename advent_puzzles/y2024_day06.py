"""Guard patrol: tracing a guard's route and finding obstacles that trap it."""

from __future__ import annotations

from collections.abc import Sequence

from advent_puzzles.grid import parse_char_grid

Position = tuple[int, int]
Grid = Sequence[Sequence[str]]

OBSTACLE = "#"
BORDER = "N"
GUARD = "^"

# Up, right, down, left: turning right moves one step along this tuple.
_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _inside(grid: Grid, pos: Position) -> bool:
    row, col = pos
    return 0 <= row < len(grid) and 0 <= col < len(grid[row]) and grid[row][col] != BORDER


def _blocked(grid: Grid, pos: Position, obstacle: Position | None) -> bool:
    return pos == obstacle or (_inside(grid, pos) and grid[pos[0]][pos[1]] == OBSTACLE)


def _patrol(
    grid: Grid, start: Position, obstacle: Position | None = None
) -> tuple[set[Position], bool]:
    """Cells the guard walks on, and whether the walk repeats forever."""
    pos = start
    heading = 0
    visited = {start}
    states: set[tuple[Position, int]] = set()
    while True:
        state = (pos, heading)
        if state in states:
            return visited, True
        states.add(state)
        for _ in range(len(_DIRECTIONS)):
            dr, dc = _DIRECTIONS[heading]
            nxt = (pos[0] + dr, pos[1] + dc)
            if not _blocked(grid, nxt, obstacle):
                break
            heading = (heading + 1) % len(_DIRECTIONS)
        else:
            raise ValueError(f"the guard at {pos} is boxed in")
        if not _inside(grid, nxt):
            return visited, False
        pos = nxt
        visited.add(pos)


def visited_cells(grid: Grid, start: Position) -> set[Position]:
    """Every cell the guard stands on before leaving the map."""
    visited, looped = _patrol(grid, start)
    if looped:
        raise ValueError("the guard never leaves the map")
    return visited


def causes_loop(grid: Grid, start: Position, obstacle: Position) -> bool:
    """True if an extra obstacle at the given cell traps the guard in a loop."""
    if obstacle == start:
        raise ValueError("an obstacle cannot be placed on the guard's start")
    return _patrol(grid, start, obstacle)[1]


def _find_guard(grid: Grid) -> Position:
    starts = [
        (row, col)
        for row, line in enumerate(grid)
        for col, ch in enumerate(line)
        if ch == GUARD
    ]
    if not starts:
        raise ValueError(f"the map holds no guard {GUARD!r}")
    return starts[-1]


def part1(text: str) -> int:
    """Number of distinct cells the guard visits."""
    grid = parse_char_grid(text)
    return len(visited_cells(grid, _find_guard(grid)))


def part2(text: str) -> int:
    """Number of open cells where one new obstacle traps the guard in a loop."""
    grid = parse_char_grid(text)
    start = _find_guard(grid)
    # An obstacle off the guard's route cannot change it.
    candidates = visited_cells(grid, start) - {start}
    return sum(causes_loop(grid, start, cell) for cell in candidates)